# Scramble Match
# Copyright (C) 2025  Scramble Match developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

# --- Constants ---
DEFAULT_WCIF_FILENAME = "wcif.json"
RESULTS_FILE_TEMPLATE = "Results for {name}.json"

# Event ids with special scramble handling
EVENT_FEWEST_MOVES = "333fm"
EVENT_MULTI_BLIND = "333mbf"

# Events whose rounds are tracked attempt by attempt
MULTI_ATTEMPT_EVENTS = frozenset({EVENT_FEWEST_MOVES, EVENT_MULTI_BLIND})

# Separator between the cubes of one multi-blind attempt
MULTI_BLIND_SCRAMBLE_SEPARATOR = "\n"

# Suffix appended to split sheet titles, e.g. "3x3x3 Fewest Moves Round 1 Attempt 2"
ATTEMPT_TITLE_TEMPLATE = "{title} Attempt {number}"

# WCIF round ids look like "333-r1"
ROUND_ID_SEPARATOR = "-r"

# Results submission document
RESULTS_FORMAT_VERSION = "WCA Results 0.3"
SCRAMBLE_PROGRAM_NAME = "Scramble Match"

# Group letters start at "A"
GROUP_PREFIX_START = ord("A")

# WCA round type ids, regular rounds
ROUND_TYPE_FIRST = "1"
ROUND_TYPE_SECOND = "2"
ROUND_TYPE_SEMI_FINAL = "3"
ROUND_TYPE_FINAL = "f"

# WCA round type ids, combined rounds (round has a cutoff)
ROUND_TYPE_COMBINED_FIRST = "d"
ROUND_TYPE_COMBINED_SECOND = "e"
ROUND_TYPE_COMBINED_THIRD = "g"
ROUND_TYPE_COMBINED_FINAL = "c"

REGULAR_ROUND_TYPES = (ROUND_TYPE_FIRST, ROUND_TYPE_SECOND, ROUND_TYPE_SEMI_FINAL)
COMBINED_ROUND_TYPES = (
    ROUND_TYPE_COMBINED_FIRST,
    ROUND_TYPE_COMBINED_SECOND,
    ROUND_TYPE_COMBINED_THIRD,
)

# Logging
LOG_LEVEL_ENV_VAR = "SCRAMBLEMATCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Output
DEFAULT_OUTPUT_INDENT = 2
