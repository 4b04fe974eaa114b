"""Scramble import, matching and export.

This package holds the scramble pipeline: sheets are imported and split per
attempt, matched to rounds, and combined back into WCIF scramble sets.
"""

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

from scramblematch.controllers.scrambles.assignment import (
    all_scrambles_for_event,
    auto_assign,
    clear_assignments,
    scramble_sets_for_round,
    used_scramble_ids_for_event,
)
from scramblematch.controllers.scrambles.attempts import (
    is_multi_attempt,
    split_if_multi_attempt,
    split_multi_attempt_sheets,
)
from scramblematch.controllers.scrambles.exporter import (
    COMBINATION_STRATEGIES,
    CombinationStrategy,
    prefix_for_index,
    strategy_for_event,
    to_interchange_scramble_sets,
)
from scramblematch.controllers.scrambles.importer import (
    import_sheets,
    transform_uploaded_scrambles,
)

__all__ = [
    "import_sheets",
    "transform_uploaded_scrambles",
    "is_multi_attempt",
    "split_if_multi_attempt",
    "split_multi_attempt_sheets",
    "auto_assign",
    "clear_assignments",
    "scramble_sets_for_round",
    "used_scramble_ids_for_event",
    "all_scrambles_for_event",
    "CombinationStrategy",
    "COMBINATION_STRATEGIES",
    "strategy_for_event",
    "prefix_for_index",
    "to_interchange_scramble_sets",
]
