"""Export of competition files.

Two documents are produced from a :class:`Competition`: the WCIF itself,
with scramble sets in their interchange shape, and the results submission
file, which borrows the same scramble sets as lettered groups.
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

from typing import Any, Dict, List, Optional

from scramblematch.constants import (
    COMBINED_ROUND_TYPES,
    REGULAR_ROUND_TYPES,
    RESULTS_FORMAT_VERSION,
    ROUND_TYPE_COMBINED_FINAL,
    ROUND_TYPE_FINAL,
    SCRAMBLE_PROGRAM_NAME,
)
from scramblematch.controllers.scrambles import (
    prefix_for_index,
    to_interchange_scramble_sets,
)
from scramblematch.models.competition import Competition, Event, RoundData
from scramblematch.type_hints import RoundKey, WcifScrambleSet
from scramblematch.utils import setup_logger

logger = setup_logger(__name__)


def unassigned_rounds(competition: Competition) -> List[RoundKey]:
    """``(event_id, round_number)`` of every round without scramble sets."""
    return [
        (round_data.event_id, round_data.number)
        for round_data in competition.iter_rounds()
        if not round_data.is_assigned
    ]


def export_available(competition: Competition) -> bool:
    """Whether every round has scramble sets."""
    return not unassigned_rounds(competition)


def round_scramble_sets(round_data: RoundData) -> List[WcifScrambleSet]:
    """WCIF scramble sets of one round."""
    return [
        s.to_dict()
        for s in to_interchange_scramble_sets(round_data.event_id, round_data.scramble_sets)
    ]


def to_wcif(competition: Competition) -> Dict[str, Any]:
    """Build the WCIF document with scramble sets in interchange form."""
    document = competition.to_dict()
    for event_doc, event in zip(document["events"], competition.events):
        for round_doc, round_data in zip(event_doc["rounds"], event.rounds):
            round_doc["scrambleSets"] = round_scramble_sets(round_data)
    return document


def round_type_id(event: Event, round_data: RoundData) -> str:
    """WCA round type id of a round.

    The last round of an event is the final; a round with a cutoff is a
    combined round.
    """
    combined = round_data.extra.get("cutoff") is not None
    if round_data.number == len(event.rounds):
        return ROUND_TYPE_COMBINED_FINAL if combined else ROUND_TYPE_FINAL
    types = COMBINED_ROUND_TYPES if combined else REGULAR_ROUND_TYPES
    if 1 <= round_data.number <= len(types):
        return types[round_data.number - 1]
    return str(round_data.number)


def to_results_json(
    competition: Competition,
    version: str,
    format_version: str = RESULTS_FORMAT_VERSION,
    program_name: Optional[str] = SCRAMBLE_PROGRAM_NAME,
) -> Dict[str, Any]:
    """Build the results submission document.

    Results and persons are left empty; only the scrambles are filled in.

    Args:
        competition: Competition with assigned scrambles
        version: Program version written to ``scrambleProgram``
        format_version: Results format version
        program_name: Program name written in front of ``version``

    Returns:
        The results document
    """
    missing = unassigned_rounds(competition)
    if missing:
        logger.warning(f"Exporting results with {len(missing)} rounds without scrambles")

    events = []
    for event in competition.events:
        rounds = []
        for round_data in event.rounds:
            groups = [
                {
                    "group": prefix_for_index(index),
                    "scrambles": list(scramble_set.scrambles),
                    "extraScrambles": list(scramble_set.extra_scrambles),
                }
                for index, scramble_set in enumerate(
                    to_interchange_scramble_sets(event.id, round_data.scramble_sets)
                )
            ]
            rounds.append(
                {
                    "roundId": round_type_id(event, round_data),
                    "formatId": round_data.extra.get("format"),
                    "results": [],
                    "groups": groups,
                }
            )
        events.append({"eventId": event.id, "rounds": rounds})

    return {
        "formatVersion": format_version,
        "competitionId": competition.id,
        "persons": [],
        "events": events,
        "scrambleProgram": f"{program_name} {version}" if program_name else version,
    }
