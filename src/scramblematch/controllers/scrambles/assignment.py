"""Assignment of uploaded scramble sets to competition rounds.

This module matches rounds without scrambles to uploaded sheets by event and
round number, and clears assignments. Both operations return a new
:class:`Competition`; the one passed in is never modified.
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

from dataclasses import replace
from typing import Iterable, List, Set, Tuple

from scramblematch.models.competition import Competition, Event, RoundData
from scramblematch.models.scrambles import InternalScrambleSet
from scramblematch.type_hints import EventId, ScrambleSetId, UploadedPool
from scramblematch.utils import setup_logger
from .attempts import is_multi_attempt

logger = setup_logger(__name__)


def used_scramble_ids_for_event(
    events: Iterable[Event], event_id: EventId
) -> Set[ScrambleSetId]:
    """Ids of every scramble set already attached to a round of ``event_id``."""
    return {
        scramble_set.id
        for event in events
        if event.id == event_id
        for round_data in event.rounds
        for scramble_set in round_data.scramble_sets
    }


def all_scrambles_for_event(
    uploaded_pool: UploadedPool, event_id: EventId, used_ids: Set[ScrambleSetId]
) -> List[InternalScrambleSet]:
    """Uploaded scramble sets for ``event_id`` that are not in ``used_ids``."""
    return [
        sheet
        for uploaded in uploaded_pool
        for sheet in uploaded.sheets
        if sheet.event_id == event_id and sheet.id not in used_ids
    ]


def scramble_sets_for_round(
    used_ids: Set[ScrambleSetId],
    round_data: RoundData,
    uploaded_pool: UploadedPool,
) -> Tuple[InternalScrambleSet, ...]:
    """Find the scramble sets for one round without scrambles.

    Uploaded files are scanned in upload order and the first file holding
    at least one unused sheet for the round's event and number supplies all
    of its matching sheets. Matching sheets in later files are ignored: they
    are likely extra scrambles for rounds that cannot be identified
    automatically.

    Args:
        used_ids: Ids in use before the current assignment pass
        round_data: The round to fill
        uploaded_pool: Uploaded files, in upload order

    Returns:
        The matched sets; empty if no file matches
    """
    first_matching_sheets: List[InternalScrambleSet] = []
    for uploaded in uploaded_pool:
        first_matching_sheets = [
            sheet
            for sheet in uploaded.sheets
            if sheet.id not in used_ids
            and sheet.event_id == round_data.event_id
            and sheet.round_number == round_data.number
        ]
        if first_matching_sheets:
            logger.debug(
                f"Round {round_data.id}: {len(first_matching_sheets)} sets "
                f"from '{uploaded.competition_name}'"
            )
            break

    if is_multi_attempt(round_data.event_id):
        # Attempts are numbered as generated
        return tuple(
            replace(sheet, attempt_number=sheet.generated_attempt_number)
            for sheet in first_matching_sheets
        )
    return tuple(first_matching_sheets)


def auto_assign(competition: Competition, uploaded_pool: UploadedPool) -> Competition:
    """Fill every round without scrambles from the uploaded files.

    Rounds that already have scramble sets are left untouched, and their
    ids are excluded from matching. The used ids are computed once, before
    the pass: a given (event, round) is never looked up twice in one pass.

    Args:
        competition: Current competition file
        uploaded_pool: Uploaded files, in upload order

    Returns:
        A new competition with the matched scramble sets attached
    """
    used_ids_by_event = {
        event.id: used_scramble_ids_for_event(competition.events, event.id)
        for event in competition.events
    }

    assigned = 0
    unmatched = 0
    events = []
    for event in competition.events:
        rounds = []
        for round_data in event.rounds:
            if round_data.is_assigned:
                rounds.append(round_data)
                continue
            scramble_sets = scramble_sets_for_round(
                used_ids_by_event[event.id], round_data, uploaded_pool
            )
            if scramble_sets:
                assigned += 1
            else:
                unmatched += 1
            rounds.append(replace(round_data, scramble_sets=scramble_sets))
        events.append(replace(event, rounds=tuple(rounds)))

    logger.info(f"Auto-assign: {assigned} rounds assigned, {unmatched} left without scrambles")
    return replace(competition, events=tuple(events))


def clear_assignments(competition: Competition) -> Competition:
    """Remove the scramble sets of every round."""
    return replace(
        competition,
        events=tuple(
            replace(
                event,
                rounds=tuple(replace(r, scramble_sets=()) for r in event.rounds),
            )
            for event in competition.events
        ),
    )
