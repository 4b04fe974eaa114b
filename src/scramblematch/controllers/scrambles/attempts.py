"""Per-attempt handling for multi-attempt events.

Fewest moves and multi-blind rounds are made of separately scrambled
attempts. Uploaded sheets for these events are split into one scramble set
per attempt so each attempt can be matched on its own; the export side
recombines them (see :mod:`scramblematch.controllers.scrambles.exporter`).
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
from typing import Iterable, List

from scramblematch.constants import ATTEMPT_TITLE_TEMPLATE, MULTI_ATTEMPT_EVENTS
from scramblematch.models.scrambles import InternalScrambleSet, ScrambleSetIdAllocator
from scramblematch.type_hints import EventId
from scramblematch.utils import setup_logger

logger = setup_logger(__name__)


def is_multi_attempt(event_id: EventId) -> bool:
    """Whether scrambles of ``event_id`` are tracked per attempt."""
    return event_id in MULTI_ATTEMPT_EVENTS


def split_if_multi_attempt(
    scramble_set: InternalScrambleSet, allocator: ScrambleSetIdAllocator
) -> List[InternalScrambleSet]:
    """Split a multi-attempt sheet into one scramble set per attempt.

    Every sequence becomes its own set, numbered 1..N in sheet order, with a
    fresh id from ``allocator``. Sets of other events are returned as is.

    Args:
        scramble_set: Imported sheet
        allocator: Id source for the per-attempt sets

    Returns:
        The per-attempt sets, or ``[scramble_set]``
    """
    if not is_multi_attempt(scramble_set.event_id):
        return [scramble_set]

    attempts = [
        replace(
            scramble_set,
            id=allocator.next_id(),
            scrambles=(sequence,),
            title=ATTEMPT_TITLE_TEMPLATE.format(title=scramble_set.title, number=number),
            generated_attempt_number=number,
            attempt_number=number,
        )
        for number, sequence in enumerate(scramble_set.scrambles, start=1)
    ]
    logger.debug(
        f"Split '{scramble_set.title}' ({scramble_set.event_id}) into {len(attempts)} attempts"
    )
    return attempts


def split_multi_attempt_sheets(
    scramble_sets: Iterable[InternalScrambleSet], allocator: ScrambleSetIdAllocator
) -> List[InternalScrambleSet]:
    """Apply :func:`split_if_multi_attempt` to every set, keeping order."""
    result: List[InternalScrambleSet] = []
    for scramble_set in scramble_sets:
        result.extend(split_if_multi_attempt(scramble_set, allocator))
    return result
