"""Conversion of internal scramble sets to WCIF scramble sets."""

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

from enum import Enum
from itertools import groupby
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from scramblematch.constants import (
    EVENT_FEWEST_MOVES,
    EVENT_MULTI_BLIND,
    GROUP_PREFIX_START,
    MULTI_BLIND_SCRAMBLE_SEPARATOR,
)
from scramblematch.models.scrambles import InternalScrambleSet, ScrambleSet
from scramblematch.type_hints import EventId


class CombinationStrategy(Enum):
    """How the scramble sets of one round are written to the WCIF."""

    IDENTITY = "identity"
    FLATTEN_SORTED = "flatten_sorted"
    GROUP_AND_JOIN = "group_and_join"


# Events not listed here use CombinationStrategy.IDENTITY
COMBINATION_STRATEGIES: Dict[EventId, CombinationStrategy] = {
    EVENT_FEWEST_MOVES: CombinationStrategy.FLATTEN_SORTED,
    EVENT_MULTI_BLIND: CombinationStrategy.GROUP_AND_JOIN,
}


def prefix_for_index(index: int) -> str:
    """Group letter for a 0-based index: 0 -> "A", 1 -> "B", ..."""
    return chr(GROUP_PREFIX_START + index)


def _attempt_sort_key(scramble_set: InternalScrambleSet) -> Tuple[bool, int]:
    # Sets without an attempt number go last
    number: Optional[int] = scramble_set.attempt_number
    return (number is None, number or 0)


def _identity(scramble_sets: Sequence[InternalScrambleSet]) -> List[ScrambleSet]:
    return [s.to_scramble_set() for s in scramble_sets]


def _flatten_sorted(scramble_sets: Sequence[InternalScrambleSet]) -> List[ScrambleSet]:
    # The WCIF cannot tell which scramble was for which attempt, so the
    # attempts are put in order in a single set.
    ordered = sorted(scramble_sets, key=_attempt_sort_key)
    return [
        ScrambleSet(
            id=scramble_sets[0].id,
            scrambles=tuple(seq for s in ordered for seq in s.scrambles),
        )
    ]


def _attempt_entries(ordered: Sequence[InternalScrambleSet]) -> Iterator[str]:
    for number, group in groupby(ordered, key=lambda s: s.attempt_number):
        if number is None:
            # Loaded from a WCIF: already one entry per attempt
            for s in group:
                yield from s.scrambles
        else:
            yield MULTI_BLIND_SCRAMBLE_SEPARATOR.join(
                seq for s in group for seq in s.scrambles
            )


def _group_and_join(scramble_sets: Sequence[InternalScrambleSet]) -> List[ScrambleSet]:
    # One set with one entry per attempt; an entry holds all the cubes of
    # that attempt, one per line.
    ordered = sorted(scramble_sets, key=_attempt_sort_key)
    return [
        ScrambleSet(id=scramble_sets[0].id, scrambles=tuple(_attempt_entries(ordered)))
    ]


_COMBINERS: Dict[
    CombinationStrategy, Callable[[Sequence[InternalScrambleSet]], List[ScrambleSet]]
] = {
    CombinationStrategy.IDENTITY: _identity,
    CombinationStrategy.FLATTEN_SORTED: _flatten_sorted,
    CombinationStrategy.GROUP_AND_JOIN: _group_and_join,
}


def strategy_for_event(event_id: EventId) -> CombinationStrategy:
    """Combination strategy used when exporting ``event_id``."""
    return COMBINATION_STRATEGIES.get(event_id, CombinationStrategy.IDENTITY)


def to_interchange_scramble_sets(
    event_id: EventId, scramble_sets: Sequence[InternalScrambleSet]
) -> List[ScrambleSet]:
    """Convert the scramble sets of one round to their WCIF form.

    Multi-blind attempts are grouped by attempt number and combined into a
    single set; sets without an attempt number were read back from a WCIF and
    keep one entry per stored scramble. Fewest moves attempts are sorted and
    flattened into a single set, anything else maps one to one.

    Args:
        event_id: Event of the round
        scramble_sets: The round's internal scramble sets

    Returns:
        WCIF scramble sets; empty for empty input
    """
    if not scramble_sets:
        return []
    return _COMBINERS[strategy_for_event(event_id)](scramble_sets)
