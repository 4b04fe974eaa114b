"""Data model for a competition round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from scramblematch.constants import ROUND_ID_SEPARATOR
from scramblematch.exceptions import InvalidCompetitionFileException
from scramblematch.models.scrambles import InternalScrambleSet
from scramblematch.type_hints import EventId, RoundKey


def round_id(event_id: EventId, number: int) -> str:
    """Build the WCIF round id, e.g. ``("333", 1) -> "333-r1"``."""
    return f"{event_id}{ROUND_ID_SEPARATOR}{number}"


def ids_from_round_id(value: str) -> RoundKey:
    """Split a WCIF round id into ``(event_id, round_number)``.

    Raises:
        InvalidCompetitionFileException: If ``value`` is not of the form "<event>-r<n>"
    """
    event_id, separator, number = value.rpartition(ROUND_ID_SEPARATOR)
    if not separator or not event_id or not number.isdigit():
        raise InvalidCompetitionFileException(f"Invalid round id: {value!r}")
    return event_id, int(number)


@dataclass(frozen=True)
class RoundData:
    """A single round of an event.

    Attributes
    ----------
    event_id : str
        Event the round belongs to.
    number : int
        Round number (1-indexed).
    scramble_sets : tuple of InternalScrambleSet
        Assigned scramble sets. Empty until assignment.
    extra : dict
        Remaining WCIF round members (format, time limit, cutoff, ...),
        passed through untouched.
    """

    event_id: EventId
    number: int
    scramble_sets: Tuple[InternalScrambleSet, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def id(self) -> str:
        """WCIF round id."""
        return round_id(self.event_id, self.number)

    @property
    def is_assigned(self) -> bool:
        """Whether scramble sets have been attached to the round."""
        return len(self.scramble_sets) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round data to dictionary, keeping internal scramble fields."""
        return {
            **self.extra,
            "id": self.id,
            "scrambleSets": [s.to_dict() for s in self.scramble_sets],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoundData":
        """Deserialize a WCIF round.

        A missing ``scrambleSets`` member is read as an empty sequence.
        """
        if "id" not in data:
            raise InvalidCompetitionFileException("Round without an id")
        event_id, number = ids_from_round_id(data["id"])
        extra = {k: v for k, v in data.items() if k not in ("id", "scrambleSets")}
        return cls(
            event_id=event_id,
            number=number,
            scramble_sets=tuple(
                InternalScrambleSet.from_dict(s, event_id, number)
                for s in data.get("scrambleSets") or ()
            ),
            extra=extra,
        )
