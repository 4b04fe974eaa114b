"""Data model for a competition event."""

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

from scramblematch.exceptions import InvalidCompetitionFileException
from scramblematch.type_hints import EventId
from .round_data import RoundData


@dataclass(frozen=True)
class Event:
    """An event and its rounds.

    Attributes
    ----------
    id : str
        WCA event id, e.g. ``"333"`` or ``"333fm"``.
    rounds : tuple of RoundData
        Rounds in order.
    extra : dict
        Remaining WCIF event members, passed through untouched.
    """

    id: EventId
    rounds: Tuple[RoundData, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize event to dictionary."""
        return {
            **self.extra,
            "id": self.id,
            "rounds": [r.to_dict() for r in self.rounds],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Event":
        """Deserialize a WCIF event."""
        if "id" not in data:
            raise InvalidCompetitionFileException("Event without an id")
        extra = {k: v for k, v in data.items() if k not in ("id", "rounds")}
        return cls(
            id=data["id"],
            rounds=tuple(RoundData.from_dict(r) for r in data.get("rounds") or ()),
            extra=extra,
        )
