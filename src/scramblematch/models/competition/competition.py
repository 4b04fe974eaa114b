"""Data model for a competition file."""

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
from typing import Any, Dict, Iterator, Optional, Tuple

from scramblematch.exceptions import InvalidCompetitionFileException
from .event import Event
from .round_data import RoundData


@dataclass(frozen=True)
class Competition:
    """A WCIF competition file.

    Instances are never modified; every operation returns a new competition
    built with :func:`dataclasses.replace`.

    Attributes
    ----------
    id : str
        Competition id, e.g. ``"BelgianOpen2019"``.
    name : str
        Competition display name.
    events : tuple of Event
        Events in file order.
    extra : dict
        Remaining WCIF members (persons, schedule, ...), passed through.
    """

    id: str
    name: str
    events: Tuple[Event, ...] = ()
    extra: Dict[str, Any] = field(default_factory=dict)

    def get_event(self, event_id: str) -> Optional[Event]:
        """Get an event by id, or None."""
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    def iter_rounds(self) -> Iterator[RoundData]:
        """Iterate over every round of every event, in file order."""
        for event in self.events:
            yield from event.rounds

    def to_dict(self) -> Dict[str, Any]:
        """Serialize competition, keeping internal scramble fields."""
        return {
            **self.extra,
            "id": self.id,
            "name": self.name,
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competition":
        """Deserialize a WCIF document.

        Raises:
            InvalidCompetitionFileException: If ``data`` has no list of events
        """
        if not isinstance(data, dict) or not isinstance(data.get("events"), list):
            raise InvalidCompetitionFileException(
                "Competition file must be an object with an 'events' list"
            )
        extra = {k: v for k, v in data.items() if k not in ("id", "name", "events")}
        return cls(
            id=data.get("id", ""),
            name=data.get("name", ""),
            events=tuple(Event.from_dict(e) for e in data["events"]),
            extra=extra,
        )
