"""Scramble set data classes."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from scramblematch.type_hints import EventId, ScrambleSetId


@dataclass(frozen=True, slots=True)
class ScrambleSet:
    """A scramble set in the shape stored by the WCIF.

    Attributes
    ----------
    id : int
        Scramble set id.
    scrambles : tuple of str
        Scramble sequences, in order.
    extra_scrambles : tuple of str
        Backup sequences, in order.
    """

    id: ScrambleSetId
    scrambles: Tuple[str, ...] = ()
    extra_scrambles: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the WCIF ``{id, scrambles, extraScrambles}`` shape."""
        return {
            "id": self.id,
            "scrambles": list(self.scrambles),
            "extraScrambles": list(self.extra_scrambles),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScrambleSet":
        """Deserialize from the WCIF shape."""
        return cls(
            id=data["id"],
            scrambles=tuple(data.get("scrambles") or ()),
            extra_scrambles=tuple(data.get("extraScrambles") or ()),
        )


@dataclass(frozen=True, slots=True)
class InternalScrambleSet:
    """A scramble set plus the provenance needed to match it to a round.

    Attributes
    ----------
    id : int
        Unique id issued by a :class:`ScrambleSetIdAllocator`.
    scrambles : tuple of str
        Scramble sequences. Multi-attempt events hold exactly one.
    extra_scrambles : tuple of str
        Backup sequences.
    title : str
        Sheet title as generated, e.g. ``"3x3x3 Cube Round 1 Scramble Set A"``.
    sheet_name : str
        Name of the uploaded file (its competition name).
    event_id : str
        Event the sheet was generated for.
    round_number : int
        Round the sheet was generated for (1-indexed).
    generated_attempt_number : int or None
        Attempt number the sheet was generated for, if any.
    attempt_number : int or None
        Attempt the set is used for; set when matched to a round.
    """

    id: ScrambleSetId
    scrambles: Tuple[str, ...] = ()
    extra_scrambles: Tuple[str, ...] = ()
    title: str = ""
    sheet_name: str = ""
    event_id: EventId = ""
    round_number: int = 0
    generated_attempt_number: Optional[int] = None
    attempt_number: Optional[int] = None

    def to_scramble_set(self) -> ScrambleSet:
        """Drop the provenance fields."""
        return ScrambleSet(
            id=self.id,
            scrambles=self.scrambles,
            extra_scrambles=self.extra_scrambles,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize internal scramble set to dictionary."""
        return {
            "id": self.id,
            "scrambles": list(self.scrambles),
            "extraScrambles": list(self.extra_scrambles),
            "title": self.title,
            "sheetName": self.sheet_name,
            "eventId": self.event_id,
            "roundNumber": self.round_number,
            "generatedAttemptNumber": self.generated_attempt_number,
            "attemptNumber": self.attempt_number,
        }

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        event_id: EventId = "",
        round_number: int = 0,
    ) -> "InternalScrambleSet":
        """Deserialize from dictionary.

        Plain WCIF scramble sets only carry ``id``, ``scrambles`` and
        ``extraScrambles``; the event and round they are attached to are then
        taken from ``event_id`` and ``round_number``.
        """
        return cls(
            id=data["id"],
            scrambles=tuple(data.get("scrambles") or ()),
            extra_scrambles=tuple(data.get("extraScrambles") or ()),
            title=data.get("title", ""),
            sheet_name=data.get("sheetName", ""),
            event_id=data.get("eventId", event_id),
            round_number=data.get("roundNumber", round_number),
            generated_attempt_number=data.get("generatedAttemptNumber"),
            attempt_number=data.get("attemptNumber"),
        )
