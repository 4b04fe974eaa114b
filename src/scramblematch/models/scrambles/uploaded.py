"""Uploaded scramble file data classes."""

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

from scramblematch.models.scrambles.scramble_set import InternalScrambleSet
from scramblematch.type_hints import EventId


@dataclass(frozen=True, slots=True)
class TNoodleSheet:
    """One sheet of scramble generator output, before import.

    Attributes
    ----------
    event : str
        Event id the sheet was generated for.
    round : int
        Round number the sheet was generated for.
    title : str
        Human readable sheet title.
    scrambles : tuple of str
        Scramble sequences; empty when absent from the upload.
    extra_scrambles : tuple of str
        Backup sequences; empty when absent from the upload.
    generated_attempt_number : int or None
        Attempt number for per-attempt sheets.
    """

    event: EventId
    round: int
    title: str = ""
    scrambles: Tuple[str, ...] = ()
    extra_scrambles: Tuple[str, ...] = ()
    generated_attempt_number: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TNoodleSheet":
        """Deserialize a raw sheet; optional fields default silently."""
        return cls(
            event=data.get("event", ""),
            round=data.get("round", 0),
            title=data.get("title") or "",
            scrambles=tuple(data.get("scrambles") or ()),
            extra_scrambles=tuple(data.get("extraScrambles") or ()),
            generated_attempt_number=data.get("generatedAttemptNumber"),
        )


@dataclass(frozen=True, slots=True)
class UploadedScrambleFile:
    """An uploaded scramble file whose sheets have been imported.

    Attributes
    ----------
    competition_name : str
        Competition name found in the upload; used as every sheet's ``sheet_name``.
    sheets : tuple of InternalScrambleSet
        Imported (and split) sheets, in file order.
    """

    competition_name: str
    sheets: Tuple[InternalScrambleSet, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Serialize uploaded file to dictionary."""
        return {
            "competitionName": self.competition_name,
            "sheets": [sheet.to_dict() for sheet in self.sheets],
        }
