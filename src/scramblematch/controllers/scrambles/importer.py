"""Import of scramble generator output."""

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

from typing import Any, Dict, Iterable, List, Union

from scramblematch.models.scrambles import (
    InternalScrambleSet,
    ScrambleSetIdAllocator,
    TNoodleSheet,
    UploadedScrambleFile,
)
from scramblematch.type_hints import RawSheet
from scramblematch.utils import setup_logger
from .attempts import split_multi_attempt_sheets

logger = setup_logger(__name__)


def import_sheets(
    file_name: str,
    raw_sheets: Iterable[Union[RawSheet, TNoodleSheet]],
    allocator: ScrambleSetIdAllocator,
) -> List[InternalScrambleSet]:
    """Convert raw sheets into internal scramble sets, one per sheet.

    Missing optional fields default to empty; nothing is rejected.

    Args:
        file_name: Name stamped on every set as ``sheet_name``
        raw_sheets: Sheets as found in the upload (dicts or TNoodleSheet)
        allocator: Id source

    Returns:
        Internal scramble sets, in sheet order
    """
    result = []
    for raw in raw_sheets:
        sheet = raw if isinstance(raw, TNoodleSheet) else TNoodleSheet.from_dict(raw)
        result.append(
            InternalScrambleSet(
                id=allocator.next_id(),
                scrambles=sheet.scrambles,
                extra_scrambles=sheet.extra_scrambles,
                title=sheet.title,
                sheet_name=file_name,
                event_id=sheet.event,
                round_number=sheet.round,
                generated_attempt_number=sheet.generated_attempt_number,
            )
        )
    return result


def transform_uploaded_scrambles(
    uploaded: Dict[str, Any], allocator: ScrambleSetIdAllocator
) -> UploadedScrambleFile:
    """Import a whole uploaded scramble file.

    Sheets are imported under the file's ``competitionName`` and
    multi-attempt sheets are split per attempt.

    Args:
        uploaded: Parsed upload, ``{"competitionName": ..., "sheets": [...]}``
        allocator: Id source

    Returns:
        The uploaded file with imported sheets
    """
    competition_name = uploaded.get("competitionName") or ""
    imported = import_sheets(competition_name, uploaded.get("sheets") or (), allocator)
    sheets = split_multi_attempt_sheets(imported, allocator)
    logger.info(
        f"Imported {len(imported)} sheets from '{competition_name}' "
        f"({len(sheets)} scramble sets after splitting attempts)"
    )
    return UploadedScrambleFile(competition_name=competition_name, sheets=tuple(sheets))
