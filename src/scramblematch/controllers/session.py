"""Scramble matching session.

A session holds what the pure pipeline functions thread through: the
current competition file, the uploaded scramble files and the id allocator.
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

from scramblematch.controllers.competition import (
    to_results_json,
    to_wcif,
    unassigned_rounds,
)
from scramblematch.controllers.scrambles import (
    all_scrambles_for_event,
    auto_assign,
    clear_assignments,
    transform_uploaded_scrambles,
    used_scramble_ids_for_event,
)
from scramblematch.exceptions import (
    DuplicateScrambleSetIdException,
    NoCompetitionLoadedException,
)
from scramblematch.models.competition import Competition
from scramblematch.models.config import MatcherConfig
from scramblematch.models.scrambles import ScrambleSetIdAllocator, UploadedScrambleFile
from scramblematch.utils import setup_logger

logger = setup_logger(__name__)


class ScrambleSession:
    """Holds a competition file and the uploaded scrambles being matched to it.

    Every change replaces ``competition`` with the result of a pipeline
    function; the previous competition object is left as it was.
    """

    def __init__(
        self,
        config: Optional[MatcherConfig] = None,
        allocator: Optional[ScrambleSetIdAllocator] = None,
    ) -> None:
        self.config = config or MatcherConfig()
        self.allocator = allocator or ScrambleSetIdAllocator()
        self.uploaded: List[UploadedScrambleFile] = []
        self._competition: Optional[Competition] = None

    # ========== Properties ==========

    @property
    def competition(self) -> Competition:
        """The current competition file.

        Raises:
            NoCompetitionLoadedException: If no competition file was loaded
        """
        if self._competition is None:
            raise NoCompetitionLoadedException("No competition file loaded")
        return self._competition

    @property
    def has_competition(self) -> bool:
        return self._competition is not None

    # ========== Loading ==========

    def load_competition(self, data: Dict[str, Any]) -> Competition:
        """Load a WCIF document, replacing the current competition.

        Ids of scramble sets stored in the document are reserved so that later
        uploads never reuse them.
        """
        self._competition = Competition.from_dict(data)
        stored_ids = [
            s.id for r in self._competition.iter_rounds() for s in r.scramble_sets
        ]
        if stored_ids:
            self.allocator.reserve_through(max(stored_ids))
        logger.info(
            f"Loaded competition '{self._competition.name}' "
            f"with {len(self._competition.events)} events"
        )
        return self._competition

    def upload(self, data: Dict[str, Any]) -> UploadedScrambleFile:
        """Import an uploaded scramble file and add it to the pool.

        Raises:
            DuplicateScrambleSetIdException: If an imported id is already in the pool
        """
        uploaded = transform_uploaded_scrambles(data, self.allocator)
        known_ids = {sheet.id for u in self.uploaded for sheet in u.sheets}
        new_ids = [sheet.id for sheet in uploaded.sheets]
        duplicates = known_ids.intersection(new_ids) | {
            i for i in new_ids if new_ids.count(i) > 1
        }
        if duplicates:
            raise DuplicateScrambleSetIdException(
                f"Scramble set ids issued twice: {sorted(duplicates)}"
            )
        self.uploaded.append(uploaded)
        return uploaded

    def remove_upload(self, index: int) -> UploadedScrambleFile:
        """Remove an uploaded file from the pool by its position.

        Raises:
            IndexError: If there is no upload at ``index``
        """
        removed = self.uploaded.pop(index)
        logger.info(f"Removed uploaded scrambles '{removed.competition_name}'")
        return removed

    # ========== Assignment ==========

    def auto_assign(self) -> Competition:
        """Assign uploaded scrambles to every round without scrambles."""
        self._competition = auto_assign(self.competition, self.uploaded)
        return self._competition

    def clear(self) -> Competition:
        """Remove the scrambles of every round."""
        self._competition = clear_assignments(self.competition)
        logger.info("Cleared all scramble assignments")
        return self._competition

    # ========== Export ==========

    def export_wcif(self) -> Dict[str, Any]:
        """WCIF document of the current competition."""
        return to_wcif(self.competition)

    def export_results(self, version: str) -> Dict[str, Any]:
        """Results submission document of the current competition."""
        return to_results_json(
            self.competition,
            version,
            format_version=self.config.results_format_version,
            program_name=self.config.scramble_program,
        )

    def results_file_name(self) -> str:
        return self.config.results_file_name(self.competition.name)

    def summary(self) -> Dict[str, Any]:
        """Counts describing the session state."""
        competition = self.competition
        unused = {
            event.id: len(
                all_scrambles_for_event(
                    self.uploaded,
                    event.id,
                    used_scramble_ids_for_event(competition.events, event.id),
                )
            )
            for event in competition.events
        }
        return {
            "competition": competition.name,
            "events": len(competition.events),
            "rounds": sum(1 for _ in competition.iter_rounds()),
            "unassigned_rounds": unassigned_rounds(competition),
            "uploaded_files": [u.competition_name for u in self.uploaded],
            "unused_scramble_sets": unused,
        }
