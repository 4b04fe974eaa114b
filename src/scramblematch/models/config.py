"""Matcher configuration."""

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

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

from scramblematch.constants import (
    DEFAULT_OUTPUT_INDENT,
    RESULTS_FILE_TEMPLATE,
    RESULTS_FORMAT_VERSION,
    SCRAMBLE_PROGRAM_NAME,
)
from scramblematch.exceptions import FileLoadException, InvalidConfigurationException


@dataclass
class MatcherConfig:
    """Matcher configuration settings.

    Attributes
    ----------
    results_format_version : str
        ``formatVersion`` written to results files.
    scramble_program : str
        Program name written in front of the version in ``scrambleProgram``.
    output_indent : int
        JSON indentation of written files.
    results_file_template : str
        Default results file name; ``{name}`` is the competition name.
    """

    results_format_version: str = RESULTS_FORMAT_VERSION
    scramble_program: str = SCRAMBLE_PROGRAM_NAME
    output_indent: int = DEFAULT_OUTPUT_INDENT
    results_file_template: str = RESULTS_FILE_TEMPLATE

    def __post_init__(self) -> None:
        if not isinstance(self.output_indent, int) or self.output_indent < 0:
            raise InvalidConfigurationException(
                f"output_indent must be a non-negative integer, got {self.output_indent!r}"
            )
        if "{name}" not in self.results_file_template:
            raise InvalidConfigurationException(
                "results_file_template must contain '{name}'"
            )

    def results_file_name(self, competition_name: str) -> str:
        """Default file name for a competition's results file."""
        return self.results_file_template.format(name=competition_name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "results_format_version": self.results_format_version,
            "scramble_program": self.scramble_program,
            "output_indent": self.output_indent,
            "results_file_template": self.results_file_template,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatcherConfig":
        """Deserialize configuration from dictionary."""
        unknown = set(data) - set(cls().to_dict())
        if unknown:
            raise InvalidConfigurationException(
                f"Unknown configuration keys: {', '.join(sorted(unknown))}"
            )
        return cls(
            results_format_version=data.get(
                "results_format_version", RESULTS_FORMAT_VERSION
            ),
            scramble_program=data.get("scramble_program", SCRAMBLE_PROGRAM_NAME),
            output_indent=data.get("output_indent", DEFAULT_OUTPUT_INDENT),
            results_file_template=data.get(
                "results_file_template", RESULTS_FILE_TEMPLATE
            ),
        )

    @classmethod
    def load(cls, path: Union[str, Path]) -> "MatcherConfig":
        """Read configuration from a JSON file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise FileLoadException(f"Could not read config {path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfigurationException(f"Config {path} must be a JSON object")
        return cls.from_dict(data)
