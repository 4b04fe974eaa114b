"""Exceptions for use in Scramble Match"""

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


# ========== Base Application Exception ==========


class ScrambleMatchException(Exception):
    """Base exception for all Scramble Match errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Competition Exceptions ==========


class CompetitionException(ScrambleMatchException):
    """Base exception for competition file errors."""

    pass


class InvalidCompetitionFileException(CompetitionException):
    """Raised when a competition file does not have the WCIF shape."""

    pass


class NoCompetitionLoadedException(CompetitionException):
    """Raised when an operation needs a competition file and none is loaded."""

    pass


# ========== Scramble Exceptions ==========


class ScrambleException(ScrambleMatchException):
    """Base exception for scramble set errors."""

    pass


class DuplicateScrambleSetIdException(ScrambleException):
    """Raised when two scramble sets share an id.

    This is a defect in id allocation, never a user error.
    """

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(ScrambleMatchException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(ScrambleMatchException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
