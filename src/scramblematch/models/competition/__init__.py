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

from scramblematch.models.competition.competition import Competition
from scramblematch.models.competition.event import Event
from scramblematch.models.competition.round_data import (
    RoundData,
    ids_from_round_id,
    round_id,
)

__all__ = [
    "Competition",
    "Event",
    "RoundData",
    "ids_from_round_id",
    "round_id",
]
