"""Scramble set id allocation."""

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

import threading

from scramblematch.type_hints import ScrambleSetId


class ScrambleSetIdAllocator:
    """Hands out strictly increasing scramble set ids, starting at 1.

    One allocator is shared by every import of a session. A new allocator
    starts over at 1; ids already stored in a loaded WCIF are reserved with
    :meth:`reserve_through`.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start
        self._lock = threading.Lock()

    @property
    def last_issued(self) -> int:
        """Highest id issued or reserved, or ``start - 1`` if there is none."""
        with self._lock:
            return self._next - 1

    def next_id(self) -> ScrambleSetId:
        """Issue the next id."""
        with self._lock:
            issued = self._next
            self._next += 1
        return issued

    def reserve_through(self, value: ScrambleSetId) -> None:
        """Make sure ids up to ``value`` are never issued."""
        with self._lock:
            self._next = max(self._next, value + 1)

    def __iter__(self) -> "ScrambleSetIdAllocator":
        return self

    def __next__(self) -> ScrambleSetId:
        return self.next_id()

    def __repr__(self) -> str:
        return f"ScrambleSetIdAllocator(next={self._next})"
