"""Addressable windows over circular references: query normalization, bounds validation and extraction."""
from typing import Optional

import numpy as np

from mitolib.utils import BoundsError, ValidationError


# Classes --------------------------------------------------------------------------------------------------------------
class Window:
    """
    Immutable 1-based inclusive window over a reference of ``length`` residues.

    A window whose ``start`` is greater than its ``end`` crosses the origin of a circular reference. A
    ``wrapping`` window additionally accepts queries that cross the origin inside its own bounds (e.g.
    ``(16567, 6)`` over the whole genome).

    Attributes:
        start: First addressable residue.
        end: Last addressable residue.
        length: Full extent of the underlying reference.
        wrapping: Whether queries may cross the origin.

    Examples:
        >>> w = Window(16560, 10, 16569, wrapping=True)
        >>> len(w)
        20
        >>> w.validate(16565, 3)
        (16565, 3)
    """
    __slots__ = ('_start', '_end', '_length', '_wrapping')

    def __init__(self, start: int, end: int, length: int, wrapping: bool = False):
        start, end = _check_index(start), _check_index(end)
        if start > length: raise BoundsError(f'Window start {start} exceeds the reference length {length}')
        if end > length: raise BoundsError(f'Window end {end} exceeds the reference length {length}')
        if start > end and not wrapping:
            raise BoundsError(f'Window start {start} is greater than end {end} on a non-wrapping molecule')
        self._start = start
        self._end = end
        self._length = length
        self._wrapping = wrapping

    @property
    def start(self) -> int: return self._start
    @property
    def end(self) -> int: return self._end
    @property
    def length(self) -> int: return self._length
    @property
    def wrapping(self) -> bool: return self._wrapping
    @property
    def wraps(self) -> bool:
        """Returns ``True`` if the window itself crosses the origin."""
        return self._start > self._end

    @property
    def is_full(self) -> bool:
        """Returns ``True`` if the window spans the whole reference from position 1."""
        return self._start == 1 and self._end == self._length

    def __len__(self):
        if self.wraps: return self._length - self._start + 1 + self._end
        return self._end - self._start + 1

    def __eq__(self, other):
        if not isinstance(other, Window): return NotImplemented
        return (self._start, self._end, self._length, self._wrapping) == (
            other._start, other._end, other._length, other._wrapping)

    def __hash__(self):
        return hash((self._start, self._end, self._length, self._wrapping))

    def __repr__(self):
        return f"Window({self._start}, {self._end}, {self._length}, wrapping={self._wrapping})"

    def offset(self, index: int) -> int:
        """Returns the number of residues walked from the window start to ``index``, circularly."""
        return (index - self._start) % self._length

    def contains(self, index: int) -> bool:
        """Returns ``True`` if ``index`` falls inside the window (circularly for a wrapped window)."""
        if self.wraps: return 1 <= index <= self._length and not self._end < index < self._start
        return self._start <= index <= self._end

    def normalize(self, start: Optional[int] = None, end: Optional[int] = None) -> tuple[int, int]:
        """
        Turns the optional arguments of a query into an explicit ``(start, end)`` pair.

        No arguments select the whole window, a single argument selects one residue.

        Raises:
            ValidationError: If an end is given without a start.
        """
        if start is None:
            if end is not None: raise ValidationError('An end index was given without a start index')
            return self._start, self._end
        if end is None: return start, start
        return start, end

    def validate(self, start: int, end: int) -> tuple[int, int]:
        """
        Checks a query pair against the window.

        Args:
            start: Query start (1-based).
            end: Query end (1-based, inclusive).

        Returns:
            The validated ``(start, end)`` pair.

        Raises:
            ValidationError: If either index is not a positive integer.
            BoundsError: If an index falls outside the window or inside the gap of a wrapped window, or if
                the pair runs backwards where that is not allowed.
        """
        start, end = _check_index(start), _check_index(end)
        if self.wraps:
            for index in (start, end):
                if index > self._length:
                    raise BoundsError(f'Index {index} exceeds the reference length {self._length}')
                if self._end < index < self._start:
                    raise BoundsError(f'Index {index} falls between window end {self._end} and start {self._start}')
            if self.offset(start) > self.offset(end):
                raise BoundsError(f'Start index {start} comes after end index {end} in window {self._start}-{self._end}')
            return start, end
        for index in (start, end):
            if not self._start <= index <= self._end:
                raise BoundsError(f'Index {index} is outside window {self._start}-{self._end}')
        if start > end and not self._wrapping:
            raise BoundsError(f'Start index {start} is greater than end index {end}')
        return start, end


# Functions ------------------------------------------------------------------------------------------------------------
def sub_seq(string: str, start: int, end: int) -> str:
    """
    Extracts the 1-based inclusive substring ``[start, end]``, concatenating across the origin when
    ``start > end``. Indices are not validated.

    Examples:
        >>> sub_seq('ACGTAC', 2, 4)
        'CGT'
        >>> sub_seq('ACGTAC', 5, 2)
        'ACAC'
    """
    if start <= end: return string[start - 1:end]
    return string[start - 1:] + string[:end]


def _check_index(index) -> int:
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f'Index must be an integer, got {index!r}')
    if index < 1: raise ValidationError(f'Index must be greater than 0, got {index}')
    return int(index)
