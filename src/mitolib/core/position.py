"""
Exact, ordered coordinates for reference residues and the insertions anchored after them.
"""
from decimal import Decimal, InvalidOperation
from functools import total_ordering
from typing import Union, Final

from mitolib.utils import ValidationError


# Classes --------------------------------------------------------------------------------------------------------------
@total_ordering
class Position:
    """
    A 1-based coordinate on a reference molecule.

    A position with ``serial == 0`` addresses the reference residue at ``anchor``. A position with a
    non-zero ``serial`` addresses an inserted residue sitting after ``anchor``; the serial holds the
    fractional digits scaled to ``SCALE`` so that several insertions at one anchor keep their order.

    Args:
        anchor: The integer part of the coordinate (must be > 0).
        serial: The scaled fractional part (0 for reference residues).

    Examples:
        >>> Position.parse('100.01')
        Position(100, 10000)
        >>> str(Position(100, 10000))
        '100.01'
        >>> Position.parse(100) < Position.parse('100.1') < Position.parse(101)
        True
    """
    __slots__ = ('_anchor', '_serial')
    DIGITS: Final = 6
    SCALE: Final = 10 ** DIGITS

    def __init__(self, anchor: int, serial: int = 0):
        if anchor < 1: raise ValidationError(f'Position must be greater than 0, got {anchor}')
        if not 0 <= serial < self.SCALE: raise ValidationError(f'Position serial out of range: {serial}')
        self._anchor = int(anchor)
        self._serial = int(serial)

    @classmethod
    def parse(cls, value: Union['Position', int, float, str, Decimal]) -> 'Position':
        """
        Parses a position from an int, a float, a decimal string or a ``Decimal``.

        Raises:
            ValidationError: If the value is not a positive number with at most ``DIGITS`` decimal places.
        """
        if isinstance(value, Position): return value
        if isinstance(value, bool): raise ValidationError(f'Invalid position: {value!r}')
        if isinstance(value, int): return cls(value)
        try:
            number = Decimal(str(value).strip()) if not isinstance(value, Decimal) else value
        except InvalidOperation:
            raise ValidationError(f'Invalid position: {value!r}') from None
        if not number.is_finite() or number <= 0: raise ValidationError(f'Invalid position: {value!r}')
        anchor = int(number)
        serial = (number - anchor) * cls.SCALE
        if serial != serial.to_integral_value():
            raise ValidationError(f'Position {value!r} has more than {cls.DIGITS} decimal places')
        return cls(anchor, int(serial))

    @property
    def anchor(self) -> int: return self._anchor
    @property
    def serial(self) -> int: return self._serial
    @property
    def is_insertion(self) -> bool:
        """Returns ``True`` if this position addresses an inserted residue."""
        return self._serial != 0

    def shift(self, anchor: int) -> 'Position':
        """Returns a position with the same serial at a new anchor."""
        return Position(anchor, self._serial)

    def __eq__(self, other):
        if isinstance(other, int) and not isinstance(other, bool): return self._serial == 0 and self._anchor == other
        if not isinstance(other, Position): return NotImplemented
        return self._anchor == other._anchor and self._serial == other._serial

    def __lt__(self, other):
        if isinstance(other, int) and not isinstance(other, bool): return (self._anchor, self._serial) < (other, 0)
        if not isinstance(other, Position): return NotImplemented
        return (self._anchor, self._serial) < (other._anchor, other._serial)

    def __hash__(self):
        return hash(self._anchor) if self._serial == 0 else hash((self._anchor, self._serial))

    def __str__(self):
        if not self._serial: return str(self._anchor)
        return f'{self._anchor}.{self._serial:0{self.DIGITS}d}'.rstrip('0')

    def __repr__(self):
        return f'Position({self._anchor}, {self._serial})'
