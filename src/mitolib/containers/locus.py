"""Annotated regions of the reference genome and their strand and type vocabularies."""
from enum import IntEnum, auto
from typing import Any, ClassVar

from mitolib.core.interval import Window
from mitolib.utils import ConfigurationError


# Classes --------------------------------------------------------------------------------------------------------------
class Strand(IntEnum):
    """
    Coding strand of a locus.

    ``N`` marks regulatory elements with no assigned strand.

    Examples:
        >>> Strand.from_symbol('L')
        <Strand.L: 2>
    """
    H = auto()
    L = auto()
    N = auto()

    def __str__(self): return self.name

    @classmethod
    def from_symbol(cls, s: Any) -> 'Strand':
        """
        Resolves a strand from its enum member, name or value.

        Raises:
            ConfigurationError: If the symbol names no strand.
        """
        if isinstance(s, cls): return s
        if isinstance(s, str) and s.upper() in cls.__members__: return cls[s.upper()]
        if isinstance(s, int):
            try: return cls(s)
            except ValueError: pass
        raise ConfigurationError(f'Invalid strand: {s!r}')


class LocusType(IntEnum):
    """Functional class of a locus."""
    CODING = auto()
    RRNA = auto()
    TRNA = auto()
    NONCODING = auto()
    _CODES: ClassVar[dict]

    @property
    def code(self) -> str: return self._CODES[self]
    @property
    def is_transcribed(self) -> bool:
        """Returns ``True`` for loci that yield a mature transcript (coding, rRNA and tRNA)."""
        return self is not LocusType.NONCODING

    @classmethod
    def from_code(cls, code: Any) -> 'LocusType':
        """
        Resolves a locus type from a one-letter table code (``m``, ``r``, ``t``, ``n``) or a member name.

        Raises:
            ConfigurationError: If the code is unknown.
        """
        if isinstance(code, cls): return code
        if isinstance(code, str):
            for member, c in cls._CODES.items():
                if c == code: return member
            if code.upper() in cls.__members__: return cls[code.upper()]
        raise ConfigurationError(f'Invalid locus type: {code!r}')


LocusType._CODES = {LocusType.CODING: 'm', LocusType.RRNA: 'r', LocusType.TRNA: 't', LocusType.NONCODING: 'n'}


class Locus:
    """
    Immutable metadata for an annotated reference region.

    Coordinates are 1-based and inclusive; ``start > end`` marks a region that crosses the origin.

    Attributes:
        id: Numeric locus id.
        name: Locus symbol (e.g. ``MTCO1``).
        common_name: Short common name (e.g. ``COI``).
        start: First genome position.
        end: Last genome position.
        strand: Coding strand.
        type: Functional class.
        product: Description of the gene product.
    """
    __slots__ = ('_id', '_name', '_common_name', '_start', '_end', '_strand', '_type', '_product')

    def __init__(self, id: int, name: str, common_name: str, start: int, end: int, strand: Any, type: Any,
                 product: str = ''):
        self._id = id
        self._name = name
        self._common_name = common_name
        self._start = start
        self._end = end
        self._strand = Strand.from_symbol(strand)
        self._type = LocusType.from_code(type)
        self._product = product

    @property
    def id(self) -> int: return self._id
    @property
    def name(self) -> str: return self._name
    @property
    def common_name(self) -> str: return self._common_name
    @property
    def start(self) -> int: return self._start
    @property
    def end(self) -> int: return self._end
    @property
    def strand(self) -> Strand: return self._strand
    @property
    def type(self) -> LocusType: return self._type
    @property
    def product(self) -> str: return self._product
    @property
    def wraps(self) -> bool: return self._start > self._end

    def window(self, genome_length: int) -> Window:
        """Returns the genome window covered by this locus."""
        return Window(self._start, self._end, genome_length, wrapping=self.wraps)

    def __eq__(self, other):
        if not isinstance(other, Locus): return NotImplemented
        return self._id == other._id and self._name == other._name and self._start == other._start \
            and self._end == other._end

    def __hash__(self):
        return hash((self._id, self._name, self._start, self._end))

    def __repr__(self):
        return f"Locus({self._id}, '{self._name}', {self._start}-{self._end}, {self._strand}, {self._type.name})"
