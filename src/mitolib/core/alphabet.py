"""
Module for representing ASCII biological alphabets, alphabet conversion and the codon table.
"""
from typing import Union, Final, ClassVar

import numpy as np

from mitolib.utils import ConfigurationError
from mitolib.utils.resources import jit


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlphabetError(Exception):
    """Raised when an alphabet is invalid or a string contains symbols outside the alphabet."""


class TranslationError(AlphabetError, ConfigurationError):
    """Raised when a codon cannot be looked up in a genetic code."""


# Classes --------------------------------------------------------------------------------------------------------------
class Alphabet:
    """
    A class to represent an alphabet of ASCII symbols.

    Lookups are backed by 256-entry numpy tables, so validating, encoding and complementing a string are single
    vectorised passes over its bytes.

    Examples:
        >>> Alphabet.DNA.complement('ACGTN')
        'TGCAN'
        >>> 'U' in Alphabet.RNA
        True
    """
    __slots__ = ('_data', '_lookup_table', '_complement_table')
    DTYPE: Final = np.uint8
    INVALID: Final = np.iinfo(DTYPE).max
    MAX_LEN: Final = INVALID + 1
    ENCODING: Final = 'ascii'

    DNA: ClassVar['Alphabet']
    RNA: ClassVar['Alphabet']
    AMINO: ClassVar['Alphabet']

    def __init__(self, symbols: bytes, complement: bytes = None, aliases: dict[bytes, bytes] = None):
        """
        Initializes an Alphabet.

        Args:
            symbols: The symbols in the alphabet as bytes.
            complement: Optional complement symbols as bytes. Must be same length as symbols.
            aliases: Optional mapping of extra characters to valid ones (e.g. {b'U': b'T'}).

        Raises:
            AlphabetError: If symbols are not ASCII, too long, contain duplicates, or if complement is invalid.
        """
        if not symbols.isascii(): raise AlphabetError('Alphabet symbols must be a valid ASCII string')
        if len(symbols) >= self.MAX_LEN:
            raise AlphabetError(f'Alphabet size cannot exceed {self.MAX_LEN - 1} symbols ({self.DTYPE})')
        if len(set(symbols.upper())) != len(symbols): raise AlphabetError('Alphabet contains duplicate symbols')

        self._data: np.ndarray = np.frombuffer(symbols, dtype=self.DTYPE)

        # Build Lookup Table (byte -> symbol index)
        self._lookup_table = np.full(self.MAX_LEN, self.INVALID, dtype=self.DTYPE)
        indices = np.arange(len(symbols), dtype=self.DTYPE)
        self._lookup_table[np.frombuffer(symbols.lower(), dtype=self.DTYPE)] = indices
        self._lookup_table[self._data] = indices

        if aliases:
            for src, dst in aliases.items():
                if len(src) != 1 or len(dst) != 1: raise AlphabetError("Aliases must be single bytes")
                dst_idx = self._lookup_table[ord(dst)]
                if dst_idx == self.INVALID: raise AlphabetError(f"Alias target {dst} not in alphabet")
                self._lookup_table[ord(src)] = dst_idx
                self._lookup_table[ord(src.lower())] = dst_idx
        self._lookup_table.flags.writeable = False

        # Build Complement Table (byte -> complement byte)
        self._complement_table = None
        if complement is not None:
            if len(complement) != len(symbols):
                raise AlphabetError("Complement must be the same length as symbols")
            comp_indices = self._lookup_table[np.frombuffer(complement, dtype=self.DTYPE)]
            if np.any(comp_indices == self.INVALID):
                raise AlphabetError("Complement contains symbols not in alphabet")
            table = np.zeros(self.MAX_LEN, dtype=self.DTYPE)
            valid = self._lookup_table != self.INVALID
            table[valid] = self._data[comp_indices[self._lookup_table[valid]]]
            table.flags.writeable = False
            self._complement_table = table

    def __len__(self):
        return len(self._data)

    def __contains__(self, item):
        if isinstance(item, (int, np.integer)):
            return 0 <= item < self.MAX_LEN and self._lookup_table[item] != self.INVALID
        if isinstance(item, (str, bytes)):
            if len(item) != 1: return False
            val = ord(item) if isinstance(item, str) else item[0]
            return val < self.MAX_LEN and self._lookup_table[val] != self.INVALID
        return False

    def __iter__(self):
        return iter(self.symbols)

    def __repr__(self):
        return f"Alphabet('{self.symbols}')"

    def __eq__(self, other):
        if self is other: return True
        if not isinstance(other, Alphabet): return False
        return np.array_equal(self._data, other._data)

    def __hash__(self):
        return hash(self._data.tobytes())

    @property
    def symbols(self) -> str:
        """Returns the canonical symbols of the alphabet as a string."""
        return self._data.tobytes().decode(self.ENCODING)

    def _as_array(self, text: Union[str, bytes]) -> np.ndarray:
        if isinstance(text, str):
            if not text.isascii(): raise AlphabetError(f'Non-ASCII symbols in {text!r}')
            text = text.encode(self.ENCODING)
        return np.frombuffer(text, dtype=self.DTYPE)

    def is_valid(self, text: Union[str, bytes]) -> bool:
        """Returns ``True`` if every character of ``text`` belongs to the alphabet."""
        if isinstance(text, str) and not text.isascii(): return False
        return not np.any(self._lookup_table[self._as_array(text)] == self.INVALID)

    def encode(self, text: Union[str, bytes]) -> np.ndarray:
        """
        Encodes a string as an array of symbol indices.

        Args:
            text: The string to encode.

        Returns:
            A ``uint8`` array of indices into the alphabet.

        Raises:
            AlphabetError: If the string contains symbols outside the alphabet.
        """
        encoded = self._lookup_table[self._as_array(text)]
        if np.any(encoded == self.INVALID): raise AlphabetError(f'{text!r} contains symbols not in {self!r}')
        return encoded

    def decode(self, encoded: np.ndarray) -> str:
        """Decodes an array of symbol indices back to a string."""
        return self._data[encoded].tobytes().decode(self.ENCODING)

    def complement(self, text: str) -> str:
        """
        Returns the base-wise complement of a string, without reversing it.

        Raises:
            AlphabetError: If the alphabet has no complement or the string contains foreign symbols.
        """
        if self._complement_table is None: raise AlphabetError(f'{self!r} has no complement')
        data = self._as_array(text)
        if np.any(self._lookup_table[data] == self.INVALID):
            raise AlphabetError(f'{text!r} contains symbols not in {self!r}')
        return self._complement_table[data].tobytes().decode(self.ENCODING)

    def reverse_complement(self, text: str) -> str:
        """Returns the reverse complement of a string."""
        return self.complement(text)[::-1]


Alphabet.DNA = Alphabet(b'ACGTRYSWKMBDHVN', b'TGCAYRSWMKVHDBN')
Alphabet.RNA = Alphabet(b'ACGURYSWKMBDHVN', b'UGCAYRSWMKVHDBN')
Alphabet.AMINO = Alphabet(b'ACDEFGHIKLMNPQRSTVWYX*')


class AlphabetConverter:
    """
    Converts strings from one Alphabet to another.

    Examples:
        >>> AlphabetConverter.TRANSCRIBE.convert('ATGT')
        'AUGU'
    """
    __slots__ = ('_source', '_target', '_table')
    TRANSCRIBE: ClassVar['AlphabetConverter']

    def __init__(self, source: Alphabet, target: Alphabet, mapping: dict[bytes, bytes] = None):
        """Initializes a converter between two alphabets.

        Args:
            source: Source alphabet.
            target: Target alphabet.
            mapping: Optional dictionary for custom symbol mapping. Unmapped symbols shared by both alphabets are
                carried over unchanged.
        """
        self._source = source
        self._target = target
        table = np.full(Alphabet.MAX_LEN, Alphabet.INVALID, dtype=Alphabet.DTYPE)
        for sym in source.symbols:
            if sym in target: table[ord(sym)] = ord(sym)
        for src, dst in (mapping or {}).items():
            if src.decode() not in source or dst.decode() not in target:
                raise AlphabetError(f'Cannot map {src} to {dst} between {source!r} and {target!r}')
            table[ord(src)] = ord(dst)
        for sym in source.symbols:  # lowercase input converts to uppercase output
            table[ord(sym.lower())] = table[ord(sym)]
        table.flags.writeable = False
        self._table = table

    @property
    def source(self) -> Alphabet: return self._source
    @property
    def target(self) -> Alphabet: return self._target

    def convert(self, text: str) -> str:
        """Converts a string to the target alphabet.

        Raises:
            AlphabetError: If the string contains symbols with no mapping.
        """
        new_data = self._table[self._source._as_array(text)]
        if np.any(new_data == Alphabet.INVALID):
            raise AlphabetError(f'{text!r} contains symbols that cannot be converted to {self._target!r}')
        return new_data.tobytes().decode(Alphabet.ENCODING)


AlphabetConverter.TRANSCRIBE = AlphabetConverter(Alphabet.DNA, Alphabet.RNA, mapping={b'T': b'U'})


class GeneticCode:
    """
    Represents a genetic code table for translation.

    The table is 64 one-letter residues in ``TCAG`` codon order, with ``*`` marking stops. Codons may be given in
    DNA (``T``) or RNA (``U``) form. ``codon`` reports stops as ``TERM``; strings produced by ``translate`` use ``*``.

    Examples:
        >>> GeneticCode.VERTEBRATE_MITOCHONDRIAL.codon('AUA')
        'M'
        >>> GeneticCode.VERTEBRATE_MITOCHONDRIAL.codon('AGA')
        'TERM'
    """
    __slots__ = ('_data', '_stops', '_name')
    _BASES = Alphabet(b'TCAG', aliases={b'U': b'T'})
    TERM: Final = 'TERM'
    STOP: Final = '*'
    VERTEBRATE_MITOCHONDRIAL: ClassVar['GeneticCode']

    def __init__(self, table: bytes, name: str = None):
        """Initializes a genetic code.

        Args:
            table: 64-byte ASCII string representing the translation table.
            name: Optional display name.
        """
        if len(table) != 64: raise AlphabetError('A genetic code table must have 64 entries')
        Alphabet.AMINO.encode(table)  # raises on foreign symbols
        self._data = np.frombuffer(table, dtype=Alphabet.DTYPE)
        self._stops = self._data == ord(self.STOP)
        self._name = name

    @property
    def name(self) -> str: return self._name
    @property
    def stops(self) -> np.ndarray:
        """Boolean array indicating stop codons (size 64)."""
        return self._stops

    def __repr__(self):
        return f"GeneticCode({self._name or self._data.tobytes().decode(Alphabet.ENCODING)})"

    def __getitem__(self, item: str) -> str:
        return self.codon(item)

    def _index(self, codon: str) -> int:
        if len(codon) != 3: raise TranslationError(f'{codon!r} is not a valid codon')
        try:
            encoded = self._BASES.encode(codon)
        except AlphabetError:
            raise TranslationError(f'{codon!r} is not a valid codon') from None
        return _get_codon_index(encoded, 0)

    def codon(self, codon: str) -> str:
        """
        Looks up the residue encoded by a codon.

        Args:
            codon: A three-letter DNA or RNA codon (case-insensitive).

        Returns:
            The one-letter residue, or ``'TERM'`` for a stop codon.

        Raises:
            TranslationError: If the codon is not three unambiguous bases.
        """
        idx = self._index(codon)
        return self.TERM if self._stops[idx] else chr(int(self._data[idx]))

    def is_stop(self, codon: str) -> bool:
        return bool(self._stops[self._index(codon)])

    def translate(self, seq: str, to_stop: bool = False) -> str:
        """
        Translates a DNA or RNA string codon by codon in the first frame.

        Trailing bases that do not fill a codon are ignored.

        Args:
            seq: The nucleotide string.
            to_stop: If True, translation terminates before the first stop codon.

        Returns:
            The one-letter protein string, with ``*`` for stops.

        Raises:
            TranslationError: If the string contains ambiguous or foreign bases.
        """
        try:
            encoded = self._BASES.encode(seq)
        except AlphabetError:
            raise TranslationError('Cannot translate a sequence with ambiguous or foreign bases') from None
        translation = _translate_kernel(encoded, self._data, self._stops, len(encoded) // 3, to_stop)
        return translation.tobytes().decode(Alphabet.ENCODING)


GeneticCode.VERTEBRATE_MITOCHONDRIAL = GeneticCode(
    b'FFLLSSSSYY**CCWWLLLLPPPPHHQQRRRRIIMMTTTTNNKKSS**VVVVAAAADDEEGGGG', 'Vertebrate Mitochondrial')


# Kernels --------------------------------------------------------------------------------------------------------------
@jit(nopython=True, cache=True, nogil=True)
def _get_codon_index(data, idx):
    """Helper to calculate 6-bit codon index from 3 encoded bases."""
    return (data[idx] << 4) | (data[idx + 1] << 2) | data[idx + 2]


@jit(nopython=True, cache=True, nogil=True)
def _translate_kernel(encoded_seq, flat_table, stops, n_codons, to_stop):
    """
    Translates nucleotides -> amino acid bytes using a flat lookup table and bitwise math.
    Assumes the encoding is 0=T, 1=C, 2=A, 3=G (2 bits).
    """
    res = np.empty(n_codons, dtype=np.uint8)
    for i in range(n_codons):
        flat_idx = _get_codon_index(encoded_seq, i * 3)
        if stops[flat_idx] and to_stop: return res[:i]
        res[i] = flat_table[flat_idx]
    return res
