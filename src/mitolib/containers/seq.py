"""Immutable DNA, RNA and amino acid molecules reconstructed from a reference and a variant map."""
import re
from dataclasses import dataclass
from enum import IntEnum, auto
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, Union

from mitolib.containers.locus import LocusType
from mitolib.containers.variants import Variant, VariantMap
from mitolib.core.alphabet import Alphabet, GeneticCode
from mitolib.core.interval import Window, sub_seq
from mitolib.engines.overlay import overlay, effective_length
from mitolib.engines.transcription import StrandTranscriber, poly_adenylate
from mitolib.engines.translation import CodonTranslator
from mitolib.utils import BoundsError, DomainError, ValidationError
from mitolib.utils.protocols import HasAlphabet, ReferenceDataProvider


# Classes --------------------------------------------------------------------------------------------------------------
class WindowSource(IntEnum):
    """The reference string a molecule's coordinates address."""
    GENOME = auto()
    TRANSCRIPT = auto()
    TRANSLATION = auto()


@dataclass(slots=True, frozen=True)
class MoleculeKind:
    """
    Per-kind behaviour of a molecule: the token alphabet, which reference the coordinates address and whether
    queries may cross the origin by default.

    Attributes:
        name: Display name.
        alphabet: Alphabet of substitution and insertion tokens (of codon bases for amino acid molecules).
        source: The reference string the molecule is reconstructed from.
        wrapping: Default wrapping flag.
    """
    name: str
    alphabet: Alphabet
    source: WindowSource
    wrapping: bool = False

    DNA: ClassVar['MoleculeKind']
    RNA: ClassVar['MoleculeKind']
    AA: ClassVar['MoleculeKind']

    def reference(self, provider: ReferenceDataProvider, locus_id: Optional[int] = None) -> str:
        """Returns the full reference string the molecule's coordinates address."""
        if self.source == WindowSource.GENOME: return provider.get_reference(1, provider.genome_length)
        if locus_id is None: raise ValidationError(f'{self.name} molecules require a locus id')
        if self.source == WindowSource.TRANSCRIPT: return provider.get_transcript(locus_id)
        # Translations omit the stop; it is addressable as the final residue
        return provider.get_translation(locus_id) + GeneticCode.STOP

    def check(self, variant: Variant):
        """
        Checks that a variant token is well formed for this kind.

        Raises:
            ValidationError: If the token does not fit the kind.
        """
        if self.source == WindowSource.TRANSLATION:
            if variant.position.is_insertion or variant.is_deletion:
                raise ValidationError(f'{self.name} variant {variant} must be a codon at an integer position')
            codon, _ = parse_codon_token(variant.token)
            if not self.alphabet.is_valid(codon): raise ValidationError(f'Invalid codon in {self.name} variant {variant}')
            return
        if variant.is_deletion: return
        if variant.is_substitution and len(variant) != 1:
            raise ValidationError(f'{self.name} substitution {variant} must be a single symbol')
        if not self.alphabet.is_valid(variant.token):
            raise ValidationError(f'{self.name} variant {variant} has symbols outside {self.alphabet!r}')


MoleculeKind.DNA = MoleculeKind('DNA', Alphabet.DNA, WindowSource.GENOME, wrapping=True)
MoleculeKind.RNA = MoleculeKind('RNA', Alphabet.RNA, WindowSource.TRANSCRIPT)
MoleculeKind.AA = MoleculeKind('AA', Alphabet.RNA, WindowSource.TRANSLATION)


class Molecule(HasAlphabet):
    """
    Base class for immutable molecules reconstructed from a reference and a sparse variant map.

    A molecule addresses the window ``[start, end]`` of its reference (the genome, a transcript or a translation,
    depending on ``KIND``). A wrapping molecule accepts queries that cross the origin, and a wrapping window may
    itself start after it ends.

    Args:
        reference: Provider of the reference tables.
        variants: A ``VariantMap`` or a ``position -> token`` mapping.
        start: First residue of the window (defaults to 1).
        end: Last residue of the window (defaults to the reference length).
        locus_id: Locus of the transcript or translation (RNA and amino acid molecules).
        wrapping: Overrides the kind's default wrapping flag.
        name: Optional sample name.
        info: Optional read-only metadata.

    Raises:
        BoundsError: If the window lies outside the reference, runs backwards on a non-wrapping molecule, a
            variant sits outside the window or a deletion runs past its end.
        ValidationError: If a variant token does not fit the molecule kind.
    """
    __slots__ = ('_reference', '_locus_id', '_full', '_window', '_variants', '_name', '_info', '_length')
    KIND: ClassVar[MoleculeKind]

    def __init__(self, reference: ReferenceDataProvider, variants: Union[VariantMap, Mapping, None] = None,
                 start: int = None, end: int = None, *, locus_id: int = None, wrapping: bool = None,
                 name: str = None, info: Mapping[str, Any] = None):
        self._reference = reference
        self._locus_id = locus_id
        self._full = self.KIND.reference(reference, locus_id)
        n = len(self._full)
        self._window = Window(1 if start is None else start, n if end is None else end, n,
                              self.KIND.wrapping if wrapping is None else wrapping)
        self._variants = variants if isinstance(variants, VariantMap) else VariantMap(variants)
        for variant in self._variants.variants():
            self.KIND.check(variant)
            if not self._window.contains(variant.position.anchor):
                raise BoundsError(f'Variant {variant} is outside window {self._window.start}-{self._window.end}')
            if variant.is_deletion and not self._spans(variant):
                raise BoundsError(f'Deletion {variant} runs past window {self._window.start}-{self._window.end}')
        self._name = name
        self._info = MappingProxyType(dict(info or {}))
        self._length = None

    @property
    def kind(self) -> MoleculeKind: return self.KIND
    @property
    def alphabet(self) -> Alphabet: return self.KIND.alphabet
    @property
    def reference(self) -> ReferenceDataProvider: return self._reference
    @property
    def locus_id(self) -> Optional[int]: return self._locus_id
    @property
    def window(self) -> Window: return self._window
    @property
    def start(self) -> int: return self._window.start
    @property
    def end(self) -> int: return self._window.end
    @property
    def wrapping(self) -> bool: return self._window.wrapping
    @property
    def variants(self) -> VariantMap: return self._variants
    @property
    def name(self) -> Optional[str]: return self._name
    @property
    def info(self) -> Mapping[str, Any]: return self._info
    @property
    def window_length(self) -> int: return len(self._window)

    def __len__(self):
        """Returns the gapless length of the reconstructed window."""
        if self._length is None:
            self._length = effective_length(len(self._window), self._variants, self._window.end)
        return self._length

    def __repr__(self):
        label = f"'{self._name}', " if self._name else ''
        return f"{self.__class__.__name__}({label}{self.start}-{self.end}, {len(self._variants)} variants)"

    def __eq__(self, other):
        if not isinstance(other, Molecule): return NotImplemented
        return self.KIND == other.KIND and self._reference is other._reference \
            and self._locus_id == other._locus_id and self._window == other._window \
            and self._variants == other._variants

    def __hash__(self):
        return hash((self.KIND.name, self._locus_id, self._window, self._variants))

    def _spans(self, variant: Variant) -> bool:
        """Returns ``True`` if every residue a deletion removes lies inside the window."""
        last = variant.position.anchor + len(variant) - 1
        return last <= len(self._full) and self._window.contains(last) \
            and self._window.offset(last) >= self._window.offset(variant.position.anchor)

    def _query(self, start: Optional[int], end: Optional[int]) -> tuple[int, int]:
        return self._window.validate(*self._window.normalize(start, end))

    def _overlay_variants(self) -> VariantMap:
        return self._variants

    def seq(self, start: int = None, end: int = None, gapless: bool = False) -> str:
        """
        Returns the reconstructed sequence of a query window.

        With no arguments the whole molecule window is returned; a single argument returns one position.

        Args:
            start: Query start (1-based).
            end: Query end (1-based, inclusive).
            gapless: If True, deletion gap markers are removed.

        Returns:
            The reconstructed string.

        Raises:
            BoundsError: If the query is outside the molecule window.
            ValidationError: If an index is not a positive integer or an end is given without a start.
        """
        s, e = self._query(start, end)
        result = overlay(self._full, self._overlay_variants(), s, e)
        return result.replace(Variant.GAP, '') if gapless else result

    def ref_seq(self, start: int = None, end: int = None) -> str:
        """Returns the reference sequence of a query window, with the same query rules as ``seq``."""
        return sub_seq(self._full, *self._query(start, end))


class DNASeq(Molecule):
    """
    A genome molecule. Coordinates are genome positions and the molecule wraps by default.

    Examples:
        >>> dna = DNASeq(SpeciesReference.RCRS, {3308: 'C'})
        >>> dna.seq(3306, 3310)
        'CACAC'
        >>> len(dna.seq(16567, 6))
        9
    """
    __slots__ = ()
    KIND = MoleculeKind.DNA

    def __init__(self, reference: ReferenceDataProvider, variants: Union[VariantMap, Mapping, None] = None,
                 start: int = None, end: int = None, wrapping: bool = None, name: str = None,
                 info: Mapping[str, Any] = None):
        super().__init__(reference, variants, start, end, wrapping=wrapping, name=name, info=info)

    @classmethod
    def from_record(cls, reference: ReferenceDataProvider, record: Mapping[str, Any]) -> 'DNASeq':
        """
        Builds a molecule from a plain parsed record.

        Args:
            reference: Provider of the reference tables.
            record: A mapping with ``variant_map`` (or ``variants``) and optional ``name``, ``start``, ``end``,
                ``wrapping`` and ``metadata`` keys.

        Returns:
            The DNA molecule.
        """
        variants = record.get('variant_map', record.get('variants'))
        return cls(reference, variants, record.get('start'), record.get('end'), wrapping=record.get('wrapping'),
                   name=record.get('name'), info=record.get('metadata'))

    def transcribe(self, locus_id: Union[int, str]) -> 'RNASeq':
        """
        Returns the transcript of a locus carrying this molecule's variants.

        Args:
            locus_id: The numeric id or name of a coding, rRNA or tRNA locus.

        Returns:
            An ``RNASeq`` over the whole transcript.

        Raises:
            DomainError: If the locus is not transcribed.
            BoundsError: If the molecule window does not cover the locus.
            ConfigurationError: If the locus is unknown or has no strand.
        """
        locus = self._reference.get_locus(locus_id)
        transcriber = StrandTranscriber(locus, self._reference.placeholder)
        try:
            self._window.validate(locus.start, locus.end)
        except BoundsError:
            raise BoundsError(f'Window {self.start}-{self.end} does not cover locus {locus.name} '
                              f'({locus.start}-{locus.end})') from None
        return RNASeq(self._reference, locus.id, transcriber.transcribe(self._variants), name=self._name,
                      info=self._info)


class RNASeq(Molecule):
    """
    A transcript molecule for one locus. Coordinates are 1-based transcript positions.

    Requesting the whole of a full-length transcript (``seq()`` with no arguments) returns the poly-adenylated
    transcript.

    Examples:
        >>> rna = DNASeq(SpeciesReference.RCRS).transcribe(16)
        >>> rna.seq(1, 3)
        'AUG'
    """
    __slots__ = ()
    KIND = MoleculeKind.RNA

    def __init__(self, reference: ReferenceDataProvider, locus_id: int,
                 variants: Union[VariantMap, Mapping, None] = None, start: int = None, end: int = None,
                 wrapping: bool = None, name: str = None, info: Mapping[str, Any] = None):
        super().__init__(reference, variants, start, end, locus_id=locus_id, wrapping=wrapping, name=name,
                         info=info)

    def seq(self, start: int = None, end: int = None, gapless: bool = False) -> str:
        if start is None and end is None and self._window.is_full:
            return poly_adenylate(super().seq(), len(self._full))
        return super().seq(start, end, gapless)

    def translate(self) -> 'AASeq':
        """
        Returns the amino acid molecule produced by translating this transcript.

        Raises:
            DomainError: If the molecule is not the whole transcript of a coding locus.
        """
        locus = self._reference.get_locus(self._locus_id)
        if locus.type != LocusType.CODING:
            raise DomainError(f'Locus {locus.name} ({locus.type.name}) is not a coding locus')
        if not self._window.is_full:
            raise DomainError(f'Only the whole transcript can be translated, not {self.start}-{self.end}')
        codons = CodonTranslator(self._full).translate(self._variants)
        extent = len(self._reference.get_translation(self._locus_id)) + 1
        # Codons read past the reference stop fall in the poly-A tail
        codons = {pos: token for pos, token in codons.items() if pos <= extent}
        return AASeq(self._reference, self._locus_id, codons, name=self._name, info=self._info)

    def protein(self) -> str:
        """Translates the reconstructed transcript through the vertebrate mitochondrial code, up to the first stop."""
        return GeneticCode.VERTEBRATE_MITOCHONDRIAL.translate(self.seq(gapless=True), to_stop=True)


class AASeq(Molecule):
    """
    A translation molecule for one coding locus. Coordinates are amino acid positions, and the reference stop is
    addressable as the residue after the last.

    Variant tokens are codons with an optional signed frame suffix (``'AUG +1'``). Sequence strings show residues
    with ``*`` for stops; the variant view shows ``TERM``.

    Args:
        show_codons: Default for ``display_variants(show_codons=...)``.
        show_frames: Default for ``display_variants(show_frames=...)``.

    Raises:
        TranslationError: If a variant codon contains ambiguous bases.

    Examples:
        >>> aa = AASeq(SpeciesReference.RCRS, 16, {2: 'UUG', 3: 'AUG +1'})
        >>> aa.display_variants()
        {2: 'L', 3: 'M'}
        >>> aa.display_variants(show_frames=True)
        {2: 'L', 3: 'M +1'}
    """
    __slots__ = ('_show_codons', '_show_frames', '_residues')
    KIND = MoleculeKind.AA

    def __init__(self, reference: ReferenceDataProvider, locus_id: int,
                 variants: Union[VariantMap, Mapping, None] = None, start: int = None, end: int = None,
                 wrapping: bool = None, name: str = None, info: Mapping[str, Any] = None,
                 show_codons: bool = False, show_frames: bool = False):
        super().__init__(reference, variants, start, end, locus_id=locus_id, wrapping=wrapping, name=name,
                         info=info)
        self._show_codons = show_codons
        self._show_frames = show_frames
        residues = {}
        for position in self._variants:
            residue = self.residue(position)
            residues[position] = GeneticCode.STOP if residue == GeneticCode.TERM else residue
        self._residues = VariantMap(residues)

    @property
    def show_codons(self) -> bool: return self._show_codons
    @property
    def show_frames(self) -> bool: return self._show_frames

    def codon(self, position: int) -> str:
        """Returns the codon recorded at an amino acid position."""
        return parse_codon_token(self._variants[position])[0]

    def frame(self, position: int) -> int:
        """Returns the reading frame offset recorded at an amino acid position (0 when in frame)."""
        return parse_codon_token(self._variants[position])[1]

    def residue(self, position: int) -> str:
        """Returns the residue encoded at an amino acid position, ``TERM`` for a stop."""
        return self._reference.get_codon(self.codon(position))

    def display_variants(self, show_codons: bool = None, show_frames: bool = None) -> dict[int, str]:
        """
        Returns the variant view keyed by amino acid position.

        Args:
            show_codons: Show codons instead of residues (defaults to the molecule's setting).
            show_frames: Append the frame suffix to out-of-frame positions (defaults to the molecule's setting).

        Returns:
            A dictionary of ``position -> residue`` (or codon), e.g. ``{3: 'M +1'}``.
        """
        show_codons = self._show_codons if show_codons is None else show_codons
        show_frames = self._show_frames if show_frames is None else show_frames
        view = {}
        for position in self._variants:
            codon, frame = parse_codon_token(self._variants[position])
            value = codon if show_codons else self._reference.get_codon(codon)
            if show_frames and frame: value = f'{value} {frame:+d}'
            view[position.anchor] = value
        return view

    def _overlay_variants(self) -> VariantMap:
        return self._residues


# Functions ------------------------------------------------------------------------------------------------------------
_CODON_TOKEN = re.compile(r'^([A-Za-z]{3})(?:\s+([+-]?\d+))?$')


def parse_codon_token(token: str) -> tuple[str, int]:
    """
    Splits an amino acid variant token into its codon and frame offset.

    Examples:
        >>> parse_codon_token('AUG +1')
        ('AUG', 1)
        >>> parse_codon_token('UUG')
        ('UUG', 0)

    Raises:
        ValidationError: If the token is not a codon with an optional signed integer suffix.
    """
    if not (m := _CODON_TOKEN.match(token)): raise ValidationError(f'Invalid codon token: {token!r}')
    return m.group(1).upper(), int(m.group(2) or 0)
