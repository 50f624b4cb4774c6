"""
Engines for moving DNA variants into transcript coordinates and for poly-adenylating mature transcripts.
"""
from typing import Optional
from warnings import warn

from mitolib.containers.locus import Locus, Strand
from mitolib.containers.variants import Variant, VariantMap
from mitolib.core.alphabet import Alphabet, AlphabetConverter
from mitolib.utils import ConfigurationError, DomainError, TranscriptWarning


# Classes --------------------------------------------------------------------------------------------------------------
class StrandTranscriber:
    """
    Maps genome-coordinate DNA variants onto the 1-based coordinates of a locus transcript.

    Heavy-strand loci read in genome order, so a position moves by the locus offset. Light-strand loci read the
    reverse complement: positions count back from the locus end, tokens are complemented, multi-base deletions are
    re-keyed on their last genome residue, and inserted bases are reversed as well as complemented.

    A ``placeholder`` inside the locus is a genome residue with no transcript counterpart. The transcript numbering
    skips it, so a substitution at it is dropped and a deletion spanning it loses one gap. Deletions that straddle a
    locus edge are clipped to the locus.

    Args:
        locus: The locus being transcribed.
        placeholder: Genome position missing from the transcripts, if any.

    Raises:
        DomainError: If the locus type is not transcribed.
        ConfigurationError: If the locus has no heavy or light strand.

    Examples:
        >>> t = StrandTranscriber(SpeciesReference.RCRS.get_locus(16))  # MTCO1, 5904-7445, heavy strand
        >>> t.transcribe(VariantMap({5906: 'A'})).to_dict()
        {'3': 'A'}
    """
    __slots__ = ('_locus', '_placeholder')
    _TRANSCRIBE = AlphabetConverter.TRANSCRIBE
    _DNA = Alphabet.DNA

    def __init__(self, locus: Locus, placeholder: Optional[int] = None):
        if not locus.type.is_transcribed:
            raise DomainError(f'Locus {locus.name} ({locus.type.name}) is not transcribed')
        if locus.strand not in (Strand.H, Strand.L):
            raise ConfigurationError(f'Locus {locus.name} has no transcribable strand: {locus.strand}')
        self._locus = locus
        self._placeholder = placeholder if placeholder and locus.start <= placeholder <= locus.end else None

    @property
    def locus(self) -> Locus: return self._locus
    @property
    def placeholder(self) -> Optional[int]:
        """The skipped genome position, or ``None`` when the locus does not contain one."""
        return self._placeholder

    def __call__(self, variants: VariantMap) -> VariantMap:
        return self.transcribe(variants)

    def covers(self, variant: Variant) -> bool:
        """Returns ``True`` if the variant falls inside the locus, or for a deletion, if it overlaps the locus."""
        start, end = self._locus.start, self._locus.end
        if variant.is_deletion:
            return variant.position.anchor <= end and variant.position.anchor + len(variant) - 1 >= start
        return start <= variant.position <= end

    def transcribe(self, variants: VariantMap) -> VariantMap:
        """
        Returns the transcript-coordinate variants for the variants that fall inside the locus.

        Args:
            variants: Variants keyed on genome coordinates.

        Returns:
            A new ``VariantMap`` keyed on transcript coordinates, with RNA tokens.
        """
        transform = self._heavy if self._locus.strand == Strand.H else self._light
        return VariantMap(t for v in variants.variants() if self.covers(v) and (t := transform(v)) is not None)

    def _skipped(self, first: int, last: int) -> int:
        return int(self._placeholder is not None and first <= self._placeholder <= last)

    def _deletion(self, variant: Variant) -> tuple[int, int, int]:
        """Returns the first and last deleted genome residues inside the locus and the transcript residues between."""
        first = max(variant.position.anchor, self._locus.start)
        last = min(variant.position.anchor + len(variant) - 1, self._locus.end)
        return first, last, last - first + 1 - self._skipped(first, last)

    def _heavy(self, variant: Variant) -> Optional[Variant]:
        start, anchor = self._locus.start, variant.position.anchor
        if variant.is_insertion:
            # An insertion after the placeholder follows the residue before it
            offset = anchor - start + 1 - self._skipped(start, anchor)
            return Variant(variant.position.shift(offset), self._TRANSCRIBE.convert(variant.token))
        if variant.is_deletion:
            first, _, length = self._deletion(variant)
            if not length: return None
            return Variant(first - start + 1 - self._skipped(start, first - 1), Variant.GAP * length)
        if anchor == self._placeholder: return None
        return Variant(anchor - start + 1 - self._skipped(start, anchor), self._TRANSCRIBE.convert(variant.token))

    def _light(self, variant: Variant) -> Optional[Variant]:
        end, anchor = self._locus.end, variant.position.anchor
        if variant.is_insertion:
            # Genome residues anchor and anchor + 1 are transcript residues end - anchor + 1 and end - anchor
            token = self._TRANSCRIBE.convert(self._DNA.reverse_complement(variant.token))
            return Variant(variant.position.shift(end - anchor - self._skipped(anchor + 1, end)), token)
        if variant.is_deletion:
            _, last, length = self._deletion(variant)
            if not length: return None
            return Variant(end - last + 1 - self._skipped(last + 1, end), Variant.GAP * length)
        if anchor == self._placeholder: return None
        position = end - anchor + 1 - self._skipped(anchor + 1, end)
        return Variant(position, self._TRANSCRIBE.convert(self._DNA.complement(variant.token)))


# Functions ------------------------------------------------------------------------------------------------------------
def poly_adenylate(transcript: str, reference_length: int, tail: str = 'A') -> str:
    """
    Normalizes a full transcript to the codon boundary at or after the reference transcript length.

    Gap markers are stripped first. A short transcript is padded with ``tail``, a long one is truncated with a
    ``TranscriptWarning``.

    Args:
        transcript: The reconstructed transcript, possibly containing gap markers.
        reference_length: Length of the reference transcript for the locus.
        tail: The residue used for padding.

    Returns:
        The transcript at ``ceil(reference_length / 3) * 3`` residues.

    Examples:
        >>> poly_adenylate('AUG-U', 5)
        'AUGUAA'
    """
    target_length = -(-reference_length // 3) * 3
    transcript = transcript.replace(Variant.GAP, '')
    if len(transcript) < target_length: return transcript + tail * (target_length - len(transcript))
    if len(transcript) > target_length:
        warn(f'Transcript of {len(transcript)} residues truncated to {target_length}', TranscriptWarning)
        return transcript[:target_length]
    return transcript
