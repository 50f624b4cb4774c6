"""
Immutable species reference: genome, codon table, locus table, transcripts, translations and protein metadata.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Iterable, Iterator, Mapping, Optional, Union

from mitolib.containers.locus import Locus
from mitolib.core.alphabet import GeneticCode
from mitolib.core.interval import Window, sub_seq
from mitolib.reference import rcrs
from mitolib.utils import ConfigurationError


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(slots=True, frozen=True)
class Protein:
    """Metadata for a mitochondrially encoded protein."""
    locus_id: int
    id: int
    predicted_weight: int
    glycine_number: Optional[str]
    glycine_weight: Optional[float]
    urea_number: Optional[str]
    urea_weight: Optional[str]
    name: str
    npid: str
    giid: str


class SpeciesReference:
    """
    Reference tables for one species, addressed through 1-based inclusive coordinates.

    The genome is circular: ``get_reference`` accepts ranges that cross the origin. Loci are looked up by numeric
    id or by name, and codons in either DNA or RNA form.

    Args:
        species: Species name.
        name: Reference sequence name.
        genome: The reference genome string.
        genetic_code: The codon table.
        loci: The annotated loci.
        transcripts: Mature transcript strings keyed by locus id.
        translations: Protein strings (without the stop) keyed by locus id.
        proteins: Protein metadata.
        placeholder: Genome position of a placeholder residue that the transcripts omit, if any.

    Examples:
        >>> SpeciesReference.RCRS.get_reference(100, 105)
        'GGAGCC'
        >>> SpeciesReference.RCRS.get_locus('MTCO1').start
        5904
    """
    __slots__ = ('_species', '_name', '_genome', '_genetic_code', '_loci', '_names', '_transcripts',
                 '_translations', '_proteins', '_placeholder')
    RCRS: ClassVar['SpeciesReference']

    def __init__(self, species: str, name: str, genome: str, genetic_code: GeneticCode, loci: Iterable[Locus],
                 transcripts: Mapping[int, str], translations: Mapping[int, str], proteins: Iterable[Protein] = (),
                 placeholder: Optional[int] = None):
        self._species = species
        self._name = name
        self._genome = genome
        self._genetic_code = genetic_code
        self._loci = MappingProxyType({locus.id: locus for locus in sorted(loci, key=lambda l: l.id)})
        self._names = MappingProxyType({locus.name.upper(): locus for locus in self._loci.values()})
        self._transcripts = MappingProxyType(dict(transcripts))
        self._translations = MappingProxyType(dict(translations))
        self._proteins = MappingProxyType({protein.locus_id: protein for protein in proteins})
        self._placeholder = placeholder

    def __repr__(self):
        return f"SpeciesReference('{self._species}', '{self._name}', {self.genome_length} bp)"

    @property
    def species(self) -> str: return self._species
    @property
    def name(self) -> str: return self._name
    @property
    def genome_length(self) -> int: return len(self._genome)
    @property
    def placeholder(self) -> Optional[int]: return self._placeholder
    @property
    def genetic_code(self) -> GeneticCode: return self._genetic_code
    @property
    def loci(self) -> Iterator[Locus]:
        """Iterates over the loci in id order."""
        return iter(self._loci.values())

    def get_reference(self, start: int = None, end: int = None) -> str:
        """
        Returns the reference genome between two positions.

        With no arguments the whole genome is returned and a single argument returns one position. A start greater
        than the end reads across the origin.

        Raises:
            BoundsError: If a position is outside the genome.
            ValidationError: If a position is not a positive integer.
        """
        window = Window(1, self.genome_length, self.genome_length, wrapping=True)
        return sub_seq(self._genome, *window.validate(*window.normalize(start, end)))

    def get_locus(self, locus: Union[int, str]) -> Locus:
        """
        Looks up a locus by numeric id (or its decimal string) or by name (case-insensitive).

        Raises:
            ConfigurationError: If no such locus exists.
        """
        if isinstance(locus, str) and locus.strip().isdigit(): locus = int(locus)
        found = self._loci.get(locus) if isinstance(locus, int) else self._names.get(str(locus).upper())
        if found is None: raise ConfigurationError(f'Unknown locus: {locus!r}')
        return found

    def get_codon(self, codon: str) -> str:
        """
        Returns the residue for a DNA or RNA codon, or ``TERM`` for a stop.

        Raises:
            TranslationError: If the codon is invalid (a ``ConfigurationError``).
        """
        return self._genetic_code.codon(codon)

    def get_transcript(self, locus_id: Union[int, str]) -> str:
        """
        Returns the mature transcript of a locus.

        Raises:
            ConfigurationError: If the locus has no transcript.
        """
        locus = self.get_locus(locus_id)
        if (transcript := self._transcripts.get(locus.id)) is None:
            raise ConfigurationError(f'Locus {locus.name} has no transcript')
        return transcript

    def get_translation(self, locus_id: Union[int, str]) -> str:
        """
        Returns the protein translation of a coding locus, without the terminal stop.

        Raises:
            ConfigurationError: If the locus has no translation.
        """
        locus = self.get_locus(locus_id)
        if (translation := self._translations.get(locus.id)) is None:
            raise ConfigurationError(f'Locus {locus.name} has no translation')
        return translation

    def get_protein(self, locus_id: Union[int, str]) -> Protein:
        """
        Returns metadata for the protein encoded by a locus.

        Raises:
            ConfigurationError: If the locus encodes no protein.
        """
        locus = self.get_locus(locus_id)
        if (protein := self._proteins.get(locus.id)) is None:
            raise ConfigurationError(f'Locus {locus.name} encodes no protein')
        return protein


SpeciesReference.RCRS = SpeciesReference(
    'human', 'rCRS', rcrs.GENOME, GeneticCode.VERTEBRATE_MITOCHONDRIAL,
    (Locus(*row) for row in rcrs.LOCI), rcrs.TRANSCRIPTS, rcrs.TRANSLATIONS,
    (Protein(*row) for row in rcrs.PROTEINS), rcrs.PLACEHOLDER
)
