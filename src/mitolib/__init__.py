"""
Reconstruction of mitochondrial DNA, transcript and protein sequences from sparse variant maps.

Examples:
    >>> from mitolib import DNASeq, SpeciesReference
    >>> dna = DNASeq(SpeciesReference.RCRS, {5906: 'A'})
    >>> dna.transcribe('MTCO1').translate().display_variants()
    {1: 'M'}
"""
from mitolib.containers.locus import Locus, LocusType, Strand
from mitolib.containers.seq import AASeq, DNASeq, Molecule, MoleculeKind, RNASeq, WindowSource
from mitolib.containers.variants import Variant, VariantMap, VariantType
from mitolib.core.alphabet import Alphabet, AlphabetConverter, GeneticCode
from mitolib.core.interval import Window, sub_seq
from mitolib.core.position import Position
from mitolib.reference import SpeciesReference
from mitolib.utils import (BoundsError, ConfigurationError, DomainError, MitolibError, MitolibWarning,
                           TranscriptWarning, ValidationError)
