import pytest
from mitolib.containers.locus import Locus, LocusType, Strand
from mitolib.core.alphabet import GeneticCode, TranslationError
from mitolib.utils import BoundsError, ConfigurationError
from mitolib.utils.protocols import ReferenceDataProvider


class TestSpeciesReference:
    def test_protocol(self, reference):
        assert isinstance(reference, ReferenceDataProvider)

    def test_genome(self, reference, genome):
        assert reference.genome_length == 16569
        assert len(genome) == 16569
        assert genome.startswith('GATCAC')
        assert reference.get_reference(100, 105) == 'GGAGCC'
        assert reference.get_reference(3107) == 'N'
        assert reference.placeholder == 3107

    def test_genome_across_origin(self, reference):
        assert reference.get_reference(16567, 6) == 'ATGGATCAC'

    def test_genome_bounds(self, reference):
        with pytest.raises(BoundsError):
            reference.get_reference(16569, 16570)

    def test_loci(self, reference):
        loci = list(reference.loci)
        assert len(loci) == 72
        assert [l.id for l in loci] == sorted(l.id for l in loci)

    @pytest.mark.parametrize('key', [16, '16', 'MTCO1', 'mtco1'])
    def test_get_locus(self, reference, key):
        locus = reference.get_locus(key)
        assert locus.name == 'MTCO1'
        assert (locus.start, locus.end) == (5904, 7445)
        assert locus.strand == Strand.H
        assert locus.type == LocusType.CODING

    def test_unknown_locus(self, reference):
        with pytest.raises(ConfigurationError, match='Unknown locus'):
            reference.get_locus(999)

    def test_codon(self, reference):
        assert reference.get_codon('AUA') == 'M'
        assert reference.get_codon('AGG') == GeneticCode.TERM
        with pytest.raises(TranslationError):
            reference.get_codon('ANA')

    def test_transcripts_match_loci(self, reference):
        for locus in reference.loci:
            span = locus.end - locus.start + 1
            if locus.type == LocusType.TRNA:
                assert len(reference.get_transcript(locus.id)) == span, locus.name
            elif locus.type == LocusType.CODING:
                # Incomplete stop codons are completed in the mature transcript
                assert span <= len(reference.get_transcript(locus.id)) < span + 3, locus.name

    def test_translations_match_transcripts(self, reference):
        code = reference.genetic_code
        for locus in reference.loci:
            if locus.type != LocusType.CODING: continue
            transcript = reference.get_transcript(locus.id)
            transcript += 'A' * (-len(transcript) % 3)
            assert code.translate(transcript, to_stop=True) == reference.get_translation(locus.id), locus.name

    def test_missing_tables(self, reference):
        with pytest.raises(ConfigurationError, match='no transcript'):
            reference.get_transcript('MTHV2')
        with pytest.raises(ConfigurationError, match='no translation'):
            reference.get_translation('MTTF')
        with pytest.raises(ConfigurationError, match='encodes no protein'):
            reference.get_protein('MTTF')

    def test_protein(self, reference):
        protein = reference.get_protein('MTCO1')
        assert protein.npid == 'NP_536845.1'
        assert protein.name == 'cytochrome c oxidase subunit I'


class TestLocus:
    def test_wrapping_locus(self, reference):
        locus = reference.get_locus('MTDLOOP')
        assert locus.wraps
        assert locus.strand == Strand.N
        assert len(locus.window(reference.genome_length)) == 16569 - 16024 + 1 + 576

    def test_light_strand(self, reference):
        assert reference.get_locus('MTND6').strand == Strand.L

    def test_codes(self):
        assert Strand.from_symbol('l') == Strand.L
        assert LocusType.from_code('t') == LocusType.TRNA
        assert LocusType.CODING.code == 'm'
        assert not LocusType.NONCODING.is_transcribed
        with pytest.raises(ConfigurationError):
            Strand.from_symbol('X')
        with pytest.raises(ConfigurationError):
            LocusType.from_code('z')

    def test_equality(self):
        a = Locus(1, 'MTTF', 'F', 577, 647, 'H', 't')
        assert a == Locus(1, 'MTTF', 'F', 577, 647, Strand.H, LocusType.TRNA)
        assert hash(a) == hash(Locus(1, 'MTTF', 'F', 577, 647, 'H', 't'))
