import pytest
from mitolib.containers.seq import AASeq, DNASeq, MoleculeKind, RNASeq, parse_codon_token
from mitolib.containers.variants import VariantMap
from mitolib.core.alphabet import TranslationError
from mitolib.core.interval import sub_seq
from mitolib.utils import BoundsError, ConfigurationError, DomainError, TranscriptWarning, ValidationError


class TestDNASeq:
    def test_reference_window(self, reference):
        dna = DNASeq(reference)
        assert dna.seq(100, 105) == 'GGAGCC'
        assert dna.seq(100) == 'G'
        assert dna.ref_seq(100, 105) == 'GGAGCC'

    def test_defaults(self, reference):
        dna = DNASeq(reference)
        assert dna.start == 1
        assert dna.end == 16569
        assert dna.wrapping
        assert len(dna) == 16569
        assert dna.kind is MoleculeKind.DNA

    def test_placeholder(self, reference):
        assert DNASeq(reference).seq(3106, 3108) == 'CNT'

    def test_wrapping_query(self, reference):
        dna = DNASeq(reference)
        assert dna.seq(16567, 6) == 'ATGGATCAC'
        assert len(dna.seq(16567, 6)) == 9

    def test_substitution(self, reference):
        dna = DNASeq(reference, {3308: 'C'})
        assert dna.seq(3306, 3310) == 'CACAC'
        assert dna.ref_seq(3306, 3310) == 'CATAC'
        assert dna.seq(3309, 3310) == 'AC'

    def test_substitution_round_trip(self, reference):
        dna = DNASeq(reference, {3308: 'C'})
        assert dna.seq(3308) == 'C'
        assert DNASeq(reference, {3308: dna.ref_seq(3308)}).seq(3300, 3320) == dna.ref_seq(3300, 3320)

    def test_insertion_drift(self, reference):
        """Insertions upstream of a query leave the queried residues unchanged."""
        dna = DNASeq(reference, {'100.1': 'AC', '200.01': 'T', 300: '--'})
        assert dna.seq(1000, 1010) == dna.ref_seq(1000, 1010)
        assert dna.seq(99, 101) == 'TGACG'
        assert dna.seq(299, 302) == dna.ref_seq(299) + '--' + dna.ref_seq(302)

    def test_gapless(self, reference):
        dna = DNASeq(reference, {101: '--'})
        assert dna.seq(100, 105) == 'G--GCC'
        assert dna.seq(100, 105, gapless=True) == 'GGCC'
        assert len(dna) == 16567

    def test_length_with_insertions(self, reference):
        assert len(DNASeq(reference, {'100.1': 'AC', 16569.1: 'T'})) == 16571
        assert len(DNASeq(reference, {'105.1': 'AC'}, 100, 105)) == 6

    def test_sub_seq_consistency(self, reference):
        dna = DNASeq(reference, {'100.1': 'AC', 103: 'T', 16568: '-'})
        for a, b, c in [(90, 95, 110), (16560, 16569, 10), (100, 103, 104)]:
            end = b + 1 if b < 16569 else 1
            assert dna.seq(a, b) + dna.seq(end, c) == dna.seq(a, c)

    def test_window(self, reference):
        dna = DNASeq(reference, start=16560, end=10)
        assert dna.window_length == 20
        assert dna.seq() == sub_seq(reference.get_reference(), 16560, 10)
        with pytest.raises(BoundsError):
            dna.seq(11, 12)

    def test_non_wrapping(self, reference):
        dna = DNASeq(reference, wrapping=False)
        with pytest.raises(BoundsError):
            dna.seq(16567, 6)

    def test_variant_outside_window(self, reference):
        with pytest.raises(BoundsError, match='outside window'):
            DNASeq(reference, {50: 'A'}, 100, 200)

    @pytest.mark.parametrize('variants, start, end', [
        ({200: '---'}, 100, 200), ({16569: '---'}, None, None), ({5: '---'}, 16560, 6)])
    def test_deletion_past_window(self, reference, variants, start, end):
        with pytest.raises(BoundsError, match='runs past'):
            DNASeq(reference, variants, start, end)

    def test_deletion_at_window_end(self, reference):
        assert len(DNASeq(reference, {199: '--'}, 100, 200)) == 99
        assert len(DNASeq(reference, {16568: '--'}, 16560, 6)) == 14
        with pytest.raises(BoundsError, match='runs past'):
            RNASeq(reference, 16, {29: '---'}, start=1, end=30)

    @pytest.mark.parametrize('variants', [{100: 'U'}, {100: 'AC'}, {100: 'A-'}, {'100.1': 'AZ'}])
    def test_invalid_tokens(self, reference, variants):
        with pytest.raises(ValidationError):
            DNASeq(reference, variants)

    def test_query_errors(self, reference):
        dna = DNASeq(reference)
        with pytest.raises(ValidationError):
            dna.seq(0, 5)
        with pytest.raises(ValidationError):
            dna.seq(None, 5)
        with pytest.raises(BoundsError):
            dna.seq(1, 16570)

    def test_from_record(self, reference):
        dna = DNASeq.from_record(reference, {
            'name': 'sample', 'variant_map': {73: 'G', 263: 'G'}, 'metadata': {'haplogroup': 'H2a2a1'}})
        assert dna.name == 'sample'
        assert dna.variants == VariantMap({73: 'G', 263: 'G'})
        assert dna.info['haplogroup'] == 'H2a2a1'
        with pytest.raises(TypeError):
            dna.info['haplogroup'] = 'H'

    def test_equality(self, reference):
        assert DNASeq(reference, {73: 'G'}) == DNASeq(reference, {'73': 'G'})
        assert DNASeq(reference, {73: 'G'}) != DNASeq(reference, {73: 'A'})
        assert hash(DNASeq(reference, {73: 'G'})) == hash(DNASeq(reference, {'73': 'G'}))


class TestTranscribe:
    def test_heavy_strand(self, reference):
        rna = DNASeq(reference).transcribe(16)
        assert isinstance(rna, RNASeq)
        assert rna.seq(1, 3) == 'AUG'
        assert rna.ref_seq(1, 9) == 'AUGUUCGCC'

    def test_heavy_strand_variant(self, reference):
        rna = DNASeq(reference, {5906: 'A', 73: 'G'}).transcribe('MTCO1')
        assert rna.variants == {3: 'A'}
        assert rna.seq(1, 3) == 'AUA'

    def test_light_strand(self, reference):
        rna = DNASeq(reference).transcribe('MTND6')
        assert rna.seq(1, 9) == 'AUGAUGUAU'

    def test_light_strand_variants(self, reference):
        assert DNASeq(reference, {14673: 'C'}).transcribe(33).seq(1, 3) == 'GUG'
        assert DNASeq(reference, {14671: '--'}).transcribe(33).seq(1, 4) == 'A--A'
        assert DNASeq(reference, {'14671.1': 'AC'}).transcribe(33).seq(1, 4) == 'AUGUGA'

    def test_placeholder_locus(self, reference):
        rna = DNASeq(reference, {3230: 'A'}).transcribe('MTRNR2')
        assert rna.variants == {1559: 'A'}
        assert rna.ref_seq(1559) == 'G'
        assert rna.seq(1559) == 'A'

    def test_variant_after_placeholder(self, reference):
        rna = DNASeq(reference, {3108: 'C'}).transcribe('MTRNR2')
        assert rna.variants == {1437: 'C'}
        assert rna.ref_seq(1436, 1437) == 'CU'
        assert rna.seq(1436, 1437) == 'CC'

    def test_poly_adenylation(self, reference):
        rna = DNASeq(reference).transcribe('MTTF')
        assert len(reference.get_transcript(1)) == 71
        assert len(rna.seq()) == 72
        assert rna.seq().endswith('A')
        assert len(rna.seq(1, 71)) == 71

    def test_poly_adenylation_after_deletion(self, reference):
        seq = DNASeq(reference, {5910: '-'}).transcribe(16).seq()
        assert len(seq) == 1542
        assert seq.endswith('A')
        assert '-' not in seq

    def test_truncation_warning(self, reference):
        rna = DNASeq(reference, {'5910.1': 'A'}).transcribe(16)
        with pytest.warns(TranscriptWarning):
            assert len(rna.seq()) == 1542

    def test_non_transcribed(self, reference):
        with pytest.raises(DomainError):
            DNASeq(reference).transcribe('MTHV2')

    def test_unknown_locus(self, reference):
        with pytest.raises(ConfigurationError):
            DNASeq(reference).transcribe('MTXYZ')

    def test_window_not_covering(self, reference):
        with pytest.raises(BoundsError, match='does not cover'):
            DNASeq(reference, start=1, end=6000).transcribe(16)

    def test_deletion_across_locus_edge(self, reference):
        rna = DNASeq(reference, {7444: '---'}).transcribe(16)
        assert rna.variants == {1541: '--'}
        assert rna.seq(1540, 1542) == rna.ref_seq(1540) + '--'

    def test_carries_name(self, reference):
        assert DNASeq(reference, name='sample').transcribe(16).name == 'sample'


class TestTranslate:
    def test_reference(self, reference):
        aa = DNASeq(reference).transcribe(16).translate()
        assert isinstance(aa, AASeq)
        assert aa.seq(1, 3) == 'MFA'
        assert not aa.variants
        assert aa.seq().endswith('*')
        assert len(aa) == 514

    def test_substitution(self, reference):
        aa = DNASeq(reference, {5907: 'C'}).transcribe(16).translate()
        assert aa.display_variants() == {1: 'M', 2: 'L'}
        assert aa.seq(1, 3) == 'MLA'

    def test_deletion_frame(self, reference):
        aa = DNASeq(reference, {5905: '-', 5913: 'A'}).transcribe(16).translate()
        assert aa.display_variants(show_codons=True, show_frames=True) == {1: 'AGU +1', 2: 'UCG +1', 3: 'CCA +1'}
        assert aa.display_variants() == {1: 'S', 2: 'S', 3: 'P'}
        assert aa.frame(1) == 1

    def test_insertion_frame(self, reference):
        aa = DNASeq(reference, {'5906.1': 'C'}).transcribe(16).translate()
        assert aa.display_variants(show_codons=True, show_frames=True) == {1: 'AUG', 2: 'CUU -1'}

    def test_light_strand(self, reference):
        aa = DNASeq(reference, {14673: 'C'}).transcribe('MTND6').translate()
        assert aa.display_variants(show_codons=True) == {1: 'GUG'}
        assert aa.seq(1, 3) == 'VMY'

    def test_protein(self, reference):
        assert DNASeq(reference).transcribe(16).protein() == reference.get_translation(16)
        assert DNASeq(reference, {5910: 'T', 5911: 'A', 5912: 'A'}).transcribe(16).protein() == 'MF'

    def test_non_coding(self, reference):
        with pytest.raises(DomainError, match='not a coding locus'):
            DNASeq(reference).transcribe('MTTF').translate()

    def test_partial_transcript(self, reference):
        with pytest.raises(DomainError, match='whole transcript'):
            RNASeq(reference, 16, start=1, end=30).translate()


class TestAASeq:
    variants = {2: 'UUG', 3: 'AUG +1', 4: 'CUU +1', 5: 'UGG'}

    def test_display_variants(self, reference):
        aa = AASeq(reference, 16, self.variants)
        assert aa.display_variants() == {2: 'L', 3: 'M', 4: 'L', 5: 'W'}

    def test_display_frames(self, reference):
        aa = AASeq(reference, 16, self.variants, show_frames=True)
        assert aa.display_variants() == {2: 'L', 3: 'M +1', 4: 'L +1', 5: 'W'}

    def test_display_codons(self, reference):
        aa = AASeq(reference, 16, self.variants)
        assert aa.display_variants(show_codons=True) == {2: 'UUG', 3: 'AUG', 4: 'CUU', 5: 'UGG'}

    def test_accessors(self, reference):
        aa = AASeq(reference, 16, self.variants)
        assert aa.codon(3) == 'AUG'
        assert aa.frame(3) == 1
        assert aa.frame(2) == 0
        assert aa.residue(5) == 'W'

    def test_seq(self, reference):
        assert AASeq(reference, 16).seq(1, 3) == 'MFA'
        assert AASeq(reference, 16, self.variants).seq(1, 6) == 'MLMLWW'

    def test_stop(self, reference):
        aa = AASeq(reference, 16, {2: 'UAA'})
        assert aa.display_variants() == {2: 'TERM'}
        assert aa.seq(1, 3) == 'M*A'

    def test_stop_addressable(self, reference):
        aa = AASeq(reference, 16)
        assert aa.end == 514
        assert aa.seq(514) == '*'

    @pytest.mark.parametrize('variants', [{2: 'UU'}, {2: 'UXG'}, {2: '---'}, {'2.1': 'UUG'}, {2: 'UUG +x'}])
    def test_invalid_variants(self, reference, variants):
        with pytest.raises(ValidationError):
            AASeq(reference, 16, variants)

    def test_ambiguous_codon(self, reference):
        with pytest.raises(TranslationError):
            AASeq(reference, 16, {2: 'UNG'})

    def test_residue_overlay(self, reference):
        aa = AASeq(reference, 16, {2: 'UAA', 3: 'AUG +1'})
        assert aa.seq(2, 3) == '*M'
        assert aa.display_variants() == {2: 'TERM', 3: 'M'}

    def test_no_translation(self, reference):
        with pytest.raises(ConfigurationError):
            AASeq(reference, 1)

    def test_parse_codon_token(self):
        assert parse_codon_token('AUG +1') == ('AUG', 1)
        assert parse_codon_token('aug -2') == ('AUG', -2)
        assert parse_codon_token('UUG') == ('UUG', 0)
