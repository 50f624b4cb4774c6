import pytest
from mitolib.containers.variants import VariantMap
from mitolib.engines.translation import CodonTranslator

MTCO1 = 'AUGUUCGCCGACCGUUG'


class TestCodonTranslator:
    def test_no_variants(self):
        assert CodonTranslator(MTCO1).translate(VariantMap()) == {}

    def test_substitution(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({4: 'C'})) == {1: 'AUG', 2: 'CUC'}

    def test_substitution_on_codon_boundary(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({3: 'A'})) == {1: 'AUA'}

    def test_deletion(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({2: '-'})) == {1: 'AGU +1'}

    def test_deletion_then_substitution(self):
        codons = CodonTranslator(MTCO1).translate(VariantMap({2: '-', 10: 'A'}))
        assert codons == {1: 'AGU +1', 2: 'UCG +1', 3: 'CCA +1'}

    def test_in_frame_deletion(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({4: '---'})) == {1: 'AUG'}
        assert CodonTranslator(MTCO1).translate(VariantMap({5: '---'})) == {1: 'AUG', 2: 'UCC +3'}

    def test_insertion(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({'3.1': 'C'})) == {1: 'AUG', 2: 'CUU -1'}

    def test_multi_base_insertion(self):
        assert CodonTranslator(MTCO1).translate(VariantMap({'3.1': 'CA'})) == {1: 'AUG', 2: 'CAU -3'}

    def test_queued_bases_shift_frame_after_insertion(self):
        # The variant shifts by its length, then each queued base by one more
        assert CodonTranslator(MTCO1).translate(VariantMap({'3.1': 'CAG'})) == {1: 'AUG', 2: 'CAG -5'}
        assert CodonTranslator(MTCO1).translate(VariantMap({'3.1': 'CA', 4: '-'})) == {1: 'AUG', 2: 'CAU -2'}

    def test_insertion_frame_recovered_by_deletion(self):
        codons = CodonTranslator(MTCO1).translate(VariantMap({'3.1': 'C', 5: '-'}))
        assert codons == {1: 'AUG', 2: 'CUC'}

    def test_padding_past_transcript_end(self):
        assert CodonTranslator('AUGUA').translate(VariantMap({4: 'C'})) == {1: 'AUG', 2: 'CAA'}

    @pytest.mark.parametrize('frame, expected', [(0, 'AUG'), (1, 'AUG +1'), (-2, 'AUG -2')])
    def test_format_codon(self, frame, expected):
        assert CodonTranslator.format_codon('AUG', frame) == expected
