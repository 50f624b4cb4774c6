import pytest
from mitolib.containers.variants import VariantMap
from mitolib.core.interval import sub_seq
from mitolib.engines.overlay import effective_length, overlay

REF = 'ACGTACGT'


class TestOverlay:
    def test_no_variants(self):
        assert overlay(REF, VariantMap(), 2, 5) == 'CGTA'
        assert overlay(REF, VariantMap(), 7, 2) == 'GTAC'

    def test_mixed(self):
        assert overlay('ACGTAC', VariantMap({2: 'T', '3.1': 'GG', 5: '-'}), 1, 6) == 'ATGGGT-C'

    def test_substitution(self):
        vmap = VariantMap({3: 'T'})
        assert overlay(REF, vmap, 1, 8) == 'ACTTACGT'
        assert overlay(REF, vmap, 3, 3) == 'T'
        assert overlay(REF, vmap, 4, 8) == sub_seq(REF, 4, 8)

    def test_deletion_keeps_gaps(self):
        assert overlay(REF, VariantMap({3: '--'}), 1, 6) == 'AC--AC'
        assert overlay(REF, VariantMap({3: '--'}), 4, 5) == '-A'

    def test_insertion_inside_window(self):
        assert overlay(REF, VariantMap({'3.1': 'TT'}), 2, 5) == 'CGTTTA'

    def test_insertion_before_window(self):
        assert overlay(REF, VariantMap({'1.1': 'GG'}), 3, 5) == sub_seq(REF, 3, 5)

    def test_insertion_at_window_end(self):
        assert overlay(REF, VariantMap({'5.1': 'TT'}), 2, 5) == 'CGTA'

    def test_insertions_at_one_anchor(self):
        vmap = VariantMap({'2.2': 'G', '2.1': 'TT'})
        assert overlay(REF, vmap, 1, 3) == 'ACTTGG'

    def test_insertion_after_deletion(self):
        vmap = VariantMap({3: '--', '4.1': 'C'})
        assert overlay(REF, vmap, 1, 6) == 'AC--CAC'

    def test_across_origin(self):
        assert overlay(REF, VariantMap({'1.1': 'TT'}), 7, 2) == 'GTATTC'
        assert overlay(REF, VariantMap({8: 'C', 1: 'G'}), 7, 1) == 'GCG'

    def test_drift(self):
        """Each insertion before a query shifts it by the inserted length, leaving the content unchanged."""
        ref = 'GATCACAGGTCTATCACCCT'
        vmap = VariantMap({'2.1': 'A', '4.01': 'CC', '4.02': 'G'})
        assert overlay(ref, vmap, 10, 15) == sub_seq(ref, 10, 15)
        assert overlay(ref, vmap, 1, 20).replace('-', '') == 'GAATCCCGACAGGTCTATCACCCT'


class TestEffectiveLength:
    @pytest.mark.parametrize('variants, start, end, expected', [
        ({}, 1, 8, 8),
        ({3: '--'}, 1, 8, 6),
        ({'3.1': 'TT'}, 2, 5, 6),
        ({'5.1': 'TT'}, 2, 5, 4),
        ({3: '--', '4.1': 'C'}, 1, 6, 5),
    ])
    def test_matches_gapless_overlay(self, variants, start, end, expected):
        vmap = VariantMap(variants)
        assert effective_length(end - start + 1, vmap, end) == expected
        assert len(overlay(REF, vmap, start, end).replace('-', '')) == expected
