import pytest
from mitolib.containers.variants import Variant, VariantMap, VariantType
from mitolib.core.position import Position
from mitolib.utils import ValidationError


class TestVariant:
    def test_kinds(self):
        assert Variant(100, 'A').kind == VariantType.SUBSTITUTION
        assert Variant('100.01', 'AC').kind == VariantType.INSERTION
        assert Variant(310, '--').kind == VariantType.DELETION

    def test_length(self):
        assert len(Variant(310, '---')) == 3
        assert len(Variant('100.1', 'ACG')) == 3

    def test_parse(self):
        v = Variant.parse('310:--')
        assert v.position == 310
        assert v.is_deletion
        assert Variant.parse(' 100.01 : AC ') == Variant('100.01', 'AC')

    def test_parse_missing_separator(self):
        with pytest.raises(ValidationError, match='POSITION:TOKEN'):
            Variant.parse('3308C')

    def test_empty_token(self):
        with pytest.raises(ValidationError, match='empty'):
            Variant(100, '')

    def test_codon_token(self):
        v = Variant(3, 'CUU -1')
        assert v.is_substitution
        assert v.token == 'CUU -1'

    def test_insertion_with_gap(self):
        with pytest.raises(ValidationError, match='gap markers'):
            Variant('100.1', '-')

    def test_str(self):
        assert str(Variant('100.01', 'AC')) == '100.01:AC'


class TestVariantMap:
    def test_sorted(self):
        vmap = VariantMap({'100.01': 'AC', 73: 'G', 310: '--', '100.1': 'T', 100: 'C'})
        assert [str(p) for p in vmap] == ['73', '100', '100.01', '100.1', '310']

    def test_counts(self):
        vmap = VariantMap({'100.01': 'AC', 73: 'G', 310: '--'})
        assert vmap.inserted == 2
        assert vmap.deleted == 2
        assert len(vmap) == 3

    def test_lookup(self):
        vmap = VariantMap({'100.01': 'AC', 73: 'G'})
        assert vmap[73] == vmap['73'] == vmap[Position(73)] == 'G'
        assert vmap['100.01'] == vmap[100.01] == 'AC'
        assert 73 in vmap
        assert 74 not in vmap
        assert 'junk' not in vmap
        with pytest.raises(KeyError):
            vmap[74]

    def test_from_variants(self):
        vmap = VariantMap([Variant(5, 'A'), Variant(2, 'C')])
        assert vmap.positions == (Position(2), Position(5))
        assert VariantMap(vmap) == vmap

    def test_empty(self):
        assert not VariantMap()
        assert VariantMap(None) == {}

    def test_duplicate(self):
        with pytest.raises(ValidationError, match='Duplicate'):
            VariantMap({'100.1': 'A', '100.10': 'C'})

    def test_overlapping_deletion(self):
        with pytest.raises(ValidationError, match='overlaps'):
            VariantMap({310: '---', 311: 'A'})
        with pytest.raises(ValidationError, match='overlaps'):
            VariantMap({310: '---', '310.1': 'A'})

    def test_insertion_after_deletion(self):
        vmap = VariantMap({310: '---', '312.1': 'A', 313: 'G'})
        assert len(vmap) == 3

    def test_equality(self):
        assert VariantMap({73: 'G'}) == {'73': 'G'}
        assert VariantMap({73: 'G'}) != {73: 'A'}
        assert hash(VariantMap({73: 'G'})) == hash(VariantMap({'73': 'G'}))

    def test_variants_and_dict(self):
        vmap = VariantMap({'100.01': 'AC', 73: 'G'})
        assert [v.kind for v in vmap.variants()] == [VariantType.SUBSTITUTION, VariantType.INSERTION]
        assert vmap.variant(73) == Variant(73, 'G')
        assert vmap.to_dict() == {'73': 'G', '100.01': 'AC'}

    def test_immutable(self):
        vmap = VariantMap({73: 'G'})
        with pytest.raises(TypeError):
            vmap[74] = 'A'
