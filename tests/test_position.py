from decimal import Decimal

import pytest
from mitolib.core.position import Position
from mitolib.utils import ValidationError


class TestPositionParse:
    def test_int(self):
        p = Position.parse(100)
        assert p.anchor == 100
        assert p.serial == 0
        assert not p.is_insertion

    def test_decimal_string(self):
        assert Position.parse('100.01') == Position(100, 10000)
        assert Position.parse('100.1') == Position(100, 100000)

    def test_float_and_decimal(self):
        assert Position.parse(100.1) == Position(100, 100000)
        assert Position.parse(Decimal('5.5')) == Position(5, 500000)

    def test_integral_string_is_not_insertion(self):
        assert not Position.parse('310').is_insertion
        assert not Position.parse('310.0').is_insertion

    def test_passthrough(self):
        p = Position(3, 1)
        assert Position.parse(p) is p

    @pytest.mark.parametrize('value', ['abc', '', '0', '-5', 0, -1, 'nan', True])
    def test_invalid(self, value):
        with pytest.raises(ValidationError):
            Position.parse(value)

    def test_too_many_digits(self):
        with pytest.raises(ValidationError, match='decimal places'):
            Position.parse('1.0000001')


class TestPositionOrdering:
    def test_insertions_sort_between_residues(self):
        positions = [Position.parse(p) for p in ('101', '100.2', '100.01', '100', '100.1')]
        assert [str(p) for p in sorted(positions)] == ['100', '100.01', '100.1', '100.2', '101']

    def test_compare_with_int(self):
        assert Position(100) == 100
        assert Position(100, 1) != 100
        assert Position(100, 1) > 100
        assert Position(100, 1) < 101

    def test_hash_matches_int(self):
        assert hash(Position(100)) == hash(100)
        assert {Position(7): 'x'}[7] == 'x'

    def test_str_and_repr(self):
        assert str(Position(100, 10000)) == '100.01'
        assert str(Position(100)) == '100'
        assert repr(Position(100, 10000)) == 'Position(100, 10000)'

    def test_shift_keeps_serial(self):
        assert Position(5, 120000).shift(9) == Position.parse('9.12')
