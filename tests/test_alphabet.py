import numpy as np
import pytest
from mitolib.core.alphabet import Alphabet, AlphabetConverter, AlphabetError, GeneticCode, TranslationError
from mitolib.utils import ConfigurationError


class TestAlphabetInit:
    def test_valid_init(self):
        alpha = Alphabet(b'ACGT')
        assert len(alpha) == 4
        assert 'A' in alpha
        assert b'A' in alpha
        assert 'Z' not in alpha
        assert alpha.symbols == 'ACGT'

    def test_init_invalid_ascii(self):
        with pytest.raises(AlphabetError, match="valid ASCII"):
            Alphabet(b'ACG\xff')

    def test_init_duplicates(self):
        with pytest.raises(AlphabetError, match="duplicate"):
            Alphabet(b'AACGT')

    def test_aliases(self):
        alpha = Alphabet(b'ACGT', aliases={b'N': b'A'})
        assert alpha.encode('N')[0] == alpha.encode('A')[0]
        # Lower case aliases resolve too
        assert alpha.encode('n')[0] == alpha.encode('A')[0]

    def test_invalid_complement_length(self):
        with pytest.raises(AlphabetError, match="same length"):
            Alphabet(b'ACGT', complement=b'TG')

    def test_invalid_complement_chars(self):
        with pytest.raises(AlphabetError, match="not in alphabet"):
            Alphabet(b'ACGT', complement=b'TGXZ')


class TestAlphabetEncoding:
    def test_encode_decode(self):
        encoded = Alphabet.DNA.encode('ACGT')
        np.testing.assert_array_equal(encoded, [0, 1, 2, 3])
        assert Alphabet.DNA.decode(encoded) == 'ACGT'

    def test_lower_case(self):
        np.testing.assert_array_equal(Alphabet.DNA.encode('acgt'), [0, 1, 2, 3])

    def test_encode_invalid_chars(self):
        with pytest.raises(AlphabetError, match="not in"):
            Alphabet.DNA.encode('ACGTZ')

    def test_is_valid(self):
        assert Alphabet.DNA.is_valid('ACGTN')
        assert not Alphabet.DNA.is_valid('ACGU')
        assert Alphabet.RNA.is_valid('ACGU')
        assert not Alphabet.RNA.is_valid('ACGé')


class TestComplement:
    def test_complement(self):
        assert Alphabet.DNA.complement('ACGTN') == 'TGCAN'
        assert Alphabet.RNA.complement('ACGU') == 'UGCA'

    def test_ambiguity_codes(self):
        assert Alphabet.DNA.complement('RYKM') == 'YRMK'

    def test_reverse_complement(self):
        assert Alphabet.DNA.reverse_complement('AAC') == 'GTT'

    def test_no_complement(self):
        with pytest.raises(AlphabetError, match="no complement"):
            Alphabet.AMINO.complement('ACD')

    def test_foreign_symbols(self):
        with pytest.raises(AlphabetError):
            Alphabet.DNA.complement('ACU')


class TestAlphabetConverter:
    def test_transcribe(self):
        assert AlphabetConverter.TRANSCRIBE.convert('ATGT') == 'AUGU'
        assert AlphabetConverter.TRANSCRIBE.convert('atgn') == 'AUGN'

    def test_invalid(self):
        with pytest.raises(AlphabetError, match="cannot be converted"):
            AlphabetConverter.TRANSCRIBE.convert('AUG')

    def test_invalid_mapping(self):
        with pytest.raises(AlphabetError, match="Cannot map"):
            AlphabetConverter(Alphabet.DNA, Alphabet.RNA, mapping={b'T': b'Z'})


class TestGeneticCode:
    code = GeneticCode.VERTEBRATE_MITOCHONDRIAL

    @pytest.mark.parametrize('codon, residue', [
        ('AUG', 'M'), ('AUA', 'M'), ('UGA', 'W'), ('ATG', 'M'), ('uuc', 'F'), ('UUG', 'L'),
        ('AGA', 'TERM'), ('AGG', 'TERM'), ('UAA', 'TERM'), ('TAG', 'TERM'),
    ])
    def test_codon(self, codon, residue):
        assert self.code.codon(codon) == residue
        assert self.code[codon] == residue

    def test_is_stop(self):
        assert self.code.is_stop('AGA')
        assert not self.code.is_stop('UGA')
        assert self.code.stops.sum() == 4

    @pytest.mark.parametrize('codon', ['NNN', 'AU', 'AUGA', 'AXG'])
    def test_invalid_codon(self, codon):
        with pytest.raises(TranslationError, match="not a valid codon"):
            self.code.codon(codon)

    def test_invalid_codon_is_configuration_error(self):
        with pytest.raises(ConfigurationError):
            self.code.codon('NNN')

    def test_translate(self):
        assert self.code.translate('ATGTTCGCC') == 'MFA'
        assert self.code.translate('AUGUAAGCC') == 'M*A'
        assert self.code.translate('AUGUAAGCC', to_stop=True) == 'M'

    def test_translate_ignores_partial_codon(self):
        assert self.code.translate('AUGUU') == 'M'

    def test_translate_ambiguous(self):
        with pytest.raises(TranslationError):
            self.code.translate('AUGNNN')

    def test_invalid_table(self):
        with pytest.raises(AlphabetError, match="64 entries"):
            GeneticCode(b'FFLL')
