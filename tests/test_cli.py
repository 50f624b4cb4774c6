from argparse import Namespace

import pytest
from mitolib.cli import CliConfig, build_parser, main, run


class TestCliConfig:
    def test_from_obj(self):
        config = CliConfig.from_obj(Namespace(command='seq', variant=None, start=5, gapless=True))
        assert config.start == 5
        assert config.gapless
        assert config.variant == ()
        assert not config.codons

    def test_record(self):
        config = CliConfig(variant=['3308:C', '100.1:AC'], name='sample')
        record = config.record()
        assert record['name'] == 'sample'
        assert [str(v) for v in record['variant_map']] == ['3308:C', '100.1:AC']


class TestRun:
    def test_seq(self):
        args = build_parser().parse_args(['seq', '--variant', '3308:C', '3306', '3310'])
        assert run(args, CliConfig.from_obj(args)) == 'CACAC'


class TestMain:
    def test_seq(self, capsys):
        assert main(['seq', '100', '105']) == 0
        assert capsys.readouterr().out == 'GGAGCC\n'

    def test_seq_window(self, capsys):
        main(['seq', '--start', '100', '--end', '105', '-v', '101:--', '--gapless'])
        assert capsys.readouterr().out == 'GGCC\n'

    def test_transcribe(self, capsys):
        main(['transcribe', 'MTTF'])
        out = capsys.readouterr().out.strip()
        assert len(out) == 72
        assert out.startswith('GUUUAUGU')

    def test_translate(self, capsys):
        main(['translate', '16', '-v', '5907:C'])
        assert capsys.readouterr().out == '1\tM\n2\tL\n'

    def test_translate_codons(self, capsys):
        main(['translate', 'MTCO1', '-v', '5905:-', '--codons', '--frames'])
        assert capsys.readouterr().out == '1\tAGU +1\n'

    @pytest.mark.parametrize('argv, message', [
        (['translate', 'MTTF'], 'not a coding locus'),
        (['seq', '1', '2', '3'], 'At most two'),
        (['seq', '-v', '3308'], 'POSITION:TOKEN'),
        (['seq', '-v', '3308:U'], 'outside'),
        (['transcribe', 'MTXYZ'], 'Unknown locus'),
    ])
    def test_errors(self, capsys, argv, message):
        with pytest.raises(SystemExit) as e:
            main(argv)
        assert e.value.code == 1
        assert message in capsys.readouterr().err
