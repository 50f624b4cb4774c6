"""
Command line interface for reconstructing sequences from a list of variants against the rCRS.

Usage:
    mitolib seq --variant 3308:C 3300 3310
    mitolib transcribe MTCO1 --variant 5906:A
    mitolib translate 16 --variant 5906:A --codons --frames
"""
import sys
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from mitolib.containers.seq import DNASeq
from mitolib.core.alphabet import AlphabetError
from mitolib.containers.variants import Variant
from mitolib.reference import SpeciesReference
from mitolib.utils import Config, MitolibError


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(slots=True, frozen=True, kw_only=True)
class CliConfig(Config):
    """Settings shared by every subcommand."""
    variant: Sequence[str] = ()
    start: Optional[int] = None
    end: Optional[int] = None
    name: Optional[str] = None
    gapless: bool = False
    codons: bool = False
    frames: bool = False

    def record(self) -> dict[str, Any]:
        """Returns the plain record ``DNASeq.from_record`` consumes."""
        variants = [Variant.parse(v) for v in self.variant]
        return {'name': self.name, 'variant_map': variants, 'start': self.start, 'end': self.end}


# Functions ------------------------------------------------------------------------------------------------------------
def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='mitolib', description=__doc__.splitlines()[1])
    common = ArgumentParser(add_help=False)
    common.add_argument('-v', '--variant', action='append', metavar='POS:TOKEN',
                        help='Variant to apply, e.g. 3308:C, 100.01:AC or 310:-- (repeatable)')
    common.add_argument('--start', type=int, help='First genome position of the molecule window')
    common.add_argument('--end', type=int, help='Last genome position of the molecule window')
    common.add_argument('--name', help='Sample name')
    commands = parser.add_subparsers(dest='command', required=True)

    seq = commands.add_parser('seq', parents=[common], help='Print the reconstructed genome sequence')
    seq.add_argument('query', nargs='*', type=int, metavar='POS', help='Query start and end (default: whole window)')
    seq.add_argument('--gapless', action='store_true', help='Remove deletion gap markers')

    transcribe = commands.add_parser('transcribe', parents=[common], help='Print the transcript of a locus')
    transcribe.add_argument('locus', help='Locus id or name')

    translate = commands.add_parser('translate', parents=[common], help='Print the codon variants of a coding locus')
    translate.add_argument('locus', help='Locus id or name')
    translate.add_argument('--codons', action='store_true', help='Show codons instead of residues')
    translate.add_argument('--frames', action='store_true', help='Show frame shifts')
    return parser


def run(args: Namespace, config: CliConfig, reference: SpeciesReference = SpeciesReference.RCRS) -> str:
    """Runs one subcommand and returns its output."""
    dna = DNASeq.from_record(reference, config.record())
    if args.command == 'seq':
        if len(args.query) > 2: raise MitolibError('At most two query positions may be given')
        return dna.seq(*args.query, gapless=config.gapless)
    rna = dna.transcribe(args.locus)
    if args.command == 'transcribe': return rna.seq()
    aa = rna.translate().display_variants(show_codons=config.codons, show_frames=config.frames)
    return '\n'.join(f'{position}\t{value}' for position, value in aa.items())


def main(argv: Sequence[str] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        output = run(args, CliConfig.from_obj(args))
    except (MitolibError, AlphabetError) as e:
        parser.exit(1, f'{parser.prog}: error: {e}\n')
    if output: sys.stdout.write(output + '\n')
    return 0


if __name__ == '__main__':
    sys.exit(main())
