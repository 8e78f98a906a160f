from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from pathlib import Path
from timeit import default_timer as timer
from typing import Iterator, Optional

from bitpacket.utils import EnumAction
from bitpacket.common import (
    DEFAULT_MAX_DEPTH, LengthMode, Packet, Literal, Operator
)
from bitpacket.decoder import decode
from bitpacket.encoder import encode, reframe
from bitpacket.evaluator import evaluate, version_sum


# -----------------------------------------------------------------------------

ACTION_VERSIONS = 'versions'
ACTION_EVALUATE = 'evaluate'
ACTION_SOLVE = 'solve'
ACTION_SHOW = 'show'
ACTION_REFRAME = 'reframe'

DEFAULT_LENGTH_MODE = LengthMode.Count

INDENT = '  '


# -----------------------------------------------------------------------------

def read_packet(path_in: Path, max_depth: int) -> Packet:
    return decode(path_in.read_text(), max_depth=max_depth)


def format_packet(packet: Packet, depth: int = 0) -> Iterator[str]:
    prefix = INDENT * depth

    match packet:
        case Literal(version, value):
            yield f"{prefix}Literal v{version} {value}"
        case Operator():
            yield (f"{prefix}{packet.operation.name} v{packet.version} "
                   f"({packet.length_mode.name.lower()})")
            for child in packet.children:
                yield from format_packet(child, depth + 1)


def cmd_versions(packet: Packet):
    print(version_sum(packet))


def cmd_evaluate(packet: Packet):
    print(evaluate(packet))


def cmd_solve(packet: Packet):
    print(f"versions: {version_sum(packet)}")
    print(f"value: {evaluate(packet)}")


def cmd_show(packet: Packet):
    for line in format_packet(packet):
        print(line)


def cmd_reframe(packet: Packet, length_mode: LengthMode):
    print(encode(reframe(packet, length_mode)))


# -----------------------------------------------------------------------------

def make_argument_parser():
    parser = ArgumentParser(
        prog='bitpacket-py',
        formatter_class=ArgumentDefaultsHelpFormatter
    )

    action = parser.add_subparsers(
        title='action',
        dest='action',
        required=True
    )

    versions = action.add_parser(
        ACTION_VERSIONS,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Print the sum of the versions of all packets."
    )

    evaluate = action.add_parser(
        ACTION_EVALUATE,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Print the value of the outermost packet."
    )

    solve = action.add_parser(
        ACTION_SOLVE,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Print both the version sum and the value."
    )

    show = action.add_parser(
        ACTION_SHOW,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Print the packet tree."
    )

    reframe = action.add_parser(
        ACTION_REFRAME,
        formatter_class=ArgumentDefaultsHelpFormatter,
        help="Re-encode the transmission with a single framing mode."
    )

    reframe.add_argument(
        '-m', '--length-mode',
        type=LengthMode,
        action=EnumAction,
        default=DEFAULT_LENGTH_MODE,
        help="Framing used for the children of every operator packet."
    )

    for p in (versions, evaluate, solve, show, reframe):
        p.add_argument('infile', type=Path,
                       help="Text file holding the hex transmission.")

        p.add_argument(
            '--max-depth',
            type=int,
            default=DEFAULT_MAX_DEPTH,
            help="Maximum nesting depth of packets.",
            metavar='N'
        )

        p.add_argument(
            '-t', '--timing',
            action='store_true',
            help="Print how long decoding and evaluation took."
        )

    return parser


def main(argv: Optional[list[str]] = None):
    parser = make_argument_parser()
    args = parser.parse_args(argv)

    time_start = timer()

    packet = read_packet(args.infile, args.max_depth)

    if args.action == ACTION_VERSIONS:
        cmd_versions(packet)

    if args.action == ACTION_EVALUATE:
        cmd_evaluate(packet)

    if args.action == ACTION_SOLVE:
        cmd_solve(packet)

    if args.action == ACTION_SHOW:
        cmd_show(packet)

    if args.action == ACTION_REFRAME:
        cmd_reframe(packet, args.length_mode)

    time_end = timer()

    if args.timing is True:
        delta = '{0:.6g}'.format(time_end - time_start)
        print(f"Decoding completed in {delta} seconds")


# -----------------------------------------------------------------------------

if __name__ == '__main__':
    main()
