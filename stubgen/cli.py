from __future__ import annotations

import argparse
import sys
from pathlib import Path

from stubgen.definition_dump import definitions_to_debug_json
from stubgen.emitter import generate
from stubgen.header_reader import DEFAULT_HEADER_ENCODING, read_header_lines
from stubgen.parser import parse_stub_definitions
from stubgen.stub_model import DispatchMode, OutputKind


COMMANDS = [kind.value for kind in OutputKind]
DISPATCH_MODES = [mode.value for mode in DispatchMode]

_EPILOG = """\
commands:
  asm    generate the stub routines (HLASM) for plugins
  init   generate the stub vector initialization code for the base plugin

dispatch modes (asm only):
  r12    the stub vector is based off of GPR12 (default)
  zvte   the stub vector is based off of the ZVTE
"""


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stubgen",
        description="Generate ZIS plugin stubs or stub vector initialization from a stub header.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("command", type=str.lower, choices=COMMANDS, help="Utility command (asm, init)")
    parser.add_argument("stub_header", help="Header with the stub definitions (usually zisstubs.h)")
    parser.add_argument(
        "dispatch_mode",
        nargs="?",
        type=str.lower,
        choices=DISPATCH_MODES,
        default=DispatchMode.R12.value,
        help="Dispatch mode of the stub routines (only used with asm)",
    )
    parser.add_argument("-o", "--output", help="Output file path (default: stdout)")
    parser.add_argument(
        "--encoding",
        default=DEFAULT_HEADER_ENCODING,
        help=f"Encoding of the stub header (default: {DEFAULT_HEADER_ENCODING})",
    )
    parser.add_argument(
        "--print-definitions",
        action="store_true",
        help="Print the parsed stub definitions as JSON and stop",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = _build_arg_parser()
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0
    args = parser.parse_args(argv)

    output_kind = OutputKind(args.command)
    dispatch_mode = DispatchMode(args.dispatch_mode)

    try:
        header_path = Path(args.stub_header)
        lines = read_header_lines(header_path, encoding=args.encoding)

        if args.print_definitions:
            definitions = parse_stub_definitions(lines, source_path=str(header_path))
            print(definitions_to_debug_json(definitions))
            return 0

        text = generate(lines, output_kind, dispatch_mode, source_path=str(header_path))
        if args.output:
            Path(args.output).write_text(text, encoding="utf-8")
        else:
            print(text, end="")
        return 0
    except Exception as error:
        print(f"stubgen: {error}", file=sys.stderr)
        return 1
