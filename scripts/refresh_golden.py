#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import argparse
import sys


REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from stubgen.emitter import generate_file
from stubgen.stub_model import DispatchMode, OutputKind


@dataclass(frozen=True)
class GoldenTarget:
    header_file: str
    golden_file: str
    output_kind: OutputKind
    dispatch_mode: DispatchMode = DispatchMode.R12


TARGETS: tuple[GoldenTarget, ...] = (
    GoldenTarget(
        header_file="basic/test_zisstubs.h",
        golden_file="basic/test_zisstubs.init.c",
        output_kind=OutputKind.INIT,
    ),
    GoldenTarget(
        header_file="basic/test_zisstubs.h",
        golden_file="basic/test_zisstubs.r12.asm",
        output_kind=OutputKind.ASM,
        dispatch_mode=DispatchMode.R12,
    ),
    GoldenTarget(
        header_file="basic/test_zisstubs.h",
        golden_file="basic/test_zisstubs.zvte.asm",
        output_kind=OutputKind.ASM,
        dispatch_mode=DispatchMode.ZVTE,
    ),
    GoldenTarget(
        header_file="empty/test_no_stubs.h",
        golden_file="empty/test_no_stubs.asm",
        output_kind=OutputKind.ASM,
        dispatch_mode=DispatchMode.ZVTE,
    ),
)


def refresh_golden_files(golden_dir: Path, *, encoding: str) -> None:
    for target in TARGETS:
        header_path = golden_dir / target.header_file
        golden_path = golden_dir / target.golden_file

        text = generate_file(header_path, target.output_kind, target.dispatch_mode, encoding=encoding)
        golden_path.write_text(text, encoding="utf-8")
        print(f"Updated {golden_path.as_posix()}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Refresh stub generator golden output files.",
    )
    parser.add_argument(
        "--golden-dir",
        default="tests/golden",
        help="Directory containing golden headers and expected outputs.",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the golden headers (default: utf-8).",
    )

    args = parser.parse_args()
    golden_dir = Path(args.golden_dir)

    if not golden_dir.exists():
        raise FileNotFoundError(f"Golden directory does not exist: {golden_dir}")

    refresh_golden_files(golden_dir, encoding=args.encoding)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
