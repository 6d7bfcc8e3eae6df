from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator

from stubgen.header_reader import DEFAULT_HEADER_ENCODING, read_header_lines
from stubgen.parser import StubDefinitionError, parse_stub_definitions
from stubgen.stub_model import (
    ASM_EPILOGUE,
    ASM_PROLOGUE,
    DISPATCH_PROLOGUES,
    LABEL_WIDTH,
    MAX_VECTOR_OFFSET,
    POINTER_SIZE,
    DispatchMode,
    OutputKind,
    SourceLine,
    StubDefinition,
)


_CONTINUATION_INDENT = " " * (LABEL_WIDTH + 1)


def _label(symbol: str) -> str:
    return f"{symbol[:LABEL_WIDTH]:<{LABEL_WIDTH}}"


def _vector_offset(definition: StubDefinition) -> int:
    offset = definition.index * POINTER_SIZE
    if offset > MAX_VECTOR_OFFSET:
        source = definition.source or SourceLine(path="<memory>", line_number=0, text=definition.symbol)
        raise StubDefinitionError("stub index out of range", source)
    return offset


def dispatch_prologue(dispatch_mode: DispatchMode) -> tuple[str, ...]:
    prologue = DISPATCH_PROLOGUES.get(dispatch_mode)
    if prologue is None:
        raise ValueError(f"unknown dispatch mode {dispatch_mode!r}")
    return prologue


def emit_init_line(definition: StubDefinition) -> str:
    return f"    stubVector[ZIS_STUB_{_label(definition.symbol)}] = (void*){definition.function_name};"


def emit_trampoline(definition: StubDefinition, dispatch_mode: DispatchMode) -> list[str]:
    """Render one trampoline that loads its target from the stub vector and branches to it."""
    label = _label(definition.symbol)
    lines = [f"{_CONTINUATION_INDENT}ENTRY {definition.symbol}"]
    if not definition.is_mapped:
        lines.append(f"{label} ALIAS C'{definition.function_name}'")

    first, *rest = dispatch_prologue(dispatch_mode)
    lines.append(f"{label} {first}")
    lines.extend(f"{_CONTINUATION_INDENT}{instruction}" for instruction in rest)

    lines.append(f"{_CONTINUATION_INDENT}LG   15,X'{_vector_offset(definition):02X}'(,15)    {definition.symbol}")
    lines.append(f"{_CONTINUATION_INDENT}BR   15")
    return lines


def emit_init_lines(definitions: Iterable[StubDefinition]) -> Iterator[str]:
    for definition in definitions:
        yield emit_init_line(definition)


def emit_asm_lines(definitions: Iterable[StubDefinition], dispatch_mode: DispatchMode) -> Iterator[str]:
    dispatch_prologue(dispatch_mode)
    yield from ASM_PROLOGUE
    for definition in definitions:
        yield from emit_trampoline(definition, dispatch_mode)
    yield from ASM_EPILOGUE


def emit_lines(
    definitions: Iterable[StubDefinition],
    output_kind: OutputKind,
    dispatch_mode: DispatchMode = DispatchMode.R12,
) -> Iterator[str]:
    if output_kind == OutputKind.ASM:
        return emit_asm_lines(definitions, dispatch_mode)
    if output_kind == OutputKind.INIT:
        return emit_init_lines(definitions)
    raise ValueError(f"unknown output kind {output_kind!r}")


def generate(
    lines: Iterable[str],
    output_kind: OutputKind,
    dispatch_mode: DispatchMode = DispatchMode.R12,
    source_path: str = "<memory>",
) -> str:
    definitions = parse_stub_definitions(lines, source_path=source_path)
    return "".join(f"{line}\n" for line in emit_lines(definitions, output_kind, dispatch_mode))


def generate_file(
    path: Path | str,
    output_kind: OutputKind,
    dispatch_mode: DispatchMode = DispatchMode.R12,
    encoding: str = DEFAULT_HEADER_ENCODING,
) -> str:
    header_path = Path(path)
    lines = read_header_lines(header_path, encoding=encoding)
    return generate(lines, output_kind, dispatch_mode, source_path=str(header_path))
