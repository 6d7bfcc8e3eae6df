from __future__ import annotations

import re
from typing import Iterable, Iterator

from stubgen.stub_model import MAPPED_SUFFIX, STUB_DEFINE_PREFIX, SourceLine, StubDefinition


_INDEX_RE = re.compile(r"[0-9]+")


class StubDefinitionError(ValueError):
    def __init__(self, message: str, source: SourceLine):
        super().__init__(f"{message} '{source.text}' at {source.path}:{source.line_number}")
        self.message = message
        self.source = source

    @property
    def line(self) -> str:
        return self.source.text

    @property
    def line_number(self) -> int:
        return self.source.line_number

    @property
    def path(self) -> str:
        return self.source.path


def is_stub_definition_line(line: str) -> bool:
    return line.startswith(STUB_DEFINE_PREFIX)


def _parse_index(text: str, source: SourceLine) -> int:
    if _INDEX_RE.fullmatch(text) is None:
        raise StubDefinitionError("bad define index", source)
    return int(text)


def _split_function_name(comment_text: str) -> tuple[str, bool]:
    if comment_text.endswith(MAPPED_SUFFIX):
        return comment_text[: -len(MAPPED_SUFFIX)].rstrip(), True
    return comment_text, False


def parse_stub_definition(line: str, source: SourceLine | None = None) -> StubDefinition | None:
    """Parse one header line.

    Returns ``None`` for lines that are not stub definitions. A line carrying the
    stub prefix must have the shape ``#define ZIS_STUB_<SYM> <INDEX> /* <fn> [mapped] */``.
    """
    if not is_stub_definition_line(line):
        return None
    if source is None:
        source = SourceLine(path="<memory>", line_number=1, text=line)

    prefix_len = len(STUB_DEFINE_PREFIX)
    space_pos = line.find(" ", prefix_len)
    if space_pos == -1 or space_pos == prefix_len:
        raise StubDefinitionError("bad define", source)
    symbol = line[prefix_len:space_pos]

    tail = line[space_pos + 1 :].strip()
    tail_space_pos = tail.find(" ")
    if tail_space_pos == -1:
        raise StubDefinitionError("bad define constant", source)
    index = _parse_index(tail[:tail_space_pos], source)

    comment = tail[tail_space_pos:].strip()
    if len(comment) < 4 or not comment.startswith("/*") or not comment.endswith("*/"):
        raise StubDefinitionError("comment with function name missing", source)

    function_name, is_mapped = _split_function_name(comment[2:-2].strip())
    if not function_name:
        raise StubDefinitionError("function name missing", source)

    return StubDefinition(
        symbol=symbol,
        index=index,
        function_name=function_name,
        is_mapped=is_mapped,
        source=source,
    )


def parse_stub_definitions(lines: Iterable[str], source_path: str = "<memory>") -> Iterator[StubDefinition]:
    for line_number, line in enumerate(lines, start=1):
        if not is_stub_definition_line(line):
            continue
        source = SourceLine(path=source_path, line_number=line_number, text=line)
        definition = parse_stub_definition(line, source)
        if definition is not None:
            yield definition


def parse_header_text(text: str, source_path: str = "<memory>") -> list[StubDefinition]:
    return list(parse_stub_definitions(text.splitlines(), source_path=source_path))
