from pathlib import Path

import pytest

from stubgen.header_reader import HeaderInputError, read_header_lines


def test_read_header_lines_decodes_cp1047_by_default(tmp_path: Path) -> None:
    header = tmp_path / "zisstubs.h"
    header.write_bytes("#define ZIS_STUB_GETCFG 2 /* zis_get_config mapped */\n#endif\n".encode("cp1047"))

    lines = read_header_lines(header)

    assert lines == ["#define ZIS_STUB_GETCFG 2 /* zis_get_config mapped */", "#endif"]


def test_read_header_lines_splits_on_ebcdic_newline(tmp_path: Path) -> None:
    header = tmp_path / "zisstubs.h"
    header.write_bytes("#ifndef A\x85#define ZIS_STUB_X 1 /* x */\x85".encode("cp1047"))

    assert read_header_lines(header) == ["#ifndef A", "#define ZIS_STUB_X 1 /* x */"]


def test_read_header_lines_with_explicit_encoding(tmp_path: Path) -> None:
    header = tmp_path / "zisstubs.h"
    header.write_text("#define ZIS_STUB_X 1 /* x */\r\n\r\n", encoding="utf-8")

    assert read_header_lines(header, encoding="utf-8") == ["#define ZIS_STUB_X 1 /* x */", ""]


def test_read_header_lines_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "nope.h"

    with pytest.raises(HeaderInputError) as error:
        read_header_lines(missing)

    assert error.value.path == missing
    assert "Stub header not found" in str(error.value)


def test_read_header_lines_unknown_encoding(tmp_path: Path) -> None:
    header = tmp_path / "zisstubs.h"
    header.write_text("", encoding="utf-8")

    with pytest.raises(HeaderInputError, match="Unknown header encoding 'not-a-codec'"):
        read_header_lines(header, encoding="not-a-codec")


def test_read_header_lines_decode_failure(tmp_path: Path) -> None:
    header = tmp_path / "zisstubs.h"
    header.write_bytes(b"\xff\xfe\xfd")

    with pytest.raises(HeaderInputError, match="not valid utf-8"):
        read_header_lines(header, encoding="utf-8")


def test_read_header_lines_directory_is_unreadable(tmp_path: Path) -> None:
    with pytest.raises(HeaderInputError, match="Cannot read stub header"):
        read_header_lines(tmp_path)
