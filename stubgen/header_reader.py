from __future__ import annotations

from pathlib import Path

import ebcdic  # noqa: F401  registers the cp1047 codec


DEFAULT_HEADER_ENCODING = "cp1047"


class HeaderInputError(ValueError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(f"{message}: {path}")
        self.message = message
        self.path = Path(path)


def read_header_lines(path: Path | str, encoding: str = DEFAULT_HEADER_ENCODING) -> list[str]:
    """Read a stub header as text lines.

    Lines are split with ``str.splitlines`` so EBCDIC NL (U+0085) terminates
    a line just like LF or CRLF.
    """
    header_path = Path(path)
    try:
        text = header_path.read_text(encoding=encoding)
    except FileNotFoundError as error:
        raise HeaderInputError("Stub header not found", header_path) from error
    except LookupError as error:
        raise HeaderInputError(f"Unknown header encoding '{encoding}'", header_path) from error
    except UnicodeDecodeError as error:
        raise HeaderInputError(f"Stub header is not valid {encoding}", header_path) from error
    except OSError as error:
        raise HeaderInputError(f"Cannot read stub header ({error.strerror})", header_path) from error
    return text.splitlines()
