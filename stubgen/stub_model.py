from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputKind(str, Enum):
    ASM = "asm"
    INIT = "init"


class DispatchMode(str, Enum):
    R12 = "r12"
    ZVTE = "zvte"


@dataclass(frozen=True)
class SourceLine:
    path: str
    line_number: int
    text: str


@dataclass(frozen=True)
class StubDefinition:
    symbol: str
    index: int
    function_name: str
    is_mapped: bool
    source: SourceLine | None = None


STUB_DEFINE_PREFIX = "#define ZIS_STUB_"
MAPPED_SUFFIX = " mapped"
POINTER_SIZE = 8
LABEL_WIDTH = 8
# LG takes a 20-bit signed displacement.
MAX_VECTOR_OFFSET = 0x7FFFF

ASM_PROLOGUE: tuple[str, ...] = (
    "         TITLE 'ZISSTUBS'",
    "         ACONTROL AFPR",
    "ZISSTUBS CSECT",
    "ZISSTUBS AMODE 64",
    "ZISSTUBS RMODE ANY",
    "         SYSSTATE ARCHLVL=2,AMODE64=YES",
    "         IEABRCX DEFINE",
    ".* The HLASM GOFF option is needed to assemble this program",
)
ASM_EPILOGUE: tuple[str, ...] = (
    "         EJECT",
    "ZISSTUBS CSECT ,",
    "         END",
)

# Instruction text after the label column. R15 ends up holding the stub vector.
DISPATCH_PROLOGUES: dict[DispatchMode, tuple[str, ...]] = {
    DispatchMode.R12: (
        "LLGT 15,X'2A8'(,12)   Get the (R)LE CAA's RLETask",
        "LLGT 15,X'38'(,15)   Get the RLETasks RLEAnchor",
        "LG   15,X'18'(,15)   Get the Stub Vector ",
    ),
    DispatchMode.ZVTE: (
        "LLGT 15,16(0,0)       CVT",
        "LLGT 15,X'8C'(,15)    ECVT",
        "LLGT 15,X'CC'(,15)    CSRCTABL",
        "LLGT 15,X'23C'(,15)   ZVT",
        "LLGT 15,X'9C'(,15)    FIRST ZVTE (the ZIS)",
        "LG   15,X'80'(,15)    ZIS STUB VECTOR",
    ),
}
