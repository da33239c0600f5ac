"""Limits, segment types and symbol attribute bits shared by the assembler."""

from __future__ import annotations

from enum import IntEnum, IntFlag

MAX_ID_LEN = 30
"""Maximum identifier length (extended REL format)."""

LINE_BUF_SIZE = 257
ASM_BUF_SIZE = 1025
REL_BUF_SIZE = 512
INCL_BUF_SIZE = 65
MAX_PATH_LEN = 65
MAX_COND_DEPTH = 50

SYM_ENTRY_OVERHEAD = 10
"""Bytes that precede the name in a symbol table entry."""

SEGMENT_MASK = 0x07
"""Low bits of the attribute byte that hold the segment type."""

EOF_MARKER = 0x1A
"""Byte that ends a source or include file."""


class SegmentType(IntEnum):
    """Segment a symbol or the location counter belongs to."""

    ASEG = 0
    CSEG = 1
    DSEG = 2
    COMMON = 3


class SymbolAttr(IntFlag):
    """Flag bits of a symbol's attribute byte."""

    EXTERN = 0x08
    MULDEF = 0x10
    PASS1DEF = 0x20
    PUBLIC = 0x40
    DEFINED = 0x80


def make_attr(flags: int, segment: int) -> int:
    """Combine attribute flags and a segment type into one attribute byte."""
    flags = int(flags)
    if not 0 <= flags <= 0xFF:
        raise ValueError(f"attribute flags out of range: {flags:#x}")
    if flags & SEGMENT_MASK:
        raise ValueError(f"attribute flags overlap the segment bits: {flags:#x}")
    return flags | int(SegmentType(segment))


def split_attr(attr: int) -> tuple[SymbolAttr, SegmentType]:
    """Split an attribute byte into its flags and its segment type."""
    attr = int(attr)
    if not 0 <= attr <= 0xFF:
        raise ValueError(f"attribute byte out of range: {attr:#x}")
    return SymbolAttr(attr & ~SEGMENT_MASK & 0xFF), SegmentType(attr & SEGMENT_MASK)