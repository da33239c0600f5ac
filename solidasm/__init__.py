"""Shared definitions and block-buffered file I/O for a Z80 assembler that writes REL files."""

__version__ = "0.1.0"
__all__ = ["defs", "asm_io"]