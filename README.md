# solidasm

Building blocks for a Z80 macro assembler that writes REL object files:
the shared definitions (size limits, segment types, symbol attribute bits)
and the block-buffered readers and writer that source and object files go
through.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Definitions: `solidasm.defs`

Constants for the assembler's limits: `MAX_ID_LEN` (30), `LINE_BUF_SIZE`,
`ASM_BUF_SIZE`, `REL_BUF_SIZE` (512), `INCL_BUF_SIZE`, `MAX_PATH_LEN` (65),
`MAX_COND_DEPTH` (50), `SYM_ENTRY_OVERHEAD`, `SEGMENT_MASK` (0x07) and
`EOF_MARKER` (0x1A).

`SegmentType` is an `IntEnum` with `ASEG`, `CSEG`, `DSEG` and `COMMON`
(0 to 3). `SymbolAttr` is an `IntFlag` with `EXTERN`, `MULDEF`,
`PASS1DEF`, `PUBLIC` and `DEFINED`.

A symbol's attribute byte keeps the segment in its low three bits and the
flags above them:

```python
from solidasm.defs import SegmentType, SymbolAttr, make_attr, split_attr

attr = make_attr(SymbolAttr.DEFINED | SymbolAttr.PUBLIC, SegmentType.CSEG)
assert attr == 0xC1
flags, segment = split_attr(attr)
assert segment is SegmentType.CSEG
assert SymbolAttr.PUBLIC in flags
```

`make_attr` raises `ValueError` when the flags are outside one byte, when
they touch the segment bits, or when the segment is not a valid
`SegmentType`. `split_attr` raises `ValueError` for a value outside one
byte or with an unknown segment number.

## Reading source: `SourceReader`

`SourceReader(path)` opens a file and reads it in 1024-byte blocks.
`read_byte()` returns the next byte as an `int`, and `None` once the end of
the file or the first `0x1A` (Ctrl-Z) byte is reached; it keeps returning
`None` after that. The reader is iterable and is a context manager that
closes the file on exit:

```python
from solidasm.asm_io import SourceReader

with SourceReader("prog.asm") as src:
    text = bytes(src)
```

## Include files: `IncludeReader` and `include_filename`

`include_filename(name)` turns an include operand into a file name:

- at most the first 60 characters are looked at, and the name stops at the
  first control character or space;
- `.ASM` is appended when the name contains no dot;
- the result is cut to 64 characters.

```python
from solidasm.asm_io import IncludeReader, include_filename

include_filename("macros")      # "macros.ASM"
include_filename("defs.inc")    # "defs.inc"
include_filename("lib x")       # "lib.ASM"
```

`IncludeReader(name)` opens the file named by `include_filename(name)` and
reads it in 64-byte blocks. It behaves like `SourceReader`, but closes its
file by itself as soon as it reaches the end; its `closed` property then
reads `True`.

## Writing REL output: `RelWriter`

`RelWriter(path)` creates the output file and collects bytes in a 512-byte
buffer. `write_byte(byte)` writes out the full buffer before adding a byte
to it; `flush()` writes whatever is buffered; `close()` flushes and closes
the file. As a context manager it closes on exit.

```python
from solidasm.asm_io import RelWriter

with RelWriter("prog.rel") as rel:
    rel.write_byte(0x84)
```

`write_byte` raises `ValueError` for a value outside 0..255 or after the
writer is closed. A short write raises `OSError("Write error !")`.

## Console output

`print_char(ch)` and `print_str(text)` write to standard output;
`newline()` writes a CR LF line end.

## What this package does not do

There is no assembler here: no command to run, no lexer, expression
evaluator, instruction encoder, symbol table, macro processor or REL
bit-stream encoder. The package supplies only the definitions and the file
I/O layer described above, for such a program to be built on.