import pytest

from solidasm.asm_io import (
    IncludeReader,
    RelWriter,
    SourceReader,
    include_filename,
    newline,
    print_char,
    print_str,
)


def test_source_reader_reads_all_bytes(tmp_path):
    data = bytes(b % 0x1A for b in range(3000))  # no EOF marker inside
    data = bytes(x if x != 0x1A else 0x20 for x in data)
    path = tmp_path / "prog.asm"
    path.write_bytes(data)
    with SourceReader(path) as reader:
        assert bytes(reader) == data


def test_source_reader_stops_at_marker(tmp_path):
    path = tmp_path / "prog.asm"
    path.write_bytes(b"ld a,1\x1agarbage")
    with SourceReader(path) as reader:
        assert bytes(reader) == b"ld a,1"
        assert reader.read_byte() is None


def test_source_reader_marker_on_block_boundary(tmp_path):
    data = b"x" * 1024 + b"\x1a" + b"y" * 10
    path = tmp_path / "prog.asm"
    path.write_bytes(data)
    with SourceReader(path) as reader:
        assert bytes(reader) == b"x" * 1024


def test_source_reader_empty_file(tmp_path):
    path = tmp_path / "empty.asm"
    path.write_bytes(b"")
    with SourceReader(path) as reader:
        assert reader.read_byte() is None


def test_source_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        SourceReader(tmp_path / "missing.asm")


def test_include_reader_adds_extension(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "defs.ASM").write_bytes(b"equ 5\r\n")
    reader = IncludeReader("defs")
    assert bytes(reader) == b"equ 5\r\n"
    assert reader.closed


def test_include_reader_across_blocks(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    data = bytes((i % 200) + 0x20 for i in range(200))
    (tmp_path / "big.inc").write_bytes(data)
    with IncludeReader("big.inc") as reader:
        assert list(reader) == list(data)


def test_include_reader_closes_at_marker(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "part.inc").write_bytes(b"ab\x1acd")
    reader = IncludeReader("part.inc")
    assert reader.read_byte() == ord("a")
    assert reader.read_byte() == ord("b")
    assert reader.read_byte() is None
    assert reader.closed
    assert reader.read_byte() is None


def test_include_reader_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        IncludeReader("nothing")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("foo", "foo.ASM"),
        ("foo.inc", "foo.inc"),
        ("foo bar", "foo.ASM"),
        ("lib.z80\tcomment", "lib.z80"),
    ],
)
def test_include_filename(name, expected):
    assert include_filename(name) == expected


def test_include_filename_truncates_long_names():
    result = include_filename("a" * 100)
    assert result.endswith(".ASM")
    assert len(result) <= 64
    assert result[:-4] == "a" * (len(result) - 4)


def test_rel_writer_round_trip(tmp_path):
    path = tmp_path / "out.rel"
    payload = bytes(range(256)) * 5
    with RelWriter(path) as writer:
        for byte in payload:
            writer.write_byte(byte)
    assert path.read_bytes() == payload


def test_rel_writer_buffers_full_block(tmp_path):
    path = tmp_path / "out.rel"
    writer = RelWriter(path)
    for _ in range(512):
        writer.write_byte(0x55)
    assert path.stat().st_size == 0
    writer.write_byte(0xAA)
    assert path.stat().st_size == 512
    writer.close()
    assert path.read_bytes() == b"\x55" * 512 + b"\xaa"


def test_rel_writer_flush(tmp_path):
    path = tmp_path / "out.rel"
    writer = RelWriter(path)
    writer.write_byte(1)
    writer.write_byte(2)
    writer.flush()
    assert path.read_bytes() == b"\x01\x02"
    writer.close()


def test_rel_writer_rejects_out_of_range(tmp_path):
    with RelWriter(tmp_path / "out.rel") as writer:
        with pytest.raises(ValueError):
            writer.write_byte(256)


def test_rel_writer_rejects_write_after_close(tmp_path):
    writer = RelWriter(tmp_path / "out.rel")
    writer.close()
    with pytest.raises(ValueError):
        writer.write_byte(0)


def test_console_output(capsys):
    print_str("Write error !")
    print_char("x")
    newline()
    assert capsys.readouterr().out == "Write error !x\r\n"