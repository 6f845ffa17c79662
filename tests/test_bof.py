import pytest

from splc.bof import (
    BYTES_PER_WORD,
    HEADER_SIZE,
    MAGIC,
    BOFError,
    BOFHeader,
    BOFReader,
    BOFWriter,
)


def test_header_bytes_start_with_magic():
    data = BOFHeader().to_bytes()
    assert data[:4] == b"BO32"
    assert len(data) == HEADER_SIZE


def test_header_round_trip():
    hdr = BOFHeader(0, 40, 1028, 8, 6000)
    back = BOFHeader.from_bytes(hdr.to_bytes())
    assert back == hdr
    assert back.has_correct_magic()


def test_wrong_magic_detected():
    assert not BOFHeader(magic=b"XXXX").has_correct_magic()


def test_from_bytes_too_short():
    with pytest.raises(BOFError):
        BOFHeader.from_bytes(b"BO32")


def test_file_round_trip(tmp_path):
    path = tmp_path / "p.bof"
    hdr = BOFHeader(0, 8, 1028, 4, 5000)
    with BOFWriter(path) as w:
        w.write_header(hdr)
        w.write_word(17)
        w.write_word(-3)
    with BOFReader(path) as r:
        assert r.file_bytes() == HEADER_SIZE + 2 * BYTES_PER_WORD
        assert r.read_header() == hdr
        assert not r.at_eof()
        assert r.read_word() == 17
        assert r.read_word() == -3
        assert r.at_eof()


def test_read_word_past_end(tmp_path):
    path = tmp_path / "e.bof"
    with BOFWriter(path) as w:
        w.write_header(BOFHeader())
    with BOFReader(path) as r:
        r.read_header()
        with pytest.raises(BOFError):
            r.read_word()


def test_read_header_bad_magic(tmp_path):
    path = tmp_path / "bad.bof"
    with BOFWriter(path) as w:
        w.write_header(BOFHeader(magic=b"NOPE"))
    with BOFReader(path) as r:
        with pytest.raises(BOFError):
            r.read_header()


def test_read_header_truncated(tmp_path):
    path = tmp_path / "short.bof"
    path.write_bytes(MAGIC)
    with BOFReader(path) as r:
        with pytest.raises(BOFError):
            r.read_header()


def test_open_missing_file(tmp_path):
    with pytest.raises(BOFError):
        BOFReader(tmp_path / "missing.bof")


def test_open_for_writing_in_missing_dir(tmp_path):
    with pytest.raises(BOFError):
        BOFWriter(tmp_path / "nodir" / "x.bof")


def test_word_out_of_range(tmp_path):
    with BOFWriter(tmp_path / "w.bof") as w:
        with pytest.raises(BOFError):
            w.write_word(1 << 40)