import struct

import pytest

from mediabox.stream import DataStream, FileStream, Matrix, SeekDirection


@pytest.mark.parametrize(
    "fmt, method",
    [
        ("B", "read_uint8"),
        ("b", "read_int8"),
        ("=H", "read_uint16"),
        (">H", "read_big_endian_uint16"),
        ("<H", "read_little_endian_uint16"),
        ("=I", "read_uint32"),
        (">I", "read_big_endian_uint32"),
        ("<I", "read_little_endian_uint32"),
        (">i", "read_big_endian_int32"),
        ("=Q", "read_uint64"),
        (">Q", "read_big_endian_uint64"),
        ("<Q", "read_little_endian_uint64"),
    ],
)
def test_integer_round_trip(fmt, method):
    value = -5 if fmt in ("b", ">i") else 100
    stream = DataStream(struct.pack(fmt, value))
    assert getattr(stream, method)() == value
    assert not stream.has_bytes_available()


def test_big_endian_large_value():
    value = 0x1122334455667788
    stream = DataStream(struct.pack(">Q", value))
    assert stream.read_big_endian_uint64() == value


def test_fixed_point_big_and_little():
    data = struct.pack(">I", (3 << 16) | (1 << 15))
    assert DataStream(data).read_big_endian_fixed_point(16, 16) == 3.5
    little = struct.pack("<I", (3 << 16) | (1 << 15))
    assert DataStream(little).read_little_endian_fixed_point(16, 16) == 3.5


def test_fixed_point_8_8():
    stream = DataStream(bytes([1, 0]))
    assert stream.read_big_endian_fixed_point(8, 8) == 1.0


def test_fixed_point_bad_layout():
    with pytest.raises(ValueError):
        DataStream(b"\x00" * 8).read_big_endian_fixed_point(10, 10)


def test_strings():
    data = b"ftyp" + bytes([5]) + b"hello" + b"abc" + b"name\x00tail"
    stream = DataStream(data)
    assert stream.read_four_cc() == "ftyp"
    assert stream.read_pascal_string() == "hello"
    assert stream.read_string(3) == "abc"
    assert stream.read_null_terminated_string() == "name"
    assert stream.read_all() == b"tail"


def test_null_terminated_without_terminator_raises():
    with pytest.raises(EOFError):
        DataStream(b"abc").read_null_terminated_string()


def test_read_past_end_raises():
    stream = DataStream(b"ab")
    with pytest.raises(EOFError):
        stream.read(3)
    assert stream.tell() == 0


def test_seek_directions():
    stream = DataStream(bytes(range(10)))
    stream.seek(4)
    assert stream.tell() == 4
    stream.seek(2, SeekDirection.CURRENT)
    assert stream.tell() == 6
    stream.seek(1, SeekDirection.BEGIN)
    assert stream.tell() == 1
    stream.seek(-3, SeekDirection.END)
    assert stream.tell() == 7
    assert stream.available_bytes() == 3


def test_seek_out_of_range():
    stream = DataStream(b"abcd")
    with pytest.raises(ValueError):
        stream.seek(5, SeekDirection.BEGIN)
    with pytest.raises(ValueError):
        stream.seek(-1, SeekDirection.BEGIN)


def test_get_restores_position():
    stream = DataStream(b"\x00\x00\x00\x10ftypisom")
    stream.seek(2)
    assert stream.get(4, 4) == b"ftyp"
    assert stream.tell() == 2


def test_get_out_of_range_restores_position():
    stream = DataStream(b"abc")
    stream.seek(1)
    with pytest.raises(EOFError):
        stream.get(1, 10)
    assert stream.tell() == 1


def test_read_all_and_availability():
    stream = DataStream(b"xyz")
    assert stream.has_bytes_available()
    assert stream.read_all() == b"xyz"
    assert not stream.has_bytes_available()
    assert stream.read_all() == b""


def test_matrix_round_trip():
    values = list(range(1, 10))
    stream = DataStream(b"".join(struct.pack(">I", v) for v in values))
    matrix = stream.read_matrix()
    assert list(matrix) == values


def test_matrix_default_is_identity_string():
    text = str(Matrix())
    assert text.startswith("{ 0x00010000, 0x00000000")
    assert text.endswith("0x40000000 }")


def test_file_stream(tmp_path):
    path = tmp_path / "sample.bin"
    path.write_bytes(struct.pack(">I", 42) + b"moov")
    with FileStream(path) as stream:
        assert stream.available_bytes() == 8
        assert stream.read_big_endian_uint32() == 42
        assert stream.get(0, 4) == struct.pack(">I", 42)
        assert stream.read_four_cc() == "moov"
        assert not stream.has_bytes_available()
        with pytest.raises(EOFError):
            stream.read(1)


def test_file_stream_seek(tmp_path):
    path = tmp_path / "seek.bin"
    path.write_bytes(b"0123456789")
    with FileStream(path) as stream:
        stream.seek(-2, SeekDirection.END)
        assert stream.read(2) == b"89"
        with pytest.raises(ValueError):
            stream.seek(1)


def test_file_stream_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        FileStream(tmp_path / "missing.bin")