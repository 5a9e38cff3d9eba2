import pytest

from huffpack.cli import main


def _roundtrip(tmp_path, data):
    source = tmp_path / "data.bin"
    source.write_bytes(data)
    packed = tmp_path / "data.huf"
    restored = tmp_path / "restored.bin"
    assert main(["c", str(source), str(packed)]) == 0
    assert main(["d", str(packed), str(restored)]) == 0
    return packed.read_bytes(), restored.read_bytes()


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"a",
        b"aaaaaaaaaa",
        b"abracadabra",
        b"hello, huffman world\n" * 20,
        bytes(range(256)) * 3,
    ],
)
def test_roundtrip(tmp_path, data):
    _, restored = _roundtrip(tmp_path, data)
    assert restored == data


def test_header_holds_alphabet_size(tmp_path):
    packed, _ = _roundtrip(tmp_path, b"aab")
    assert packed[:2] == (2).to_bytes(2, "little")
    assert packed[2:10] == (3).to_bytes(8, "little")


def test_repetitive_data_shrinks(tmp_path):
    data = b"ab" * 1000 + b"c" * 3000
    packed, restored = _roundtrip(tmp_path, data)
    assert restored == data
    assert len(packed) < len(data) // 2


def test_default_output_names(tmp_path):
    source = tmp_path / "notes.txt"
    source.write_bytes(b"some text to squeeze")
    assert main(["c", str(source)]) == 0
    packed = tmp_path / "notes.txt.huf"
    source.unlink()
    assert main(["d", str(packed)]) == 0
    assert source.read_bytes() == b"some text to squeeze"


def test_truncated_file_fails(tmp_path):
    source = tmp_path / "data.bin"
    source.write_bytes(b"abracadabra" * 10)
    packed = tmp_path / "data.huf"
    assert main(["c", str(source), str(packed)]) == 0
    packed.write_bytes(packed.read_bytes()[:-3])
    assert main(["d", str(packed), str(tmp_path / "out.bin")]) == 1


def test_short_header_fails(tmp_path):
    packed = tmp_path / "bad.huf"
    packed.write_bytes(b"\x01")
    assert main(["d", str(packed), str(tmp_path / "out.bin")]) == 1


def test_missing_input_fails(tmp_path):
    assert main(["c", str(tmp_path / "missing.bin")]) == 1