import pytest

from interntasks.rle import (
    RLEError,
    compress,
    decompress,
    main,
    process_file,
    process_file_single_thread,
    validate_files,
)

SAMPLE = (
    b"This is a test line with some repeated characters aaaaaaaand some more...\n" * 200
    + bytes(range(256))
    + b"z" * 700
)


def test_compress_pairs_byte_and_count():
    assert compress(b"aaab") == b"a\x03b\x01"


def test_empty_input():
    assert compress(b"") == b""
    assert decompress(b"") == b""


def test_long_run_split_at_255():
    data = b"x" * 600
    encoded = compress(data)
    counts = encoded[1::2]
    assert max(counts) == 255
    assert sum(counts) == len(data)
    assert set(encoded[0::2]) == {ord("x")}


@pytest.mark.parametrize(
    "data",
    [b"a", b"ab", b"aabbbcccc", bytes(range(256)), b"\x00" * 1000, SAMPLE],
)
def test_round_trip(data):
    assert decompress(compress(data)) == data


def test_encoded_length_is_even():
    assert len(compress(SAMPLE)) % 2 == 0


def test_odd_length_is_invalid():
    with pytest.raises(RLEError, match="Invalid RLE data"):
        decompress(b"a\x02b")


def test_zero_count_yields_nothing():
    assert decompress(b"a\x00b\x02") == b"bb"


def test_single_thread_round_trip(tmp_path, capsys):
    source = tmp_path / "in.bin"
    packed = tmp_path / "packed.rle"
    unpacked = tmp_path / "out.bin"
    source.write_bytes(SAMPLE)
    written = process_file_single_thread(source, packed, True)
    process_file_single_thread(packed, unpacked, False)
    assert packed.read_bytes() == written
    assert unpacked.read_bytes() == SAMPLE
    out = capsys.readouterr().out
    assert "Compression (single-threaded) took:" in out
    assert "Decompression (single-threaded) took:" in out


@pytest.mark.parametrize("threads", [1, 2, 3, 4, 7])
def test_multi_thread_round_trip(tmp_path, capsys, threads):
    source = tmp_path / "in.bin"
    packed = tmp_path / "packed.rle"
    unpacked = tmp_path / "out.bin"
    source.write_bytes(SAMPLE)
    process_file(source, packed, True, threads)
    process_file(packed, unpacked, False, threads)
    assert unpacked.read_bytes() == SAMPLE
    assert decompress(packed.read_bytes()) == SAMPLE
    assert f"Compression with {threads} threads took:" in capsys.readouterr().out


def test_multi_thread_more_threads_than_bytes(tmp_path):
    source = tmp_path / "in.bin"
    packed = tmp_path / "packed.rle"
    source.write_bytes(b"aab")
    process_file(source, packed, True, 8)
    assert decompress(packed.read_bytes()) == b"aab"


def test_zero_threads_rejected(tmp_path):
    source = tmp_path / "in.bin"
    source.write_bytes(b"abc")
    with pytest.raises(ValueError):
        process_file(source, tmp_path / "out.rle", True, 0)


def test_missing_input(tmp_path):
    with pytest.raises(RLEError, match="Cannot open input file"):
        process_file_single_thread(tmp_path / "absent", tmp_path / "out", True)


def test_unwritable_output(tmp_path):
    source = tmp_path / "in.bin"
    source.write_bytes(b"abc")
    with pytest.raises(RLEError, match="Cannot open output file"):
        process_file(source, tmp_path, True, 2)


def test_multi_thread_rejects_odd_encoded_file(tmp_path):
    packed = tmp_path / "bad.rle"
    packed.write_bytes(b"a\x02b\x03c")
    with pytest.raises(RLEError, match="Invalid RLE data"):
        process_file(packed, tmp_path / "out.bin", False, 2)


def test_validate_match(tmp_path, capsys):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(SAMPLE)
    second.write_bytes(SAMPLE)
    assert validate_files(first, second) is True
    assert "Validation successful: files match" in capsys.readouterr().out


def test_validate_mismatch_reports_sizes(tmp_path, capsys):
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.write_bytes(b"abcd")
    second.write_bytes(b"ab")
    assert validate_files(first, second) is False
    out = capsys.readouterr().out
    assert "Validation failed: files differ" in out
    assert "Original size: 4" in out
    assert "Decompressed size: 2" in out


def test_main_validates_both_runs(tmp_path, capsys):
    assert main(["--directory", str(tmp_path), "--lines", "50", "--threads", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Validation successful: files match") == 2
    assert (tmp_path / "decompressed.txt").read_bytes() == (tmp_path / "input.txt").read_bytes()