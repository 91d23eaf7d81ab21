import pytest

from interntasks.textfile import main, write_append_read


def test_returns_written_and_appended_lines(tmp_path):
    path = tmp_path / "intern.txt"
    assert write_append_read(path) == ["ABC", "PQR", "XYZ"]


def test_file_contents_end_with_newlines(tmp_path):
    path = tmp_path / "intern.txt"
    write_append_read(path)
    assert path.read_text(encoding="utf-8") == "ABC\nPQR\nXYZ\n"


def test_existing_content_is_replaced(tmp_path):
    path = tmp_path / "intern.txt"
    path.write_text("old content\nmore\n", encoding="utf-8")
    assert write_append_read(path) == ["ABC", "PQR", "XYZ"]


def test_repeated_runs_do_not_accumulate(tmp_path):
    path = tmp_path / "intern.txt"
    first = write_append_read(path)
    second = write_append_read(path)
    assert first == second == ["ABC", "PQR", "XYZ"]


def test_directory_path_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        write_append_read(tmp_path)


def test_main_prints_lines(tmp_path, capsys):
    path = tmp_path / "intern.txt"
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.splitlines() == ["ABC", "PQR", "XYZ"]


def test_main_reports_unopenable_file(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "Unable to open the file!" in capsys.readouterr().out