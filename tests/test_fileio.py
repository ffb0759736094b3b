from sdnmap.fileio import read_file, write_file


def test_round_trip(tmp_path):
    target = tmp_path / "map.xml"
    text = "<network>\n  <switch id=\"1\"/>\n</network>\n"
    write_file(text, target)
    assert read_file(target) == text


def test_round_trip_unicode_with_str_path(tmp_path):
    target = str(tmp_path / "notes.txt")
    text = "Длина пути: 42"
    write_file(text, target)
    assert read_file(target) == text


def test_writes_utf8_bytes(tmp_path):
    target = tmp_path / "data.txt"
    text = "ü"
    write_file(text, target)
    assert target.read_bytes() == text.encode("utf-8")


def test_overwrites_existing_content(tmp_path):
    target = tmp_path / "data.txt"
    write_file("first version", target)
    write_file("second", target)
    assert read_file(target) == "second"


def test_missing_file_reads_empty(tmp_path):
    assert read_file(tmp_path / "absent.txt") == ""


def test_write_to_missing_directory_is_silent(tmp_path):
    target = tmp_path / "no" / "such" / "dir" / "file.txt"
    write_file("content", target)
    assert not target.exists()
    assert read_file(target) == ""