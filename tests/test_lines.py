import os

import pytest

from fdfkit.lines import BUFFER_SIZE, LineReader, get_next_line


def _open(tmp_path, content, name="data.txt"):
    path = tmp_path / name
    path.write_bytes(content.encode("utf-8"))
    return os.open(path, os.O_RDONLY)


def _read_all(reader, fd):
    lines = []
    while (line := reader.next_line(fd)) is not None:
        lines.append(line)
    return lines


CONTENTS = [
    "first line\nsecond\n\nlast without newline",
    "0 0 0 0\n0 10 10 0\n0 0 0 0\n",
    "single",
    "\n\n\n",
    "x" * 200 + "\n" + "y" * 3,
]


@pytest.mark.parametrize("buffer_size", [1, 3, BUFFER_SIZE, 1000])
@pytest.mark.parametrize("content", CONTENTS)
def test_lines_rebuild_content(tmp_path, content, buffer_size):
    fd = _open(tmp_path, content)
    try:
        lines = _read_all(LineReader(buffer_size), fd)
    finally:
        os.close(fd)
    assert "".join(lines) == content
    assert all(line.endswith("\n") for line in lines[:-1])
    assert all(line.count("\n") == (1 if line.endswith("\n") else 0) for line in lines)
    assert len(lines) == content.count("\n") + (0 if content.endswith("\n") else 1)


def test_empty_file_gives_none(tmp_path):
    fd = _open(tmp_path, "")
    try:
        reader = LineReader()
        assert reader.next_line(fd) is None
        assert reader.next_line(fd) is None
    finally:
        os.close(fd)


def test_descriptors_are_independent(tmp_path):
    fd_a = _open(tmp_path, "a1\na2\n", "a.txt")
    fd_b = _open(tmp_path, "b1\nb2\n", "b.txt")
    try:
        reader = LineReader(2)
        assert reader.next_line(fd_a) == "a1\n"
        assert reader.next_line(fd_b) == "b1\n"
        assert reader.next_line(fd_a) == "a2\n"
        assert reader.next_line(fd_b) == "b2\n"
        assert reader.next_line(fd_a) is None
    finally:
        os.close(fd_a)
        os.close(fd_b)


def test_get_next_line_uses_shared_reader(tmp_path):
    content = "one\ntwo"
    fd = _open(tmp_path, content)
    try:
        lines = []
        while (line := get_next_line(fd)) is not None:
            lines.append(line)
    finally:
        os.close(fd)
    assert "".join(lines) == content


def test_invalid_arguments():
    with pytest.raises(ValueError):
        LineReader(0)
    with pytest.raises(ValueError):
        LineReader().next_line(-1)


def test_read_error_propagates(tmp_path):
    fd = _open(tmp_path, "data\n")
    os.close(fd)
    with pytest.raises(OSError):
        LineReader().next_line(fd)