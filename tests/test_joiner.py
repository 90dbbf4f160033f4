"""Tests for FileJoiner discovery, ordering and concatenation."""

from pathlib import Path

import pytest

from partsplit.errors import (
    DirectoryNotFoundError,
    FileCreateError,
    FileReadError,
    NoMatchingFilesError,
    UsageError,
)
from partsplit.operations import FileJoiner, FileSplitter


@pytest.fixture
def parts_dir(tmp_path):
    folder = tmp_path / "parts"
    folder.mkdir()
    return folder


def write_parts(folder, count, suffix="_part", base="a"):
    for i in range(count):
        (folder / f"{base}{suffix}{i}").write_bytes(f"<{i}>".encode())


def test_round_trip(workdir, make_source):
    source = make_source(7777, "video.mp4")
    FileSplitter(extension="bin").split(source, 1000)

    output = workdir.parent / "joined.mp4"
    joined = FileJoiner().join(workdir, output)

    assert len(joined) == 8
    assert output.read_bytes() == source.read_bytes()


def test_round_trip_with_padding(workdir, make_source):
    source = make_source(25_000)
    parts = FileSplitter(pad_width=2).split(source, 1000)
    assert parts[0].path.parent == workdir / "output"

    output = workdir / "restored"
    FileJoiner().join(workdir / "output", output)

    assert output.read_bytes() == source.read_bytes()


def test_joins_in_lexical_order(parts_dir, tmp_path):
    write_parts(parts_dir, 12)
    output = tmp_path / "out"

    joined = FileJoiner().join(parts_dir, output)

    names = [p.name for p in joined]
    assert names == sorted(names)
    assert names[:4] == ["a_part0", "a_part1", "a_part10", "a_part11"]
    assert output.read_bytes() == b"".join(p.read_bytes() for p in joined)
    assert output.read_bytes().startswith(b"<0><1><10><11><2>")


def test_numeric_order_opt_in(parts_dir, tmp_path):
    write_parts(parts_dir, 12)
    output = tmp_path / "out"

    FileJoiner(ordering="numeric").join(parts_dir, output)

    assert output.read_bytes() == b"".join(f"<{i}>".encode() for i in range(12))


def test_only_matching_regular_files(parts_dir, tmp_path):
    write_parts(parts_dir, 3)
    (parts_dir / "notes.txt").write_bytes(b"skip me")
    (parts_dir / "dir_part9").mkdir()

    parts = FileJoiner().discover(parts_dir)

    assert [p.name for p in parts] == ["a_part0", "a_part1", "a_part2"]
    assert parts.total_size == 9


def test_substring_match_anywhere_in_name(parts_dir, tmp_path):
    (parts_dir / "x_part1.bin").write_bytes(b"1")
    (parts_dir / "_part_of_something").write_bytes(b"2")

    parts = FileJoiner().discover(parts_dir)

    assert len(parts) == 2


def test_output_inside_folder_is_not_joined(parts_dir):
    write_parts(parts_dir, 2)
    output = parts_dir / "a_part_joined"

    joined = FileJoiner().join(parts_dir, output)

    assert output not in joined
    assert output.read_bytes() == b"<0><1>"


def test_default_folder_and_output(workdir):
    write_parts(workdir, 2)

    FileJoiner().join()

    assert (workdir / "work - unsplit").read_bytes() == b"<0><1>"


def test_default_output_named_after_folder(parts_dir, workdir):
    assert FileJoiner().default_output(parts_dir).name == "parts - unsplit"


def test_no_matching_files(parts_dir, tmp_path):
    (parts_dir / "unrelated.txt").write_bytes(b"x")
    output = tmp_path / "out"

    with pytest.raises(NoMatchingFilesError, match="_part"):
        FileJoiner().join(parts_dir, output)
    assert not output.exists() or output.read_bytes() == b""


def test_missing_folder(tmp_path):
    with pytest.raises(DirectoryNotFoundError):
        FileJoiner().join(tmp_path / "nope", tmp_path / "out")


def test_file_is_not_a_folder(tmp_path):
    target = tmp_path / "file_part0"
    target.write_bytes(b"x")

    with pytest.raises(DirectoryNotFoundError):
        FileJoiner().discover(target)


def test_output_cannot_be_created(parts_dir, tmp_path):
    write_parts(parts_dir, 1)

    with pytest.raises(FileCreateError):
        FileJoiner().join(parts_dir, tmp_path / "missing" / "out")


def test_iter_join_yields_after_append(parts_dir, tmp_path):
    write_parts(parts_dir, 3)
    output = tmp_path / "out"

    seen = [p.name for p in FileJoiner().iter_join(parts_dir, output)]

    assert seen == ["a_part0", "a_part1", "a_part2"]


def test_custom_suffix(parts_dir, tmp_path):
    write_parts(parts_dir, 2, suffix=".piece")
    write_parts(parts_dir, 2, suffix="_part", base="other")
    output = tmp_path / "out"

    FileJoiner(suffix=".piece").join(parts_dir, output)

    assert output.read_bytes() == b"<0><1>"


def test_read_error_leaves_partial_output(parts_dir, tmp_path, monkeypatch):
    write_parts(parts_dir, 3)
    output = tmp_path / "out"
    read_bytes = Path.read_bytes

    def failing_read(self):
        if self.name == "a_part1":
            raise PermissionError(13, "Permission denied", str(self))
        return read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", failing_read)

    with pytest.raises(FileReadError, match="a_part1"):
        FileJoiner().join(parts_dir, output)

    assert output.read_bytes() == b"<0>"


def test_unknown_ordering():
    with pytest.raises(UsageError, match="Unknown ordering 'bogus'"):
        FileJoiner(ordering="bogus")
