"""Tests for the file-backed grid store."""

from __future__ import annotations

import errno
import logging
from pathlib import Path

import pytest

from csvgrid import GridStore, GridStoreConfig, RenameFailureKind
from csvgrid.core.errors import InvalidReference, InvalidRowNumber


def _sample_rows() -> list[list[str]]:
    return [
        ["Course", "Section", "Instructor"],
        ["CS 101", "01", "Hopper, Grace"],
        ["CS 202", "02", "Lovelace"],
    ]


def _store(tmp_path: Path, name: str = "courses") -> GridStore:
    return GridStore(name, root_dir=tmp_path)


def test_construct_creates_empty_file(tmp_path: Path) -> None:
    store = _store(tmp_path)
    assert store.filename == "courses.csv"
    assert store.filepath == tmp_path / "courses.csv"
    assert store.filepath.read_bytes() == b""
    assert store.exists() is True


def test_construct_preserves_existing_content(tmp_path: Path) -> None:
    (tmp_path / "courses.csv").write_text("a,b\n\n", encoding="utf-8")
    store = _store(tmp_path)
    assert store.parse_file() == [["a", "b"]]


def test_construct_creates_missing_root(tmp_path: Path) -> None:
    store = GridStore("nested", root_dir=tmp_path / "a" / "b")
    assert store.filepath.is_file()


def test_root_dir_from_config(tmp_path: Path) -> None:
    config = GridStoreConfig(root_dir=tmp_path)
    store = GridStore("report", config=config)
    assert store.filepath == tmp_path / "report.csv"


def test_root_dir_defaults_to_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    store = GridStore("report")
    assert store.filepath == tmp_path / "report.csv"
    assert (tmp_path / "report.csv").exists()


def test_write_row_appends_exact_bytes(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_row(["a", "b,c"])
    store.write_row(None)
    store.write_row(["d"])
    assert store.filepath.read_bytes() == b'a,"b,c"\n\n\n\nd\n\n'


def test_write_rows_and_parse(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    assert store.parse_file() == _sample_rows()
    assert store.row_count() == 3


def test_write_file_replaces_content(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    store.write_file([["only"]])
    assert store.parse_file() == [["only"]]


def test_parse_does_not_modify_file(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    before = store.filepath.read_bytes()
    store.parse_file()
    store.get_cell("A1")
    assert store.filepath.read_bytes() == before


def test_clear(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    store.clear()
    assert store.filepath.stat().st_size == 0
    assert store.parse_file() == []


def test_get_cell(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    assert store.get_cell("A1") == "Course"
    assert store.get_cell("c2") == "Hopper, Grace"
    assert store.get_cell("B3") == "02"


def test_get_cell_missing_is_empty(tmp_path: Path) -> None:
    store = _store(tmp_path)
    assert store.get_cell("A1") == ""
    store.write_rows(_sample_rows())
    assert store.get_cell("D1") == ""
    assert store.get_cell("A99") == ""


def test_get_cell_invalid_reference(tmp_path: Path) -> None:
    store = _store(tmp_path)
    with pytest.raises(InvalidReference):
        store.get_cell("1A")


def test_get_row(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    assert store.get_row(2) == ["CS 101", "01", "Hopper, Grace"]
    assert store.get_row("3") == ["CS 202", "02", "Lovelace"]
    assert store.get_row(5) == []


@pytest.mark.parametrize("value", [0, -1, "0", "abc", "", 1.5, True, None])
def test_get_row_invalid_number(tmp_path: Path, value: object) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    with pytest.raises(InvalidRowNumber):
        store.get_row(value)


def test_filename_setter_keeps_single_extension(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.filename = "data"
    assert store.filename == "data.csv"
    assert store.filepath == tmp_path / "data.csv"
    store.filename = "data.csv"
    assert store.filename == "data.csv"
    store.filename = "data.CSV"
    assert store.filename == "data.CSV.csv"
    assert store.filepath == tmp_path / "data.CSV.csv"
    assert not (tmp_path / "data.csv").exists()


def test_rebind_returns_new_binding(tmp_path: Path) -> None:
    store = _store(tmp_path)
    binding = store.rebind("other")
    assert binding is store.binding
    assert binding.filename == "other.csv"
    assert binding.root_dir == tmp_path


def test_rename_moves_file(tmp_path: Path) -> None:
    store = _store(tmp_path)
    store.write_rows(_sample_rows())
    result = store.rename("archive")
    assert result.ok is True
    assert result.kind is None
    assert store.filename == "archive.csv"
    assert store.filepath == tmp_path / "archive.csv"
    assert not (tmp_path / "courses.csv").exists()
    assert store.parse_file() == _sample_rows()


def test_rename_missing_file_is_not_found(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    store = _store(tmp_path)
    store.filepath.unlink()
    with caplog.at_level(logging.WARNING, logger="csvgrid.services.grid_store"):
        result = store.rename("archive")
    assert result.ok is False
    assert not result
    assert result.kind is RenameFailureKind.NOT_FOUND
    assert isinstance(result.error, FileNotFoundError)
    assert store.filename == "courses.csv"
    assert result.binding == store.binding
    assert "File not found." in caplog.text


def test_rename_permission_denied_leaves_binding(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    store = _store(tmp_path)
    store.write_row(["keep"])
    before = store.binding

    def _deny(self: Path, target: Path) -> Path:
        raise PermissionError(errno.EACCES, "Permission denied", str(target))

    monkeypatch.setattr(Path, "rename", _deny)
    result = store.rename("archive")

    assert result.kind is RenameFailureKind.PERMISSION_DENIED
    assert store.binding == before
    assert store.filename == "courses.csv"
    assert store.filepath == tmp_path / "courses.csv"
    assert store.parse_file() == [["keep"]]
    assert not (tmp_path / "archive.csv").exists()


@pytest.mark.parametrize(
    ("code", "kind"),
    [
        (errno.EBUSY, RenameFailureKind.RESOURCE_BUSY),
        (errno.EXDEV, RenameFailureKind.OTHER),
    ],
)
def test_rename_other_failures(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    code: int,
    kind: RenameFailureKind,
) -> None:
    store = _store(tmp_path)

    def _fail(self: Path, target: Path) -> Path:
        raise OSError(code, "rename failed")

    monkeypatch.setattr(Path, "rename", _fail)
    result = store.rename("archive")
    assert result.kind is kind
    assert store.filename == "courses.csv"


@pytest.mark.parametrize("new_name", ["", "   ", "sub/archive"])
def test_rename_invalid_name_is_reported(tmp_path: Path, new_name: str) -> None:
    store = _store(tmp_path)
    store.write_row(["keep"])
    before = store.binding

    result = store.rename(new_name)

    assert result.ok is False
    assert result.kind is RenameFailureKind.OTHER
    assert isinstance(result.error, ValueError)
    assert result.binding == before
    assert store.binding == before
    assert store.parse_file() == [["keep"]]
    assert sorted(path.name for path in tmp_path.iterdir()) == ["courses.csv"]


def test_copy_from_store(tmp_path: Path) -> None:
    source = _store(tmp_path, "source")
    source.write_rows(_sample_rows())
    target = _store(tmp_path, "target")
    target.write_row(["stale"])

    target.copy(source)

    assert target.filepath.read_bytes() == source.filepath.read_bytes()
    assert target.parse_file() == _sample_rows()


def test_copy_rejects_non_store(tmp_path: Path) -> None:
    store = _store(tmp_path)
    with pytest.raises(TypeError):
        store.copy(str(tmp_path / "other.csv"))  # type: ignore[arg-type]


def test_copy_from_missing_source_raises(tmp_path: Path) -> None:
    store = _store(tmp_path)
    with pytest.raises(FileNotFoundError):
        store.copy_from(tmp_path / "missing.csv")


def test_custom_encoding(tmp_path: Path) -> None:
    config = GridStoreConfig(root_dir=tmp_path, encoding="latin-1")
    store = GridStore("wide", config=config)
    store.write_row(["café", "naïve"])
    assert store.parse_file() == [["café", "naïve"]]
