"""Tests for csvgrid data models."""

from __future__ import annotations

import dataclasses
import errno
from pathlib import Path

import pytest

from csvgrid.models import FileBinding, RenameFailureKind, RenameResult


def test_file_binding_resolve(tmp_path: Path) -> None:
    binding = FileBinding.resolve("report", tmp_path)
    assert binding.filename == "report.csv"
    assert binding.filepath == tmp_path / "report.csv"
    assert binding.root_dir == tmp_path
    assert str(binding) == str(tmp_path / "report.csv")


def test_file_binding_custom_extension(tmp_path: Path) -> None:
    binding = FileBinding.resolve("report.tsv", tmp_path, ".tsv")
    assert binding.filename == "report.tsv"


def test_file_binding_is_immutable(tmp_path: Path) -> None:
    binding = FileBinding.resolve("report", tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        binding.filename = "other.csv"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (FileNotFoundError(errno.ENOENT, "missing"), RenameFailureKind.NOT_FOUND),
        (PermissionError(errno.EACCES, "denied"), RenameFailureKind.PERMISSION_DENIED),
        (OSError(errno.EPERM, "not permitted"), RenameFailureKind.PERMISSION_DENIED),
        (OSError(errno.EBUSY, "busy"), RenameFailureKind.RESOURCE_BUSY),
        (OSError(errno.ENOSPC, "full"), RenameFailureKind.OTHER),
        (OSError("no errno"), RenameFailureKind.OTHER),
        (ValueError("file name must not be empty"), RenameFailureKind.OTHER),
    ],
)
def test_rename_failure_classification(error: Exception, kind: RenameFailureKind) -> None:
    assert RenameFailureKind.from_error(error) is kind


def test_rename_result_success_and_failure(tmp_path: Path) -> None:
    binding = FileBinding.resolve("report", tmp_path)

    success = RenameResult.success(binding)
    assert success.ok is True
    assert bool(success) is True
    assert success.message == "Renamed to 'report.csv'."

    failure = RenameResult.failure(binding, OSError(errno.EBUSY, "busy"))
    assert failure.ok is False
    assert failure.kind is RenameFailureKind.RESOURCE_BUSY
    assert failure.kind.value == "resource-busy"
    assert failure.message == "The file is being used by another program."
    assert failure.binding is binding
