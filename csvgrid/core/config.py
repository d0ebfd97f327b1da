"""Runtime configuration for grid stores."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional, Union

DEFAULT_EXTENSION = ".csv"
DEFAULT_ENCODING = "utf-8"


@dataclass(frozen=True)
class GridStoreConfig:
    """Settings shared by every store built from the same configuration.

    ``root_dir`` is the directory every bound file lives in. Leaving it as
    ``None`` means the current working directory, resolved when a store is
    constructed rather than when the config is created.
    """

    root_dir: Optional[Path] = None
    extension: str = DEFAULT_EXTENSION
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError(f"invalid file extension: {self.extension!r}")
        if self.root_dir is not None and not isinstance(self.root_dir, Path):
            object.__setattr__(self, "root_dir", Path(self.root_dir))

    @classmethod
    def default(cls) -> "GridStoreConfig":
        """Return a config rooted at the current working directory."""
        return cls(root_dir=Path.cwd())

    def with_root(self, root_dir: Union[str, Path]) -> "GridStoreConfig":
        return replace(self, root_dir=Path(root_dir))
