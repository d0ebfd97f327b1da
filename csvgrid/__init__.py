"""csvgrid package root."""

from .core.config import GridStoreConfig
from .core.errors import GridStoreError, InvalidReference, InvalidRowNumber
from .models import FileBinding, RenameFailureKind, RenameResult
from .services.grid_store import GridStore
from .services.row_editor import RowEditor

APP_NAME = "csvgrid"
__version__ = "0.1.0"

__all__ = [
	"GridStore",
	"GridStoreConfig",
	"RowEditor",
	"FileBinding",
	"RenameResult",
	"RenameFailureKind",
	"GridStoreError",
	"InvalidReference",
	"InvalidRowNumber",
	"APP_NAME",
	"__version__",
]
