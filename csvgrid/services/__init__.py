"""Services built on top of the csvgrid file format."""

from .grid_store import GridStore
from .row_editor import RowEditor, blank_out_row, shift_rows_up
from .grid_compare import RowDifference, compare_grids, grids_equal
from .excel_io import export_grid_xlsx, grid_to_dataframe, import_grid_xlsx

__all__ = [
    "GridStore",
    "RowDifference",
    "RowEditor",
    "blank_out_row",
    "compare_grids",
    "export_grid_xlsx",
    "grid_to_dataframe",
    "grids_equal",
    "import_grid_xlsx",
    "shift_rows_up",
]
