"""Excel bridge for csvgrid grids."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import pandas as pd
from openpyxl import load_workbook

from csvgrid.io.address import column_index_to_letters
from csvgrid.services.grid_store import GridSource, rows_of

logger = logging.getLogger(__name__)


def grid_to_dataframe(source: GridSource) -> pd.DataFrame:
    """
    Return the grid as a string DataFrame laid out like a spreadsheet.

    Columns are labelled ``A``, ``B``, ... and the index starts at 1, so
    ``df.at[3, "B"]`` reads the same cell as ``store.get_cell("B3")``.
    Short rows are padded with ``""``.
    """
    rows = rows_of(source)
    width = max((len(row) for row in rows), default=0)
    data = [list(row) + [""] * (width - len(row)) for row in rows]
    columns = [column_index_to_letters(idx) for idx in range(width)]
    frame = pd.DataFrame(data, columns=columns, dtype=object)
    frame.index = pd.RangeIndex(start=1, stop=len(data) + 1)
    return frame


def export_grid_xlsx(
    source: GridSource,
    path: Union[str, Path],
    *,
    sheet_name: str = "Sheet1",
) -> Path:
    """
    Write the grid into an Excel workbook, one grid cell per worksheet cell.

    Parameters
    ----------
    source:
        A GridStore (its file is parsed) or rows already in memory.
    path:
        Target file path. The ``.xlsx`` suffix is enforced.
    sheet_name:
        Worksheet to create.

    Returns
    -------
    Path
        The resolved output path written to disk.
    """
    output_path = Path(path)
    if output_path.suffix.lower() != ".xlsx":
        output_path = output_path.with_suffix(".xlsx")
    output_path.parent.mkdir(parents=True, exist_ok=True)

    frame = grid_to_dataframe(source)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        frame.to_excel(writer, sheet_name=sheet_name, index=False, header=False)

    logger.info(
        "Exported %d row(s) x %d column(s) to '%s'.",
        frame.shape[0],
        frame.shape[1],
        output_path,
    )
    return output_path


def import_grid_xlsx(path: Union[str, Path], *, sheet_name: str | None = None) -> list[list[str]]:
    """
    Read a worksheet back into grid rows.

    Every value is converted to text, empty cells become ``""`` and trailing
    empty cells of each row are dropped, so a blank worksheet row becomes an
    empty grid row. ``sheet_name`` defaults to the active worksheet.
    """
    source_path = Path(path)
    if not source_path.exists():
        raise FileNotFoundError(f"Workbook not found at '{source_path}'.")

    workbook = load_workbook(source_path, data_only=True)
    try:
        if sheet_name is None:
            sheet = workbook.active
        elif sheet_name in workbook.sheetnames:
            sheet = workbook[sheet_name]
        else:
            raise ValueError(
                f"Sheet '{sheet_name}' not found in '{source_path.name}'."
            )

        rows: list[list[str]] = []
        for values in sheet.iter_rows(min_row=1, max_row=sheet.max_row, values_only=True):
            row = ["" if value is None else str(value) for value in values]
            while row and not row[-1]:
                row.pop()
            rows.append(row)
    finally:
        workbook.close()

    while rows and not rows[-1]:
        rows.pop()
    logger.info("Imported %d row(s) from '%s'.", len(rows), source_path)
    return rows


__all__ = ["export_grid_xlsx", "grid_to_dataframe", "import_grid_xlsx"]
