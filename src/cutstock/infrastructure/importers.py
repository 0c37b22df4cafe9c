"""Import of cut lists from CSV files and Excel workbooks.

The first row is a header naming the columns. ``length`` and ``quantity``
are required, ``name`` is optional, and header matching ignores case and
surrounding whitespace. Blank rows are skipped.

    name,length,quantity
    Rail,250,4
    Post,120,6

Workbooks are read from their first sheet with the same layout.
"""

from __future__ import annotations

import csv
import io
import logging
import zipfile
from pathlib import Path
from typing import Any, Iterable, Sequence

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from cutstock.domain import DemandRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("length", "quantity")


class DemandImportError(Exception):
    """Raised when a cut list file cannot be imported.

    Attributes:
        message: Human-readable description of the problem.
        row: One-based row number in the file, counting the header.
    """

    def __init__(self, message: str, row: int | None = None) -> None:
        self.message = message
        self.row = row
        super().__init__(f"Row {row}: {message}" if row is not None else message)


def parse_demand_csv(text: str) -> list[DemandRecord]:
    """Parse CSV text into demand records.

    Args:
        text: CSV content including the header row.

    Returns:
        Demand records in file order.

    Raises:
        DemandImportError: If the header is missing required columns or a
            row has an invalid length or quantity.
    """
    return parse_demand_rows(csv.reader(io.StringIO(text)))


def load_demand_csv(path: Path) -> list[DemandRecord]:
    """Read a CSV cut list from disk.

    Raises:
        DemandImportError: If the file cannot be read or parsed.
    """
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise DemandImportError(f"File not found: {path}")
    except OSError as e:
        raise DemandImportError(f"Error reading {path}: {e}")
    return parse_demand_csv(text)


def load_demand_xlsx(path: Path) -> list[DemandRecord]:
    """Read a cut list from the first sheet of an .xlsx workbook.

    Formula cells are read as their cached values.

    Raises:
        DemandImportError: If the workbook cannot be opened or parsed.
    """
    if not path.exists():
        raise DemandImportError(f"File not found: {path}")

    try:
        workbook = load_workbook(path, read_only=True, data_only=True)
    except (InvalidFileException, zipfile.BadZipFile, OSError) as e:
        raise DemandImportError(f"Cannot open workbook {path}: {e}")

    try:
        if not workbook.worksheets:
            raise DemandImportError("File is empty")
        sheet = workbook.worksheets[0]
        logger.debug("Reading cut list from sheet %r of %s", sheet.title, path)
        return parse_demand_rows(sheet.iter_rows(values_only=True))
    finally:
        workbook.close()


def parse_demand_rows(rows: Iterable[Sequence[Any]]) -> list[DemandRecord]:
    """Turn a header row plus data rows into demand records.

    Cells may be strings, numbers or None, so CSV readers and
    spreadsheet rows go through the same checks.
    """
    rows = iter(rows)
    header = [_cell_text(value).lower() for value in next(rows, ())]
    if not any(header):
        raise DemandImportError("File is empty")

    columns: dict[str, int] = {}
    for index, name in enumerate(header):
        columns.setdefault(name, index)
    missing = [name for name in REQUIRED_COLUMNS if name not in columns]
    if missing:
        raise DemandImportError(
            f"Missing required column(s): {', '.join(missing)}", row=1
        )

    records: list[DemandRecord] = []
    for row_number, row in enumerate(rows, start=2):
        cells = [_cell_text(value) for value in row]
        if not any(cells):
            continue
        records.append(_parse_row(cells, columns, row_number))

    logger.debug("Imported %d demand records", len(records))
    return records


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    # Spreadsheets store whole numbers as floats
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _cell(cells: list[str], columns: dict[str, int], name: str) -> str:
    index = columns.get(name)
    if index is None or index >= len(cells):
        return ""
    return cells[index]


def _parse_row(
    cells: list[str], columns: dict[str, int], row_number: int
) -> DemandRecord:
    raw_length = _cell(cells, columns, "length")
    raw_quantity = _cell(cells, columns, "quantity")

    try:
        length = float(raw_length.replace(",", "."))
    except ValueError:
        raise DemandImportError(f"Invalid length {raw_length!r}", row=row_number)

    try:
        quantity = int(raw_quantity)
    except ValueError:
        raise DemandImportError(f"Invalid quantity {raw_quantity!r}", row=row_number)

    try:
        return DemandRecord(
            name=_cell(cells, columns, "name"), length=length, quantity=quantity
        )
    except ValueError as e:
        raise DemandImportError(str(e), row=row_number)
