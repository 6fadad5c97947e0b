from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

from openpyxl import load_workbook
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

from rsa_ops.excel_helpers import _last_data_row, _row_values

OUTPUT_HEADER = [
    "Campaign",
    "Ad group",
    "Ad label",
    "Asset type",
    "Low performing asset text",
    "Alternative 1",
    "Alternative 2",
    "Alternative 3",
]
HEADER_FILL = PatternFill(start_color="E8EAED", end_color="E8EAED", fill_type="solid")
HEADER_FONT = Font(bold=True)


def header_matches(values: Sequence[Any]) -> bool:
    if len(values) < len(OUTPUT_HEADER):
        return False
    return all(expected == values[idx] for idx, expected in enumerate(OUTPUT_HEADER))


def _clear_sheet(ws) -> None:
    if ws.max_row >= 1:
        ws.delete_rows(1, ws.max_row)


def ensure_output_header(workbook, sheet_name: str) -> tuple[Any, bool]:
    """Return the output sheet, rewriting its header when it is missing or wrong.

    The second value tells whether the sheet was (re)initialized.
    """
    if sheet_name in workbook.sheetnames:
        ws = workbook[sheet_name]
        if header_matches(_row_values(ws, 1)):
            return ws, False
        _clear_sheet(ws)
    else:
        ws = workbook.create_sheet(sheet_name)

    for col, label in enumerate(OUTPUT_HEADER, start=1):
        cell = ws.cell(row=1, column=col, value=label)
        cell.fill = HEADER_FILL
        cell.font = HEADER_FONT
        ws.column_dimensions[get_column_letter(col)].width = len(label) + 4
    return ws, True


def append_rows(ws, rows: Sequence[Sequence[Any]]) -> int:
    next_row = max(_last_data_row(ws), 1) + 1
    for offset, row in enumerate(rows):
        for col, value in enumerate(row[: len(OUTPUT_HEADER)], start=1):
            ws.cell(row=next_row + offset, column=col, value=value)
    return len(rows)


def write_results(
    workbook_path: Path, sheet_name: str, rows: Sequence[Sequence[Any]]
) -> int:
    workbook = load_workbook(workbook_path)
    ws, reset = ensure_output_header(workbook, sheet_name)
    if reset:
        print(f'Output sheet "{sheet_name}" header written.')
    written = append_rows(ws, rows)
    workbook.save(workbook_path)
    return written
