from __future__ import annotations

from pathlib import Path
from typing import Any

from openpyxl import load_workbook

from rsa_ops.excel_helpers import _cell_text, _find_anchor_exact, _normalize, _row_values
from rsa_ops.models import AssetRecord

LOW_PERFORMANCE_LABEL = "LOW"
PERFORMANCE_HEADER = "Performance label"
HEADER_SEARCH_ROWS = 10

# record field -> report header
REPORT_COLUMNS: dict[str, str] = {
    "campaign": "Campaign",
    "ad_group": "Ad group",
    "ad_label": "Ad label",
    "asset_type": "Asset type",
    "asset_text": "Asset text",
    "performance": PERFORMANCE_HEADER,
}


def _resolve_columns(header: list[Any]) -> dict[str, int]:
    """Map each required field to its 0-based column index in the header row."""
    positions: dict[str, list[int]] = {}
    for idx, value in enumerate(header):
        if isinstance(value, str) and value.strip():
            positions.setdefault(_normalize(value), []).append(idx)

    missing: list[str] = []
    duplicated: list[str] = []
    columns: dict[str, int] = {}
    for field, label in REPORT_COLUMNS.items():
        found = positions.get(_normalize(label), [])
        if not found:
            missing.append(label)
        elif len(found) > 1:
            duplicated.append(label)
        else:
            columns[field] = found[0]

    if missing or duplicated:
        problems = []
        if missing:
            problems.append(f"missing columns: {', '.join(missing)}")
        if duplicated:
            problems.append(f"duplicated columns: {', '.join(duplicated)}")
        raise SystemExit(f"ERROR: report header mismatch ({'; '.join(problems)})")
    return columns


def _find_header_row(ws) -> int:
    anchor = _find_anchor_exact(ws, PERFORMANCE_HEADER, max_row=HEADER_SEARCH_ROWS)
    if anchor is None:
        # let _resolve_columns report what is missing from the first row
        return 1
    return anchor.row


def _is_low(value: Any) -> bool:
    return _cell_text(value) == LOW_PERFORMANCE_LABEL


def read_low_performing_assets(workbook_path: Path, report_sheet: str) -> list[AssetRecord]:
    if not workbook_path.exists():
        raise SystemExit(f"ERROR: workbook not found: {workbook_path}")

    workbook = load_workbook(workbook_path, data_only=True)
    try:
        if report_sheet not in workbook.sheetnames:
            raise SystemExit(f'ERROR: Report sheet "{report_sheet}" not found.')
        ws = workbook[report_sheet]

        header_row = _find_header_row(ws)
        columns = _resolve_columns(_row_values(ws, header_row))

        records: list[AssetRecord] = []
        for row_number, values in enumerate(
            ws.iter_rows(min_row=header_row + 1, values_only=True), start=header_row + 1
        ):
            row = list(values)
            if not row or columns["performance"] >= len(row):
                continue
            if not _is_low(row[columns["performance"]]):
                continue

            def field(name: str) -> str:
                idx = columns[name]
                return _cell_text(row[idx]) if idx < len(row) else ""

            records.append(
                AssetRecord(
                    campaign=field("campaign"),
                    ad_group=field("ad_group"),
                    ad_label=field("ad_label"),
                    asset_type=field("asset_type"),
                    asset_text=field("asset_text"),
                    source_row=row_number,
                )
            )
        return records
    finally:
        workbook.close()
