from __future__ import annotations

from typing import Any, Iterable


def _normalize(text: str) -> str:
    return " ".join(text.strip().split()).lower()


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _iter_cells(ws, max_row: int | None = None) -> Iterable[Any]:
    for row in ws.iter_rows(max_row=max_row):
        for cell in row:
            yield cell


def _find_anchor_exact(ws, label: str, max_row: int | None = None) -> Any | None:
    target = _normalize(label)
    for cell in _iter_cells(ws, max_row=max_row):
        if isinstance(cell.value, str) and _normalize(cell.value) == target:
            return cell
    return None


def _row_values(ws, row: int) -> list[Any]:
    for values in ws.iter_rows(min_row=row, max_row=row, values_only=True):
        return list(values)
    return []


def _last_data_row(ws) -> int:
    for row in range(ws.max_row, 0, -1):
        for value in _row_values(ws, row):
            if value is not None and str(value).strip() != "":
                return row
    return 0
