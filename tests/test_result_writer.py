from __future__ import annotations

from pathlib import Path

from openpyxl import Workbook, load_workbook

from rsa_ops.result_writer import OUTPUT_HEADER, header_matches, write_results

ROW = ["Brand", "AG 1", "Label A", "Headline", "Buy now", "Act now", "Shop today", "Get yours"]


def _values(path: Path, sheet: str) -> list[list]:
    ws = load_workbook(path)[sheet]
    return [list(r) for r in ws.iter_rows(values_only=True)]


def _new_workbook(path: Path) -> None:
    workbook = Workbook()
    workbook.active.title = "Report"
    workbook.save(path)


def test_creates_sheet_with_styled_header(tmp_path: Path) -> None:
    path = tmp_path / "book.xlsx"
    _new_workbook(path)

    assert write_results(path, "New Assets", [ROW]) == 1

    workbook = load_workbook(path)
    ws = workbook["New Assets"]
    assert [c.value for c in ws[1]] == OUTPUT_HEADER
    assert ws["A1"].font.bold
    assert ws["A1"].fill.fgColor.rgb.endswith("E8EAED")
    assert [c.value for c in ws[2]] == ROW
    assert "Report" in workbook.sheetnames


def test_correct_header_keeps_existing_rows(tmp_path: Path) -> None:
    path = tmp_path / "book.xlsx"
    _new_workbook(path)
    write_results(path, "New Assets", [ROW])

    second = ["Generic", "AG 2", "Label B", "Description", "Old", "A", "B", "C"]
    write_results(path, "New Assets", [second])

    assert _values(path, "New Assets") == [OUTPUT_HEADER, ROW, second]


def test_wrong_header_clears_sheet(tmp_path: Path) -> None:
    path = tmp_path / "book.xlsx"
    workbook = Workbook()
    ws = workbook.active
    ws.title = "New Assets"
    ws.append(["Campaign", "Ad group", "Something else"])
    ws.append(["stale", "data", "row"])
    workbook.save(path)

    write_results(path, "New Assets", [ROW])

    assert _values(path, "New Assets") == [OUTPUT_HEADER, ROW]


def test_header_matches_compares_by_position() -> None:
    assert header_matches(OUTPUT_HEADER)
    assert header_matches(OUTPUT_HEADER + ["Notes"])
    assert not header_matches(list(reversed(OUTPUT_HEADER)))
    assert not header_matches(OUTPUT_HEADER[:7])
    assert not header_matches([])
