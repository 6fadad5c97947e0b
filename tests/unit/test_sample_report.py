from __future__ import annotations

from pathlib import Path

from make_sample_report import build_sample_report
from rsa_ops.report_input import read_low_performing_assets


def test_sample_report_has_three_low_assets(tmp_path: Path) -> None:
    path = build_sample_report(tmp_path / "sample.xlsx")

    records = read_low_performing_assets(path, "Report")

    assert [r.source_row for r in records] == [2, 4, 6]
    assert [r.asset_type for r in records] == ["Headline", "Description", "Headline"]
    assert records[2].asset_text == "Zapatillas de trail"
