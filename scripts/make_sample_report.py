from __future__ import annotations

import sys
from pathlib import Path

from openpyxl import Workbook

REPORT_HEADER = [
    "Campaign",
    "Ad group",
    "Ad label",
    "Status",
    "Ad strength",
    "Asset ID",
    "Asset type",
    "Asset text",
    "Performance label",
]

SAMPLE_ROWS = [
    ["Brand - Shoes", "Running", "RSA 1", "Enabled", "Good", 1001, "Headline", "Buy Running Shoes", "LOW"],
    ["Brand - Shoes", "Running", "RSA 1", "Enabled", "Good", 1002, "Headline", "Free Returns", "GOOD"],
    ["Brand - Shoes", "Running", "RSA 1", "Enabled", "Good", 1003, "Description", "Shop the latest running shoes with free delivery and 30-day returns.", "LOW"],
    ["Generic - Shoes", "Trail", "RSA 2", "Enabled", "Average", 2001, "Headline", "Trail Shoes On Sale", "BEST"],
    ["Generic - Shoes", "Trail", "RSA 2", "Enabled", "Average", 2002, "Headline", "Zapatillas de trail", "LOW"],
    ["Generic - Shoes", "Trail", "RSA 2", "Enabled", "Average", 2003, "Description", "Grip and comfort for every trail. Order today.", "LEARNING"],
]


def build_sample_report(path: Path, sheet_name: str = "Report") -> Path:
    workbook = Workbook()
    ws = workbook.active
    ws.title = sheet_name
    ws.append(REPORT_HEADER)
    for row in SAMPLE_ROWS:
        ws.append(row)
    path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(path)
    return path


def main() -> int:
    out_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("out") / "sample_report.xlsx"
    if out_path.suffix.lower() != ".xlsx":
        print(f"Expected an .xlsx path, got: {out_path}", file=sys.stderr)
        return 2
    build_sample_report(out_path)
    print(f"Wrote: {out_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
