from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rsa_ops.models import RecordResult, RunConfig


def _safe_write_text(path: Path, content: str) -> None:
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(path)
    except OSError:
        return


def _safe_write_json(path: Path, payload: dict[str, Any]) -> None:
    try:
        content = json.dumps(payload, indent=2, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return
    _safe_write_text(path, content)


def build_run_log(config: RunConfig, results: list[RecordResult]) -> dict[str, Any]:
    return {
        "model": config.model.value,
        "workbook_path": str(config.workbook_path),
        "report_sheet": config.report_sheet,
        "output_sheet": config.output_sheet,
        "records": [
            {
                "source_row": result.record.source_row,
                "asset_type": result.record.asset_type,
                "asset_text": result.record.asset_text,
                "status": result.status,
                "reason": result.reason,
                "alternatives": result.alternatives,
                "raw_content": result.raw_content,
            }
            for result in results
        ],
    }


def write_run_log(config: RunConfig, results: list[RecordResult]) -> None:
    if config.run_log_path is None:
        return
    _safe_write_json(config.run_log_path, build_run_log(config, results))
