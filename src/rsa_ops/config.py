from __future__ import annotations

import os
from pathlib import Path

from rsa_ops.models import DEFAULT_OUTPUT_SHEET, DEFAULT_REPORT_SHEET, GROQ_BASE_URL

API_KEY_ENV = "GROQ_API_KEY"
BASE_URL_ENV = "GROQ_BASE_URL"
WORKBOOK_PATH_ENV = "RSA_WORKBOOK_PATH"
REPORT_SHEET_ENV = "RSA_REPORT_SHEET"
OUTPUT_SHEET_ENV = "RSA_OUTPUT_SHEET"
RUN_LOG_PATH_ENV = "RSA_RUN_LOG_PATH"


def _get_env_str(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    return value


def _get_env_path(name: str) -> Path | None:
    value = _get_env_str(name)
    if value is None:
        return None
    return Path(value)


def get_api_key() -> str | None:
    return _get_env_str(API_KEY_ENV)


def get_base_url() -> str:
    return _get_env_str(BASE_URL_ENV) or GROQ_BASE_URL


def get_workbook_path() -> Path | None:
    return _get_env_path(WORKBOOK_PATH_ENV)


def get_report_sheet() -> str:
    return _get_env_str(REPORT_SHEET_ENV) or DEFAULT_REPORT_SHEET


def get_output_sheet() -> str:
    return _get_env_str(OUTPUT_SHEET_ENV) or DEFAULT_OUTPUT_SHEET


def get_run_log_path() -> Path | None:
    return _get_env_path(RUN_LOG_PATH_ENV)
