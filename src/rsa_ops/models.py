from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
DEFAULT_REPORT_SHEET = "Report"
DEFAULT_OUTPUT_SHEET = "New Assets"


class GroqModel(str, Enum):
    DISTIL_WHISPER_LARGE_V3_EN = "distil-whisper-large-v3-en"
    GEMMA2_9B_IT = "gemma2-9b-it"
    GEMMA_7B_IT = "gemma-7b-it"
    LLAMA3_GROQ_70B_TOOL_USE = "llama3-groq-70b-8192-tool-use-preview"
    LLAMA3_GROQ_8B_TOOL_USE = "llama3-groq-8b-8192-tool-use-preview"
    LLAMA_31_70B_VERSATILE = "llama-3.1-70b-versatile"
    LLAMA_31_70B_SPECDEC = "llama-3.1-70b-specdec"
    LLAMA_31_8B_INSTANT = "llama-3.1-8b-instant"
    LLAMA_32_1B_PREVIEW = "llama-3.2-1b-preview"
    LLAMA_32_3B_PREVIEW = "llama-3.2-3b-preview"
    LLAMA_32_11B_VISION = "llama-3.2-11b-vision-preview"
    LLAMA_32_90B_VISION = "llama-3.2-90b-vision-preview"
    LLAMA_GUARD_3_8B = "llama-guard-3-8b"
    LLAMA3_70B_8192 = "llama3-70b-8192"
    LLAMA3_8B_8192 = "llama3-8b-8192"
    MIXTRAL_8X7B_32768 = "mixtral-8x7b-32768"
    WHISPER_LARGE_V3 = "whisper-large-v3"
    WHISPER_LARGE_V3_TURBO = "whisper-large-v3-turbo"


class AssetRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    campaign: str = Field(default="")
    ad_group: str = Field(default="")
    ad_label: str = Field(default="")
    asset_type: str = Field(default="")
    asset_text: str = Field(default="")
    source_row: int = Field(default=0, ge=0)


class RecordResult(BaseModel):
    record: AssetRecord
    status: Literal["accepted", "rejected", "failed"]
    alternatives: list[str] = Field(default_factory=list)
    reason: str | None = None
    raw_content: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status == "accepted"

    def output_row(self) -> list[str]:
        if not self.accepted:
            raise ValueError(f"record is {self.status}, not accepted")
        rec = self.record
        return [
            rec.campaign,
            rec.ad_group,
            rec.ad_label,
            rec.asset_type,
            rec.asset_text,
            *self.alternatives[:3],
        ]


class RunConfig(BaseModel):
    api_key: str = Field(min_length=1)
    model: GroqModel
    workbook_path: Path
    report_sheet: str = Field(default=DEFAULT_REPORT_SHEET, min_length=1)
    output_sheet: str = Field(default=DEFAULT_OUTPUT_SHEET, min_length=1)
    base_url: str = Field(default=GROQ_BASE_URL)
    max_tokens: int = Field(default=150, gt=0)
    temperature: float = Field(default=0.7, ge=0, le=2)
    run_log_path: Path | None = None


class RunSummary(BaseModel):
    status: Literal["completed", "no_matches", "no_results"]
    results: list[RecordResult] = Field(default_factory=list)
    rows_written: int = 0
    message: str = ""

    @property
    def accepted(self) -> list[RecordResult]:
        return [r for r in self.results if r.accepted]

    @property
    def skipped(self) -> list[RecordResult]:
        return [r for r in self.results if not r.accepted]
