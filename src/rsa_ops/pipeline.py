from __future__ import annotations

import time

from rsa_ops.completion_client import CompletionClient, CompletionError
from rsa_ops.io_helpers import write_run_log
from rsa_ops.models import AssetRecord, RecordResult, RunConfig, RunSummary
from rsa_ops.progress import format_seconds, spinner
from rsa_ops.prompts import build_request, max_length_for
from rsa_ops.report_input import read_low_performing_assets
from rsa_ops.result_writer import write_results
from rsa_ops.validator import validate_alternatives

NO_MATCHES_MESSAGE = "No low-performing assets found."
NO_RESULTS_MESSAGE = "No alternatives generated. Please check the logs for details."


def _short(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


def process_record(
    record: AssetRecord, config: RunConfig, client: CompletionClient
) -> RecordResult:
    max_length = max_length_for(record.asset_type)
    request = build_request(
        record,
        config.model,
        max_tokens=config.max_tokens,
        temperature=config.temperature,
    )
    try:
        content = client.complete(request)
    except CompletionError as err:
        return RecordResult(record=record, status="failed", reason=str(err))

    validation = validate_alternatives(content, max_length)
    if not validation.accepted:
        return RecordResult(
            record=record,
            status="rejected",
            reason=validation.reason,
            raw_content=content,
        )
    return RecordResult(
        record=record,
        status="accepted",
        alternatives=validation.alternatives,
        raw_content=content,
    )


def run_pipeline(config: RunConfig, client: CompletionClient | None = None) -> RunSummary:
    t0 = time.perf_counter()

    records = read_low_performing_assets(config.workbook_path, config.report_sheet)
    if not records:
        print(NO_MATCHES_MESSAGE)
        return RunSummary(status="no_matches", message=NO_MATCHES_MESSAGE)

    if client is None:
        client = CompletionClient(config.api_key, base_url=config.base_url)

    total = len(records)
    print(f"Found {total} low-performing assets. Model: {config.model.value}")
    results: list[RecordResult] = []
    for idx, record in enumerate(records, start=1):
        label = f"[{idx}/{total}] {record.asset_type or 'Asset'}: {_short(record.asset_text)}"
        with spinner(label):
            result = process_record(record, config, client)
        results.append(result)
        if result.accepted:
            print(f"{label} -> ok")
        elif result.status == "rejected":
            print(f"{label} -> skipped ({result.reason})")
        else:
            print(f"{label} -> error processing asset (row {record.source_row}): {result.reason}")

    write_run_log(config, results)

    rows = [result.output_row() for result in results if result.accepted]
    if not rows:
        print(NO_RESULTS_MESSAGE)
        return RunSummary(status="no_results", results=results, message=NO_RESULTS_MESSAGE)

    written = write_results(config.workbook_path, config.output_sheet, rows)
    message = f"Processing complete! Processed {written} assets."
    print(f"{message} ({format_seconds(time.perf_counter() - t0)})")
    return RunSummary(status="completed", results=results, rows_written=written, message=message)
