from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import ValidationError

from rsa_ops.config import (
    get_api_key,
    get_base_url,
    get_output_sheet,
    get_report_sheet,
    get_run_log_path,
    get_workbook_path,
)
from rsa_ops.model_select import INVALID_MODEL_MESSAGE, available_models, parse_model, prompt_model
from rsa_ops.models import RunConfig
from rsa_ops.pipeline import run_pipeline


def build_config(args: argparse.Namespace) -> RunConfig:
    api_key = get_api_key()
    if not api_key:
        raise SystemExit(
            "ERROR: Groq API key not found. Please set GROQ_API_KEY in the environment or .env file."
        )

    workbook = args.workbook or get_workbook_path()
    if not workbook:
        raise SystemExit(
            "ERROR: workbook path is not set. Use --workbook or set RSA_WORKBOOK_PATH."
        )

    if args.model:
        model = parse_model(args.model)
        if model is None:
            print(INVALID_MODEL_MESSAGE)
            raise SystemExit(2)
    else:
        model = prompt_model()

    try:
        return RunConfig(
            api_key=api_key,
            model=model,
            workbook_path=Path(workbook),
            report_sheet=args.report_sheet or get_report_sheet(),
            output_sheet=args.output_sheet or get_output_sheet(),
            base_url=get_base_url(),
            run_log_path=Path(args.run_log) if args.run_log else get_run_log_path(),
        )
    except ValidationError as e:
        print("\nConfiguration error:\n")
        print(e)
        raise SystemExit(1)


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True), override=False)

    parser = argparse.ArgumentParser(prog="rsa-ops")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser(
        "generate-alternatives", help="Generate alternative assets for LOW performers"
    )
    gen_parser.add_argument(
        "--model",
        default=None,
        help="Groq model ID (default: prompt interactively)",
    )
    gen_parser.add_argument(
        "--workbook",
        default=None,
        help="Path to the .xlsx workbook (default: RSA_WORKBOOK_PATH env)",
    )
    gen_parser.add_argument(
        "--report-sheet",
        default=None,
        help="Sheet holding the asset report (default: RSA_REPORT_SHEET env or 'Report')",
    )
    gen_parser.add_argument(
        "--output-sheet",
        default=None,
        help="Sheet receiving alternatives (default: RSA_OUTPUT_SHEET env or 'New Assets')",
    )
    gen_parser.add_argument(
        "--run-log",
        default=None,
        help="Write a JSON log of every processed record to this path",
    )
    subparsers.add_parser("list-models", help="List the allowed Groq model IDs")

    args = parser.parse_args(argv)

    if args.command == "list-models":
        for name in available_models():
            print(name)
        return 0

    if args.command == "generate-alternatives":
        config = build_config(args)
        run_pipeline(config)
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
