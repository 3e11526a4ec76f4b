"""Command-line interface for sheetschema."""

import argparse
import asyncio
import logging
import sys

from .config import SpreadsheetConfig, settings


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="sheetschema - infer field schemas from Google Sheets header rows"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Infer command
    infer_parser = subparsers.add_parser("infer", help="Infer a schema from a header row")
    _add_spreadsheet_arguments(infer_parser)
    infer_parser.add_argument("--sheet", required=True, help="Sheet (tab) name")
    infer_parser.add_argument(
        "--header",
        dest="headers",
        action="append",
        required=True,
        help="Header label, repeat in left-to-right order",
    )
    infer_parser.add_argument("--lang", help="Source language of the headers (e.g. ja)")
    infer_parser.add_argument(
        "--start-cell", help="Cell of the first header (e.g. A3); scans A1:Z100 if omitted"
    )

    # Sheets command
    sheets_parser = subparsers.add_parser("sheets", help="List the sheets of a spreadsheet")
    _add_spreadsheet_arguments(sheets_parser)

    args = parser.parse_args()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "infer":
        sys.exit(asyncio.run(run_infer(args)))
    elif args.command == "sheets":
        sys.exit(asyncio.run(run_sheets(args)))
    else:
        parser.print_help()
        sys.exit(1)


def _add_spreadsheet_arguments(parser: argparse.ArgumentParser):
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--spreadsheet", "-s", help="Spreadsheet ID")
    group.add_argument(
        "--spreadsheet-type",
        type=int,
        help="Numbered spreadsheet slot (APP_SPREADSHEET_ID_{N}_DEV/PROD)",
    )


def resolve_spreadsheet_id(args: argparse.Namespace) -> str:
    """Use --spreadsheet, or look up --spreadsheet-type in the environment config."""
    if args.spreadsheet:
        return args.spreadsheet
    config = SpreadsheetConfig.from_env(production=settings.is_production)
    return config.get_spreadsheet_id(args.spreadsheet_type)


async def run_infer(args: argparse.Namespace) -> int:
    """Run schema inference and print the result."""
    from .errors import SheetSchemaError
    from .inference import InferSchemaRequest, SchemaInferenceEngine

    try:
        spreadsheet_id = resolve_spreadsheet_id(args)
    except SheetSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = SchemaInferenceEngine(settings=settings)
    result = await engine.infer(
        InferSchemaRequest(
            spreadsheet_id=spreadsheet_id,
            sheet_name=args.sheet,
            headers=args.headers,
            lang=args.lang,
            header_start_cell=args.start_cell,
        )
    )
    print(result.text, file=sys.stderr if result.is_error else sys.stdout)
    return 1 if result.is_error else 0


async def run_sheets(args: argparse.Namespace) -> int:
    """List sheet titles and IDs."""
    from .errors import SheetSchemaError
    from .sheets import GoogleSheetsClient

    try:
        spreadsheet_id = resolve_spreadsheet_id(args)
        info = await GoogleSheetsClient(settings=settings).fetch_spreadsheet_info(spreadsheet_id)
    except SheetSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"{info.title or spreadsheet_id}")
    for sheet in info.sheets:
        print(f"  {sheet.sheet_id}\t{sheet.title}")
    return 0


if __name__ == "__main__":
    main()
