import argparse
import logging
from pathlib import Path

from contract_check.config import get_settings
from contract_check.errors import StreamReadError
from contract_check.identifiers import format_identifier, identifier_kind
from contract_check.pipeline import PipelineRunner
from contract_check.step_logic import dump_records, write_json


logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate and enrich loan contract records")
    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="process one CSV file")
    run_parser.add_argument("--input", required=False, help="CSV file to process (defaults to INPUT_PATH)")
    run_parser.add_argument("--output", required=False, help="also write the valid contracts as JSON to this path")

    check_parser = subparsers.add_parser("check-id", help="validate a single CPF or CNPJ")
    check_parser.add_argument("identifier", help="CPF or CNPJ, with or without punctuation")

    return parser.parse_args()


def main() -> None:
    args = parse_args()
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    if args.command == "check-id":
        kind = identifier_kind(args.identifier)
        if kind is None:
            print("invalid")
            raise SystemExit(1)
        print(f"valid {kind} {format_identifier(args.identifier)}")
        return

    runner = PipelineRunner(settings)
    try:
        result = runner.run(input_path=args.input)
    except StreamReadError as exc:
        logger.error("%s", exc)
        raise SystemExit(1)

    print("CSV file processed successfully")
    print("Valid contracts:")
    print(dump_records(result.records))

    if args.output:
        write_json(Path(args.output), result.records)


if __name__ == "__main__":
    main()
