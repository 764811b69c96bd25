import csv
from collections.abc import Iterator
import json
import math
from pathlib import Path

from contract_check.consistency import parse_installment_count, payment_consistency, total_amount_valid
from contract_check.currency import format_brl
from contract_check.errors import FieldCoercionError, StreamReadError


IDENTIFIER_FIELD = "nrCpfCnpj"
TOTAL_FIELD = "vlTotal"
INSTALLMENT_COUNT_FIELD = "qtPrestacoes"
INSTALLMENT_FIELD = "vlPresta"
MOVEMENT_FIELD = "vlMovimento"
PAYMENT_FIELD = "vlPag"

REQUIRED_AMOUNT_FIELDS = (
    TOTAL_FIELD,
    INSTALLMENT_FIELD,
    "vlMora",
    "vlMulta",
    "vlOutAcr",
    "vlIof",
    "vlDescon",
    "vlAtual",
)
OPTIONAL_AMOUNT_FIELDS = (MOVEMENT_FIELD, PAYMENT_FIELD)

FORMATTED_SUFFIX = "BRL"
TOTAL_VALID_FIELD = "valorTotalValido"
PAYMENT_CONSISTENCY_FIELD = "consistenciaPagamento"


def read_rows(input_path: Path, *, encoding: str = "utf-8-sig", delimiter: str = ",") -> Iterator[dict[str, str]]:
    try:
        with input_path.open("r", encoding=encoding, newline="") as infile:
            yield from csv.DictReader(infile, delimiter=delimiter)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        raise StreamReadError(f"failed to read CSV file {input_path}: {exc}") from exc


def _to_amount(field: str, raw: object) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise FieldCoercionError(field, raw) from exc
    if not math.isfinite(value):
        raise FieldCoercionError(field, raw)
    return value


def coerce_amounts(record: dict[str, object]) -> dict[str, object]:
    for field in REQUIRED_AMOUNT_FIELDS:
        record[field] = _to_amount(field, record.get(field))

    for field in OPTIONAL_AMOUNT_FIELDS:
        try:
            record[field] = _to_amount(field, record.get(field))
        except FieldCoercionError:
            record[field] = 0.0
    return record


def enrich_record(record: dict[str, object]) -> dict[str, object]:
    """Coerce, format and check one identifier-valid row in place.

    Raises FieldCoercionError when a required amount is not a finite number;
    the record may be partially coerced in that case.
    """
    coerce_amounts(record)

    for field in REQUIRED_AMOUNT_FIELDS:
        record[f"{field}{FORMATTED_SUFFIX}"] = format_brl(record[field])

    record[TOTAL_VALID_FIELD] = total_amount_valid(
        record[TOTAL_FIELD],
        record[INSTALLMENT_FIELD],
        parse_installment_count(record.get(INSTALLMENT_COUNT_FIELD)),
    )
    record[PAYMENT_CONSISTENCY_FIELD] = payment_consistency(record[MOVEMENT_FIELD], record[PAYMENT_FIELD])
    return record


def dump_records(records: list[dict[str, object]]) -> str:
    # Insertion order is part of the output contract, so no sort_keys here.
    return json.dumps(records, indent=2, ensure_ascii=False)


def write_json(path: Path, records: list[dict[str, object]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as outfile:
        outfile.write(dump_records(records))
        outfile.write("\n")
