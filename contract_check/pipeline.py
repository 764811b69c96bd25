import logging
from pathlib import Path

from contract_check.config import Settings
from contract_check.errors import FieldCoercionError
from contract_check.identifiers import is_valid_identifier
from contract_check.schemas import InvalidRecord, PipelineResult
from contract_check.step_logic import IDENTIFIER_FIELD, enrich_record, read_rows


logger = logging.getLogger(__name__)

INVALID_IDENTIFIER_REASON = "invalid identifier"


class PipelineRunner:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def run(self, *, input_path: str | Path | None = None) -> PipelineResult:
        """Validate and enrich every row of the CSV at ``input_path``.

        Rows are handled one at a time in file order. Row failures are
        collected as rejections; StreamReadError from the reader propagates.
        """
        path = Path(input_path or self.settings.input_path)

        total_records = 0
        records: list[dict[str, object]] = []
        rejected: list[InvalidRecord] = []

        rows = read_rows(path, encoding=self.settings.csv_encoding, delimiter=self.settings.csv_delimiter)
        for record_index, row in enumerate(rows):
            total_records += 1
            raw = dict(row)

            if not is_valid_identifier(row.get(IDENTIFIER_FIELD)):
                rejected.append(InvalidRecord(record_index, raw, INVALID_IDENTIFIER_REASON))
                self._log_invalid_identifier(record_index)
                continue

            try:
                records.append(enrich_record(row))
            except FieldCoercionError as exc:
                rejected.append(InvalidRecord(record_index, raw, str(exc)))
                logger.error(
                    "failed to process row %d: %s",
                    record_index,
                    exc,
                    extra={"record_index": record_index, "field": exc.field},
                )

        logger.info(
            "%s processed %s: total=%d valid=%d rejected=%d",
            self.settings.app_name,
            path,
            total_records,
            len(records),
            len(rejected),
        )
        return PipelineResult(
            input_path=str(path),
            total_records=total_records,
            records=records,
            rejected=rejected,
        )

    def _log_invalid_identifier(self, record_index: int) -> None:
        level = logging.WARNING if self.settings.log_invalid_identifiers else logging.DEBUG
        logger.log(level, "row %d dropped: %s", record_index, INVALID_IDENTIFIER_REASON, extra={"record_index": record_index})
