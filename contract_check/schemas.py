from dataclasses import dataclass, field


@dataclass(frozen=True)
class InvalidRecord:
    record_index: int
    record: dict[str, object]
    reason: str


@dataclass(frozen=True)
class PipelineResult:
    input_path: str
    total_records: int
    records: list[dict[str, object]] = field(default_factory=list)
    rejected: list[InvalidRecord] = field(default_factory=list)

    @property
    def valid_records(self) -> int:
        return len(self.records)

    @property
    def invalid_records(self) -> int:
        return len(self.rejected)
