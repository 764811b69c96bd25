class ContractCheckError(Exception):
    pass


class FieldCoercionError(ContractCheckError):
    def __init__(self, field: str, value: object) -> None:
        self.field = field
        self.value = value
        super().__init__(f"field '{field}' is not a number: {value!r}")


class StreamReadError(ContractCheckError):
    pass
