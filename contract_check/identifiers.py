import re


_NON_DIGITS = re.compile(r"\D")

CPF_LENGTH = 11
CNPJ_LENGTH = 14

# 12345678909 passes the CPF check digits but is a known placeholder.
_CPF_BLACKLIST = frozenset([str(digit) * CPF_LENGTH for digit in range(10)] + ["12345678909"])
_CNPJ_BLACKLIST = frozenset(str(digit) * CNPJ_LENGTH for digit in range(10))


def only_digits(raw: str | None) -> str:
    return _NON_DIGITS.sub("", raw or "")


def _check_digit(total: int) -> int:
    remainder = total % 11
    return 0 if remainder < 2 else 11 - remainder


def _cpf_check_digit(body: str) -> int:
    # Weights run from len(body) + 1 down to 2.
    start = len(body) + 1
    return _check_digit(sum(int(digit) * (start - offset) for offset, digit in enumerate(body)))


def _cnpj_check_digit(body: str) -> int:
    # Weights cycle 2..9 starting from the rightmost digit.
    total = sum(int(digit) * (2 + offset % 8) for offset, digit in enumerate(reversed(body)))
    return _check_digit(total)


def _is_valid_cpf(digits: str) -> bool:
    if len(digits) != CPF_LENGTH or digits in _CPF_BLACKLIST:
        return False

    first = _cpf_check_digit(digits[:9])
    second = _cpf_check_digit(digits[:9] + str(first))
    return digits[9:] == f"{first}{second}"


def _is_valid_cnpj(digits: str) -> bool:
    if len(digits) != CNPJ_LENGTH or digits in _CNPJ_BLACKLIST:
        return False

    first = _cnpj_check_digit(digits[:12])
    second = _cnpj_check_digit(digits[:12] + str(first))
    return digits[12:] == f"{first}{second}"


def is_valid_identifier(raw: str | None) -> bool:
    """Return True when ``raw`` is a valid CPF or CNPJ, ignoring punctuation."""
    digits = only_digits(raw)
    return _is_valid_cpf(digits) or _is_valid_cnpj(digits)


def identifier_kind(raw: str | None) -> str | None:
    digits = only_digits(raw)
    if _is_valid_cpf(digits):
        return "cpf"
    if _is_valid_cnpj(digits):
        return "cnpj"
    return None


def format_identifier(raw: str | None) -> str:
    digits = only_digits(raw)
    kind = identifier_kind(digits)
    if kind == "cpf":
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"
    if kind == "cnpj":
        return f"{digits[:2]}.{digits[2:5]}.{digits[5:8]}/{digits[8:12]}-{digits[12:]}"
    raise ValueError(f"not a valid CPF or CNPJ: {raw!r}")
