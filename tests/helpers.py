HEADER = [
    "nrContrato",
    "nrCpfCnpj",
    "vlTotal",
    "qtPrestacoes",
    "vlPresta",
    "vlMora",
    "vlMulta",
    "vlOutAcr",
    "vlIof",
    "vlDescon",
    "vlAtual",
    "vlMovimento",
    "vlPag",
]

VALID_CPF = "529.982.247-25"
VALID_CNPJ = "11.444.777/0001-61"


def make_row(**overrides: str) -> dict[str, str]:
    row = {
        "nrContrato": "C-1",
        "nrCpfCnpj": VALID_CPF,
        "vlTotal": "300.00",
        "qtPrestacoes": "3",
        "vlPresta": "100.00",
        "vlMora": "1.50",
        "vlMulta": "2.00",
        "vlOutAcr": "0",
        "vlIof": "0.38",
        "vlDescon": "0",
        "vlAtual": "303.88",
        "vlMovimento": "50",
        "vlPag": "100",
    }
    row.update(overrides)
    return row
