from dataclasses import dataclass
import os

from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    app_name: str
    log_level: str
    input_path: str
    csv_encoding: str
    csv_delimiter: str
    log_invalid_identifiers: bool


def get_settings() -> Settings:
    return Settings(
        app_name=os.getenv("APP_NAME", "contract-check"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        input_path=os.getenv("INPUT_PATH", "data.csv"),
        csv_encoding=os.getenv("CSV_ENCODING", "utf-8-sig"),
        csv_delimiter=os.getenv("CSV_DELIMITER", ","),
        log_invalid_identifiers=_env_flag("LOG_INVALID_IDENTIFIERS"),
    )
