import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


load_dotenv()

DEFAULT_DISTINGUISHER_CSV_PATH = Path(__file__).resolve().parent / "resources" / "kennzeichen.csv"


@dataclass
class Settings:
    log_level: str
    database_url: str
    distinguisher_csv_path: Path
    seed_distinguishers: bool

    @staticmethod
    def from_env() -> "Settings":
        def _get_env(name: str) -> str | None:
            value = os.getenv(name)
            return value.strip() if value else None

        return Settings(
            log_level=(_get_env("LOG_LEVEL") or "INFO").upper(),
            database_url=_get_env("DATABASE_URL") or "sqlite://",
            distinguisher_csv_path=Path(_get_env("DISTINGUISHER_CSV_PATH") or DEFAULT_DISTINGUISHER_CSV_PATH),
            seed_distinguishers=(_get_env("SEED_DISTINGUISHERS") or "true").lower() in {"1", "true", "yes", "on"},
        )


settings = Settings.from_env()
