import csv
import logging
from pathlib import Path
from typing import List

from app.domain.distinguisher import Distinguisher
from app.infrastructure.distinguisher_repository import DistinguisherRepository


logger = logging.getLogger(__name__)

_MIN_COLUMNS = 4


def load_distinguishers_from_csv(path: str | Path) -> List[Distinguisher]:
    """Reads ``code,label,deprecated,special`` rows, skipping the header line."""
    distinguishers: List[Distinguisher] = []
    with open(path, "r", encoding="utf-8", newline="") as fh:
        reader = csv.reader(fh)
        next(reader, None)
        for line_number, row in enumerate(reader, start=2):
            if not any(field.strip() for field in row):
                continue
            if len(row) < _MIN_COLUMNS:
                logger.warning("distinguisher_csv_row_skipped path=%s line=%s row=%s", path, line_number, row)
                continue
            distinguishers.append(
                Distinguisher(
                    code=row[0].strip(),
                    label=row[1].strip(),
                    deprecated=_parse_bool(row[2]),
                    special=_parse_bool(row[3]),
                )
            )
    return distinguishers


def seed_distinguishers(repo: DistinguisherRepository, path: str | Path) -> int:
    repo.create_schema()
    distinguishers = load_distinguishers_from_csv(path)
    for distinguisher in distinguishers:
        repo.save(distinguisher)
    repo.db.commit()
    logger.info("distinguishers_seeded path=%s count=%s", path, len(distinguishers))
    return len(distinguishers)


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() == "true"
