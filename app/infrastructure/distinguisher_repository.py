from sqlalchemy import text

from app.domain.distinguisher import Distinguisher


class DistinguisherRepository:
    def __init__(self, db):
        self.db = db

    def create_schema(self) -> None:
        self.db.execute(
            text(
                """
                CREATE TABLE IF NOT EXISTS distinguisher (
                    code VARCHAR(3) PRIMARY KEY,
                    label VARCHAR(255) NOT NULL,
                    deprecated BOOLEAN NOT NULL DEFAULT FALSE,
                    special BOOLEAN NOT NULL DEFAULT FALSE
                )
                """
            )
        )

    def find_by_code(self, code: str) -> Distinguisher | None:
        row = self.db.execute(
            text(
                """
                SELECT code, label, deprecated, special
                FROM distinguisher
                WHERE code = :code
                """
            ),
            {"code": code},
        ).mappings().one_or_none()

        return _to_distinguisher(row) if row else None

    def find_by_code_and_deprecated(self, code: str, deprecated: bool) -> Distinguisher | None:
        row = self.db.execute(
            text(
                """
                SELECT code, label, deprecated, special
                FROM distinguisher
                WHERE code = :code
                  AND deprecated = :deprecated
                """
            ),
            {"code": code, "deprecated": deprecated},
        ).mappings().one_or_none()

        return _to_distinguisher(row) if row else None

    def find_by_code_and_deprecated_and_special(
        self,
        code: str,
        deprecated: bool,
        special: bool,
    ) -> Distinguisher | None:
        row = self.db.execute(
            text(
                """
                SELECT code, label, deprecated, special
                FROM distinguisher
                WHERE code = :code
                  AND deprecated = :deprecated
                  AND special = :special
                """
            ),
            {"code": code, "deprecated": deprecated, "special": special},
        ).mappings().one_or_none()

        return _to_distinguisher(row) if row else None

    def save(self, distinguisher: Distinguisher) -> None:
        self.db.execute(
            text(
                """
                INSERT INTO distinguisher (code, label, deprecated, special)
                VALUES (:code, :label, :deprecated, :special)
                ON CONFLICT (code) DO UPDATE
                SET label = excluded.label,
                    deprecated = excluded.deprecated,
                    special = excluded.special
                """
            ),
            {
                "code": distinguisher.code,
                "label": distinguisher.label,
                "deprecated": distinguisher.deprecated,
                "special": distinguisher.special,
            },
        )

    def count(self) -> int:
        row = self.db.execute(text("SELECT COUNT(*) AS total FROM distinguisher")).mappings().one()
        return int(row["total"])


def _to_distinguisher(row) -> Distinguisher:
    return Distinguisher(
        code=row["code"],
        label=row["label"],
        deprecated=bool(row["deprecated"]),
        special=bool(row["special"]),
    )
