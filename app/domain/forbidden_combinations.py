from typing import Optional


FORBIDDEN_IDENTIFIERS = frozenset({"HJ", "KZ", "NS", "SA", "SS"})

FORBIDDEN_PAIRS = frozenset(
    {
        "D-IS",
        "SU-IS",
        "MR-IS",
        "DA-IS",
        "S-A",
        "S-S",
        "S-D",
        "K-Z",
        "S-ED",
        "N-PD",
        "N-SU",
        "N-S",
        "WAF-FE",
        "SK-IN",
        "IZ-AN",
        "HEI-L",
        "SU-FF",
        "R-NS",
        "BUL-LE",
        "MO-RD",
    }
)


def is_forbidden_identifier(identifier: Optional[str]) -> bool:
    if identifier is None:
        return False
    return identifier in FORBIDDEN_IDENTIFIERS


def is_forbidden_pair(pair: Optional[str]) -> bool:
    if pair is None:
        return False
    return pair in FORBIDDEN_PAIRS


def combination_key(distinguisher_code: str, identifier: str) -> str:
    return f"{distinguisher_code}-{identifier}"
