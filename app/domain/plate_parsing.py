import re
from typing import List, NamedTuple, Optional

from app.domain.distinguisher import Distinguisher, DistinguisherLookup
from app.domain.errors import InvalidLicencePlateError


_ALLOWED_CHARACTERS_RE = re.compile(r"[A-Z0-9\- ]+")
_ALPHANUMERIC_RE = re.compile(r"[A-Z0-9]+")
_DISTINGUISHER_CODE_RE = re.compile(r"[A-Z]{1,3}")

MAX_DISTINGUISHER_CODE_LENGTH = 3
SEPARATORS = ("-", " ")
VALID_MODIFIERS = frozenset({"H", "E"})


class DistinguisherCandidate(NamedTuple):
    distinguisher: Distinguisher
    remainder: str


class ModifierExtractionResult(NamedTuple):
    remaining: str
    modifier: str


def normalize(raw: Optional[str]) -> str:
    if raw is None or not raw.strip():
        raise InvalidLicencePlateError("Kennzeichen darf nicht leer sein")

    normalized = raw.upper().strip()
    if not _ALLOWED_CHARACTERS_RE.fullmatch(normalized):
        raise InvalidLicencePlateError(
            "Nur Buchstaben A-Z, Ziffern 0-9 sowie '-' und Leerzeichen erlaubt"
        )
    return normalized


def contains_separators(text: str) -> bool:
    return any(sep in text for sep in SEPARATORS)


def strip_separators(text: str) -> str:
    for sep in SEPARATORS:
        text = text.replace(sep, "")
    return text


def resolve_distinguishers(normalized: str, lookup: DistinguisherLookup) -> List[DistinguisherCandidate]:
    """Returns every distinguisher interpretation of ``normalized``.

    An explicit separator pins the distinguisher to the text before it, so that
    path yields exactly one candidate. Without separators every registered
    prefix of length 1..3 is returned; the caller decides whether more than one
    of them forms a valid plate.
    """
    if not _ALPHANUMERIC_RE.fullmatch(strip_separators(normalized)):
        raise InvalidLicencePlateError("Nur Buchstaben A-Z und Ziffern 0-9 erlaubt")

    if contains_separators(normalized):
        return [_resolve_by_separator(normalized, lookup)]
    return _resolve_by_prefix(normalized, lookup)


def extract_trailing_modifier(text: str) -> ModifierExtractionResult:
    if text and text[-1] in VALID_MODIFIERS:
        return ModifierExtractionResult(text[:-1].strip(), text[-1])
    return ModifierExtractionResult(text.strip(), "")


def _resolve_by_separator(normalized: str, lookup: DistinguisherLookup) -> DistinguisherCandidate:
    separator_index = _first_separator_index(normalized)
    code = normalized[:separator_index].strip()
    if not _DISTINGUISHER_CODE_RE.fullmatch(code):
        raise InvalidLicencePlateError(f"Unterscheidungszeichen '{code}' hat ein ungueltiges Format")

    distinguisher = lookup.find_by_code(code)
    if distinguisher is None:
        raise InvalidLicencePlateError(f"Unbekanntes Unterscheidungszeichen '{code}'")

    remainder = normalized[separator_index + 1 :].lstrip("".join(SEPARATORS))
    return DistinguisherCandidate(distinguisher, remainder)


def _resolve_by_prefix(normalized: str, lookup: DistinguisherLookup) -> List[DistinguisherCandidate]:
    candidates = []
    max_length = min(MAX_DISTINGUISHER_CODE_LENGTH, len(normalized))
    for length in range(1, max_length + 1):
        distinguisher = lookup.find_by_code(normalized[:length])
        if distinguisher is not None:
            candidates.append(DistinguisherCandidate(distinguisher, normalized[length:]))

    if not candidates:
        raise InvalidLicencePlateError("Unbekanntes Unterscheidungszeichen")
    return candidates


def _first_separator_index(text: str) -> int:
    positions = [text.find(sep) for sep in SEPARATORS if sep in text]
    return min(positions)
