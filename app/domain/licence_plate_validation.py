import logging
from typing import List, Optional

from app.domain.distinguisher import Distinguisher, DistinguisherLookup
from app.domain.errors import AmbiguousLicencePlateError, InvalidLicencePlateError
from app.domain.forbidden_combinations import combination_key, is_forbidden_identifier, is_forbidden_pair
from app.domain.licence_plate import LicencePlate
from app.domain.plate_parsing import (
    extract_trailing_modifier,
    normalize,
    resolve_distinguishers,
    strip_separators,
)
from app.domain.plate_validators import validate_plate


logger = logging.getLogger(__name__)


class LicencePlateValidationService:
    """Parses free-form plate text into exactly one ``LicencePlate``.

    Input without separators may split into several distinguisher/remainder
    pairs. All of them are validated, and the input is rejected as ambiguous
    when more than one survives: German registrations exist that are lexically
    identical under different splits (``LIT433`` is both ``L-IT433`` and
    ``LI-T433``), so there is no safe preference order.
    """

    def __init__(self, lookup: DistinguisherLookup):
        self.lookup = lookup

    def validate_licence_plate(self, text: Optional[str]) -> LicencePlate:
        normalized = normalize(text)
        candidates = resolve_distinguishers(normalized, self.lookup)

        parsings: List[LicencePlate] = []
        for candidate in candidates:
            plate = self._parse_remaining_part(candidate.distinguisher, candidate.remainder)
            logger.debug(
                "licence_plate_candidate input=%s distinguisher=%s remainder=%s valid=%s",
                normalized,
                candidate.distinguisher.code,
                candidate.remainder,
                plate is not None,
            )
            if plate is not None:
                parsings.append(plate)

        plate = self._select_unique_parsing(normalized, parsings)
        logger.info("licence_plate_validated input=%s plate=%s category=%s", normalized, plate, plate.category.value)
        return plate

    @staticmethod
    def _parse_remaining_part(distinguisher: Distinguisher, remainder: str) -> Optional[LicencePlate]:
        cleaned, modifier = extract_trailing_modifier(strip_separators(remainder))
        return validate_plate(distinguisher, cleaned, modifier)

    @staticmethod
    def _select_unique_parsing(normalized: str, parsings: List[LicencePlate]) -> LicencePlate:
        if not parsings:
            logger.info("licence_plate_rejected input=%s reason=no_valid_parsing", normalized)
            raise InvalidLicencePlateError("Ungueltiges Kennzeichen")
        if len(parsings) > 1:
            logger.info(
                "licence_plate_rejected input=%s reason=ambiguous parsings=%s",
                normalized,
                [plate.render() for plate in parsings],
            )
            raise AmbiguousLicencePlateError("Kennzeichen mehrdeutig")

        plate = parsings[0]
        code = plate.distinguisher.code
        if is_forbidden_identifier(plate.identifier):
            raise InvalidLicencePlateError(
                f"Unzulaessige Buchstabenkombination '{plate.identifier}' fuer Unterscheidungszeichen '{code}'"
            )
        key = combination_key(code, plate.identifier)
        if is_forbidden_pair(key):
            raise InvalidLicencePlateError(f"Unzulaessige Kombination '{key}'")
        return plate
