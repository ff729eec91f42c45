"""Structural validators, one per plate category.

Every validator takes the distinguisher, the separator-free remainder and the
extracted modifier and returns a ``LicencePlate`` or ``None`` when the
remainder does not form a plate of that category. ``None`` is ordinary control
flow: the orchestrator tries several distinguisher candidates and only reports
an error once all of them failed.
"""
import re
from typing import Callable, Dict, NamedTuple, Optional, Tuple

from app.domain.distinguisher import Distinguisher
from app.domain.licence_plate import FederalPoliceVehicleType, LicencePlate, PlateCategory


PlateValidator = Callable[[Distinguisher, str, str], Optional[LicencePlate]]

_DIGITS_RE = re.compile(r"[0-9]+")
_UP_TO_SIX_DIGITS_RE = re.compile(r"[0-9]{1,6}")
_FOUR_DIGITS_RE = re.compile(r"[0-9]{4}")

MAX_CIVILIAN_TOTAL_LENGTH = 8
MAX_IDENTIFIER_LENGTH = 2
MAX_CIVILIAN_NUMBER_LENGTH = 4
MAX_RED_PLATE_TOTAL_LENGTH = 8
RED_PLATE_PREFIXES = ("05", "06", "07")
FORBIDDEN_UMLAUTS = frozenset({"Ä", "Ö", "Ü"})

# BP-0600..BP-0699 and THW-0600..THW-0699
RED_TEST_DRIVE_MIN = 600
RED_TEST_DRIVE_MAX = 699


class _VehicleTypeRange(NamedTuple):
    low: int
    high: int
    vehicle_type: FederalPoliceVehicleType


_FEDERAL_POLICE_RANGES = (
    _VehicleTypeRange(10, 12, FederalPoliceVehicleType.MOTORCYCLES),
    _VehicleTypeRange(15, 19, FederalPoliceVehicleType.PASSENGER_CARS),
    _VehicleTypeRange(20, 24, FederalPoliceVehicleType.OFFROAD_PASSENGER_CARS),
    _VehicleTypeRange(25, 29, FederalPoliceVehicleType.LIGHT_TRUCKS),
    _VehicleTypeRange(30, 34, FederalPoliceVehicleType.OFFROAD_LIGHT),
    _VehicleTypeRange(35, 39, FederalPoliceVehicleType.TRUCKS_UP_TO_6T),
    _VehicleTypeRange(40, 44, FederalPoliceVehicleType.OFFROAD_TRUCKS_UP_TO_6T),
    _VehicleTypeRange(45, 49, FederalPoliceVehicleType.HEAVY_TRUCKS_BUSES),
    _VehicleTypeRange(50, 54, FederalPoliceVehicleType.ARMORED_VEHICLES),
    _VehicleTypeRange(55, 59, FederalPoliceVehicleType.TRAILERS),
    _VehicleTypeRange(60, 61, FederalPoliceVehicleType.ELECTRIC_VEHICLES),
)

_SPECIAL_CATEGORIES = {
    "Y": PlateCategory.BUNDESWEHR,
    "X": PlateCategory.NATO,
    "BP": PlateCategory.FEDERAL_POLICE,
    "THW": PlateCategory.THW,
}


def category_for(distinguisher: Distinguisher) -> PlateCategory:
    if not distinguisher.special:
        return PlateCategory.CIVILIAN
    return _SPECIAL_CATEGORIES.get(distinguisher.code, PlateCategory.GENERIC_SPECIAL)


def validate_plate(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    validator = _VALIDATORS[category_for(distinguisher)]
    return validator(distinguisher, remainder, modifier)


def validate_civilian(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    if not remainder:
        return None

    identifier, number = _split_identifier(remainder)
    if not identifier:
        return validate_red_plate(distinguisher, number, modifier)

    if not _DIGITS_RE.fullmatch(number) or len(number) > MAX_CIVILIAN_NUMBER_LENGTH:
        return None

    total_length = len(distinguisher.code) + len(identifier) + len(number) + len(modifier)
    if total_length > MAX_CIVILIAN_TOTAL_LENGTH:
        return None

    return LicencePlate(
        distinguisher=distinguisher,
        category=PlateCategory.CIVILIAN,
        identifier=identifier,
        number=number,
        modifier=modifier,
    )


def validate_red_plate(distinguisher: Distinguisher, number: str, modifier: str) -> Optional[LicencePlate]:
    """Dealer (06), oldtimer (07) and technical inspection (05) plates."""
    if modifier:
        return None
    if not _UP_TO_SIX_DIGITS_RE.fullmatch(number) or not number.startswith(RED_PLATE_PREFIXES):
        return None
    if len(distinguisher.code) + len(number) > MAX_RED_PLATE_TOTAL_LENGTH:
        return None
    return LicencePlate(distinguisher=distinguisher, category=PlateCategory.RED_PLATE, number=number)


def validate_bundeswehr(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    return _validate_numeric_special(distinguisher, remainder, modifier, PlateCategory.BUNDESWEHR)


def validate_nato(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    return _validate_numeric_special(distinguisher, remainder, modifier, PlateCategory.NATO)


def validate_generic_special(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    return _validate_numeric_special(distinguisher, remainder, modifier, PlateCategory.GENERIC_SPECIAL)


def validate_federal_police(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    """Bundespolizei: two-digit vehicle type code followed by a 1-3 digit sequence.

    Valid: BP151, BP1599, BP6012E, BP0650. Invalid: BP09123 (unknown type),
    BP151234 (sequence too long), BP151H (modifier on a non-electric type).
    """
    if not _DIGITS_RE.fullmatch(remainder):
        return None

    if _is_red_test_drive_number(remainder):
        if modifier:
            return None
        return _federal_police_plate(distinguisher, remainder, "", FederalPoliceVehicleType.TEST_DRIVE)

    if not 3 <= len(remainder) <= 5:
        return None

    vehicle_type = _federal_police_range_type(int(remainder[:2]))
    if vehicle_type is None:
        return None

    if vehicle_type is FederalPoliceVehicleType.ELECTRIC_VEHICLES:
        if modifier != "E":
            return None
    elif modifier:
        return None

    return _federal_police_plate(distinguisher, remainder, modifier, vehicle_type)


def validate_thw(distinguisher: Distinguisher, remainder: str, modifier: str) -> Optional[LicencePlate]:
    """Technisches Hilfswerk: 8000-9999 or 80000-99999, plus red plates 0600-0699."""
    if modifier:
        return None
    if not _DIGITS_RE.fullmatch(remainder):
        return None

    if not _is_red_test_drive_number(remainder):
        if len(remainder) not in (4, 5) or remainder[0] not in ("8", "9"):
            return None
        low, high = _THW_RANGES[len(remainder)]
        if not low <= int(remainder) <= high:
            return None

    return LicencePlate(distinguisher=distinguisher, category=PlateCategory.THW, number=remainder)


def federal_police_vehicle_type(number: Optional[str]) -> Optional[FederalPoliceVehicleType]:
    if number is None or len(number) < 2 or not _DIGITS_RE.fullmatch(number):
        return None
    if _is_red_test_drive_number(number):
        return FederalPoliceVehicleType.TEST_DRIVE
    return _federal_police_range_type(int(number[:2]))


def _split_identifier(remainder: str) -> Tuple[str, str]:
    identifier = []
    position = 0
    while (
        position < len(remainder)
        and remainder[position].isalpha()
        and len(identifier) < MAX_IDENTIFIER_LENGTH
    ):
        if remainder[position] in FORBIDDEN_UMLAUTS:
            return "", remainder
        identifier.append(remainder[position])
        position += 1
    return "".join(identifier), remainder[position:]


def _validate_numeric_special(
    distinguisher: Distinguisher,
    remainder: str,
    modifier: str,
    category: PlateCategory,
) -> Optional[LicencePlate]:
    if modifier:
        return None
    if not _UP_TO_SIX_DIGITS_RE.fullmatch(remainder):
        return None
    return LicencePlate(distinguisher=distinguisher, category=category, number=remainder)


def _is_red_test_drive_number(number: str) -> bool:
    if not _FOUR_DIGITS_RE.fullmatch(number):
        return False
    return RED_TEST_DRIVE_MIN <= int(number) <= RED_TEST_DRIVE_MAX


def _federal_police_range_type(code: int) -> Optional[FederalPoliceVehicleType]:
    for vehicle_range in _FEDERAL_POLICE_RANGES:
        if vehicle_range.low <= code <= vehicle_range.high:
            return vehicle_range.vehicle_type
    return None


def _federal_police_plate(
    distinguisher: Distinguisher,
    number: str,
    modifier: str,
    vehicle_type: FederalPoliceVehicleType,
) -> LicencePlate:
    return LicencePlate(
        distinguisher=distinguisher,
        category=PlateCategory.FEDERAL_POLICE,
        number=number,
        modifier=modifier,
        vehicle_type=vehicle_type,
    )


_THW_RANGES = {
    4: (8000, 9999),
    5: (80000, 99999),
}

_VALIDATORS: Dict[PlateCategory, PlateValidator] = {
    PlateCategory.CIVILIAN: validate_civilian,
    PlateCategory.BUNDESWEHR: validate_bundeswehr,
    PlateCategory.NATO: validate_nato,
    PlateCategory.FEDERAL_POLICE: validate_federal_police,
    PlateCategory.THW: validate_thw,
    PlateCategory.GENERIC_SPECIAL: validate_generic_special,
}
