from dataclasses import dataclass
from enum import Enum
from typing import Optional

from app.domain.distinguisher import Distinguisher


class PlateCategory(str, Enum):
    CIVILIAN = "civilian"
    RED_PLATE = "red_plate"
    BUNDESWEHR = "bundeswehr"
    NATO = "nato"
    FEDERAL_POLICE = "federal_police"
    THW = "thw"
    GENERIC_SPECIAL = "generic_special"


class FederalPoliceVehicleType(str, Enum):
    MOTORCYCLES = "motorcycles"
    PASSENGER_CARS = "passenger_cars"
    OFFROAD_PASSENGER_CARS = "offroad_passenger_cars"
    LIGHT_TRUCKS = "light_trucks"
    OFFROAD_LIGHT = "offroad_light"
    TRUCKS_UP_TO_6T = "trucks_up_to_6t"
    OFFROAD_TRUCKS_UP_TO_6T = "offroad_trucks_up_to_6t"
    HEAVY_TRUCKS_BUSES = "heavy_trucks_buses"
    ARMORED_VEHICLES = "armored_vehicles"
    TRAILERS = "trailers"
    ELECTRIC_VEHICLES = "electric_vehicles"
    TEST_DRIVE = "test_drive"


@dataclass(frozen=True)
class LicencePlate:
    distinguisher: Distinguisher
    category: PlateCategory
    number: str
    identifier: str = ""
    modifier: str = ""
    vehicle_type: Optional[FederalPoliceVehicleType] = None

    def render(self) -> str:
        # Special plates (Y, THW, ...) carry neither hyphen nor identifier
        if self.distinguisher.special:
            return f"{self.distinguisher.code}{self.number}"
        return f"{self.distinguisher.code}-{self.identifier}{self.number}{self.modifier}"

    def __str__(self) -> str:
        return self.render()
