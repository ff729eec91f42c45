from app.application.dtos.responses.general_response import GeneralResponse
from app.domain.distinguisher import DistinguisherLookup
from app.domain.errors import LicencePlateValidationError
from app.domain.licence_plate import LicencePlate
from app.domain.licence_plate_validation import LicencePlateValidationService


class LicencePlateService:
    def __init__(self, lookup: DistinguisherLookup):
        self.validator = LicencePlateValidationService(lookup)

    def validate_licence_plate(self, text: str | None) -> GeneralResponse[dict]:
        try:
            plate = self.validator.validate_licence_plate(text)
        except LicencePlateValidationError as exc:
            return GeneralResponse.failure(
                code=exc.kind.value,
                message=exc.message,
                details={"input": text},
            )

        return GeneralResponse(
            success=True,
            message="Kennzeichen gueltig",
            data=_plate_to_dict(plate),
        )


def _plate_to_dict(plate: LicencePlate) -> dict:
    return {
        "licencePlate": plate.render(),
        "distinguisher": plate.distinguisher.code,
        "distinguisherLabel": plate.distinguisher.label,
        "identifier": plate.identifier,
        "number": plate.number,
        "modifier": plate.modifier,
        "category": plate.category.value,
        "vehicleType": plate.vehicle_type.value if plate.vehicle_type else None,
    }
