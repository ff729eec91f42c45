import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.application.dtos.requests.licence_plate_validation_request import LicencePlateValidationRequestDTO
from app.application.services.licence_plate_service import LicencePlateService
from app.domain.errors import ValidationErrorKind
from app.infrastructure.distinguisher_repository import DistinguisherRepository

router = APIRouter(prefix="/licence-plate", tags=["Licence plate"])
logger = logging.getLogger(__name__)

_STATUS_BY_ERROR_CODE = {
    ValidationErrorKind.INVALID_FORMAT.value: status.HTTP_400_BAD_REQUEST,
    ValidationErrorKind.AMBIGUOUS.value: 422,
}


def get_licence_plate_service(db: Session = Depends(get_db)) -> LicencePlateService:
    return LicencePlateService(lookup=DistinguisherRepository(db))


@router.post("/validate")
def validate_licence_plate(
    payload: LicencePlateValidationRequestDTO,
    service: LicencePlateService = Depends(get_licence_plate_service),
):
    logger.info("validate_licence_plate_request text=%s", payload.licencePlate)

    response = service.validate_licence_plate(payload.licencePlate)
    if response.success:
        logger.info("validate_licence_plate_response status=200 payload=%s", response.model_dump())
        return response

    code = response.error.code if response.error else None
    status_code = _STATUS_BY_ERROR_CODE.get(code, status.HTTP_400_BAD_REQUEST)
    logger.warning("validate_licence_plate_response status=%s payload=%s", status_code, response.model_dump())
    return JSONResponse(status_code=status_code, content=response.model_dump())
