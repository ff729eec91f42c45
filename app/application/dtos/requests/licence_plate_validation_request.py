from pydantic import BaseModel


class LicencePlateValidationRequestDTO(BaseModel):
    licencePlate: str | None = None
