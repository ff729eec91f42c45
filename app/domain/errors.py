from enum import Enum


class ValidationErrorKind(str, Enum):
    INVALID_FORMAT = "INVALID_FORMAT"
    AMBIGUOUS = "AMBIGUOUS"


class LicencePlateValidationError(Exception):
    kind: ValidationErrorKind = ValidationErrorKind.INVALID_FORMAT

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidLicencePlateError(LicencePlateValidationError):
    kind = ValidationErrorKind.INVALID_FORMAT


class AmbiguousLicencePlateError(LicencePlateValidationError):
    kind = ValidationErrorKind.AMBIGUOUS
