from libs.result import Error
from src.domain.errors import FieldErrors


def validation_error(errors: FieldErrors) -> Error:
    return Error("VALIDATION_FAILED", "Validation failed", details=errors.to_dict())


def not_found_error(field: str) -> Error:
    return Error(
        "NOT_FOUND",
        f"No record found for {field}",
        details=FieldErrors().add(field, "not_found").to_dict(),
    )
