"""
Domain Errors

Field-scoped validation errors attached to a user record, and the fatal
configuration error raised for an unknown auth field.
"""

from typing import Dict, List


class InvalidEmailField(Exception):
    """Raised when the configured email field is not an attribute of User"""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Invalid email field: {field_name!r} is not a User attribute")


class FieldErrors:
    """
    Ordered collection of error symbols keyed by field name.

    Truthy when at least one error has been added, so callers can write
    ``if errors: ...``.
    """

    def __init__(self):
        self._errors: Dict[str, List[str]] = {}

    def add(self, field: str, error: str) -> "FieldErrors":
        symbols = self._errors.setdefault(field, [])
        if error not in symbols:
            symbols.append(error)
        return self

    def get(self, field: str) -> List[str]:
        return list(self._errors.get(field, []))

    def to_dict(self) -> Dict[str, List[Dict[str, str]]]:
        return {
            field: [{"error": error} for error in symbols]
            for field, symbols in self._errors.items()
        }

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __repr__(self) -> str:
        return f"FieldErrors({self._errors!r})"
