"""
Exceptions for the iExec schema validator.
"""
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError


class SchemaValidatorError(Exception):
    """Base exception for all schema validator errors."""
    pass


class ValidationError(SchemaValidatorError):
    """
    Raised in strict mode when a record does not satisfy its schema.

    The message is the concatenation of every violated rule, joined by " + ".
    """

    SEPARATOR = " + "

    def __init__(self, errors: List[str], kind: Optional[str] = None):
        self.errors = list(errors)
        self.kind = kind
        super().__init__(self.SEPARATOR.join(self.errors))

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError, kind: Optional[str] = None) -> "ValidationError":
        """
        Build a ValidationError from a pydantic validation failure.

        Args:
            error: The pydantic ValidationError raised by a schema
            kind: Optional record kind name, kept for callers

        Returns:
            ValidationError with one formatted message per violation
        """
        return cls([format_error(e) for e in error.errors()], kind=kind)


class UnknownSchemaError(SchemaValidatorError, KeyError):
    """Raised when no schema is registered for a record kind/version."""

    def __str__(self) -> str:
        # KeyError quotes its argument
        return str(self.args[0]) if self.args else ""


def format_error(error: dict) -> str:
    """
    Render one pydantic error entry as '"<path>" <message>'.

    Args:
        error: Entry from pydantic's ValidationError.errors()

    Returns:
        Human readable violation description
    """
    path = ".".join(str(part) for part in error.get("loc", ())) or "value"
    return f'"{path}" {error["msg"]}'
