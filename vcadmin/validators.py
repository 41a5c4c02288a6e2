"""
Parameter checks run before any call reaches vSphere
"""

from typing import Any
from .exceptions import ValidationError


def require(value: Any, name: str) -> str:
    """Reject anything but a non-blank string"""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required parameter: {name}", code="missing_parameter",
                              details={'parameter': name})
    if not isinstance(value, str):
        raise ValidationError(f"Parameter '{name}' must be a string, got {type(value).__name__}",
                              code="invalid_parameter", details={'parameter': name})
    return value


def require_positive_int(value: Any, name: str) -> int:
    """Reject anything that is not a positive integer"""
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(f"Parameter '{name}' must be a positive integer, got {value!r}",
                              code="invalid_parameter", details={'parameter': name})
    return value


def refuse_confirmation(confirm: bool, operation: str) -> None:
    """Removals run unattended; a confirmation request cannot be honoured"""
    if confirm:
        raise ValidationError(f"{operation} does not support interactive confirmation",
                              code="confirmation_unsupported", details={'operation': operation})
