"""
Uniform success/failure container returned by every validator
"""

from dataclasses import dataclass
from typing import Any, Optional

from ..core.exceptions import ValidationResultAccessError


@dataclass(frozen=True)
class ValidationResult:
    """Either validated data or a user-facing error message, never both

    Build instances with ``success`` or ``failure`` only.
    """

    valid: bool
    data: Any = None
    message: Optional[str] = None

    @classmethod
    def success(cls, data: Any = None) -> "ValidationResult":
        return cls(valid=True, data=data)

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(valid=False, message=message)

    def is_valid(self) -> bool:
        return self.valid

    def get_data(self) -> Any:
        """Validated data; only meaningful on success"""
        if not self.valid:
            raise ValidationResultAccessError(f"get_data() called on a failed result: {self.message}")
        return self.data

    def get_message(self) -> str:
        """Error message; only meaningful on failure"""
        if self.valid:
            raise ValidationResultAccessError("get_message() called on a successful result")
        return self.message
