from bindsheet.validation.validator import (
    ValidationError,
    count_by_severity,
    validate,
    validate_or_raise,
)

__all__ = ["ValidationError", "count_by_severity", "validate", "validate_or_raise"]
