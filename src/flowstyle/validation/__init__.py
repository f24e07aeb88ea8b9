from flowstyle.validation.validator import (
    ValidationError,
    count_by_severity,
    failures,
    validate,
    validate_or_raise,
)

__all__ = ["ValidationError", "count_by_severity", "failures", "validate", "validate_or_raise"]
