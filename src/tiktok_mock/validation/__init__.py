"""Creative report request validation."""

from .request_validator import (
    ERROR_STATUS,
    INVALID_FILTERING_MESSAGE,
    MISSING_FILTERING_MESSAGE,
    ReportQuery,
    ValidationError,
    ValidationErrorKind,
    ValidationResult,
    validate_report_query,
)

__all__ = [
    'ERROR_STATUS',
    'INVALID_FILTERING_MESSAGE',
    'MISSING_FILTERING_MESSAGE',
    'ReportQuery',
    'ValidationError',
    'ValidationErrorKind',
    'ValidationResult',
    'validate_report_query',
]
