"""Mock API Utilities."""

from .constants import FIXED_INFO_FIELDS, UNKNOWN_METRIC_VALUE
from .id_generator import (
    ALPHANUMERIC_CHARS,
    generate_alphanumeric_id,
    generate_request_id,
)

__all__ = [
    'ALPHANUMERIC_CHARS',
    'FIXED_INFO_FIELDS',
    'UNKNOWN_METRIC_VALUE',
    'generate_alphanumeric_id',
    'generate_request_id',
]
