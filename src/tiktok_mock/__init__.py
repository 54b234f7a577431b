"""
Mock TikTok Marketing API server.

Serves a fake creative report endpoint that returns structurally valid
payloads with randomized identifiers and plausible metric values, for
exercising client code without production credentials or rate limits.
"""

from .models import METRIC_RANGES, MetricRange, PageInfo, ReportEnvelope, ReportRow
from .report import ReportSynthesizer, generate_metrics, synthesize_report
from .utils import generate_alphanumeric_id, generate_request_id
from .validation import (
    ReportQuery,
    ValidationError,
    ValidationErrorKind,
    ValidationResult,
    validate_report_query,
)

__version__ = '1.0.0'

__all__ = [
    'METRIC_RANGES',
    'MetricRange',
    'PageInfo',
    'ReportEnvelope',
    'ReportRow',
    'ReportSynthesizer',
    'generate_metrics',
    'synthesize_report',
    'generate_alphanumeric_id',
    'generate_request_id',
    'ReportQuery',
    'ValidationError',
    'ValidationErrorKind',
    'ValidationResult',
    'validate_report_query',
]
