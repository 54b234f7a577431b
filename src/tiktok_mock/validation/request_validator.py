"""
Request validation for the creative report endpoint.

Parses the JSON-encoded query parameters and returns either a parsed
ReportQuery or a tagged ValidationError. Nothing here raises; the HTTP
layer maps each error kind to a status code and envelope code.
"""

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional

from ..utils.constants import CODE_INVALID_PARAMS


class ValidationErrorKind(str, Enum):
    """Why a report request was rejected."""

    MALFORMED_FIELD = "malformed_field"  # Bad JSON or wrong shape
    MISSING_FILTERING = "missing_filtering"  # No filtering parameter
    INVALID_FILTERING = "invalid_filtering"  # filtering without a material_id array


MISSING_FILTERING_MESSAGE = "filtering parameter with material_id array is required"
INVALID_FILTERING_MESSAGE = (
    "material_id must be provided as an array in the filtering parameter"
)

# (http_status, envelope code) per error kind
ERROR_STATUS: dict[ValidationErrorKind, tuple[int, int]] = {
    ValidationErrorKind.MALFORMED_FIELD: (400, CODE_INVALID_PARAMS),
    ValidationErrorKind.MISSING_FILTERING: (400, CODE_INVALID_PARAMS),
    ValidationErrorKind.INVALID_FILTERING: (400, CODE_INVALID_PARAMS),
}


@dataclass(frozen=True)
class ValidationError:
    """A rejected request, with the reason carried as a tag."""

    kind: ValidationErrorKind
    message: str
    field: str = ""

    @property
    def http_status(self) -> int:
        return ERROR_STATUS[self.kind][0]

    @property
    def code(self) -> int:
        return ERROR_STATUS[self.kind][1]

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'message': self.message,
            'field': self.field,
        }


@dataclass
class ReportQuery:
    """Parsed creative report request."""

    material_ids: list[Any] = field(default_factory=list)
    info_fields: list[str] = field(default_factory=list)
    metrics_fields: list[str] = field(default_factory=list)

    # Accepted for compatibility but not used for generation
    advertiser_id: Optional[str] = None
    material_type: Optional[str] = None
    lifetime: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    page: str = "1"
    page_size: str = "10"

    def passthrough(self) -> dict[str, Optional[str]]:
        """Parameters that are accepted but ignored."""
        return {
            'advertiser_id': self.advertiser_id,
            'material_type': self.material_type,
            'lifetime': self.lifetime,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'page': self.page,
            'page_size': self.page_size,
        }


@dataclass
class ValidationResult:
    """Either a parsed query or the reason it was rejected."""

    query: Optional[ReportQuery] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, query: ReportQuery) -> "ValidationResult":
        return cls(query=query)

    @classmethod
    def failure(
        cls,
        kind: ValidationErrorKind,
        message: str,
        field: str = "",
    ) -> "ValidationResult":
        return cls(error=ValidationError(kind=kind, message=message, field=field))


def _parse_json(name: str, raw: Optional[str]) -> tuple[Any, Optional[ValidationError]]:
    """Decode a JSON query value, returning (value, error)."""
    if raw is None:
        return None, ValidationError(
            ValidationErrorKind.MALFORMED_FIELD,
            f"{name} parameter is required",
            name,
        )
    try:
        return json.loads(raw), None
    except (TypeError, ValueError) as e:
        return None, ValidationError(
            ValidationErrorKind.MALFORMED_FIELD,
            f"{name} is not valid JSON: {e}",
            name,
        )


def _parse_string_list(
    name: str,
    raw: Optional[str],
) -> tuple[list[str], Optional[ValidationError]]:
    """Decode a JSON array of strings."""
    value, error = _parse_json(name, raw)
    if error:
        return [], error
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return [], ValidationError(
            ValidationErrorKind.MALFORMED_FIELD,
            f"{name} must be a JSON array of strings",
            name,
        )
    return value, None


def _parse_material_ids(raw: Optional[str]) -> tuple[list[Any], Optional[ValidationError]]:
    """Extract the material_id array from the filtering parameter."""
    if not raw:
        return [], ValidationError(
            ValidationErrorKind.MISSING_FILTERING,
            MISSING_FILTERING_MESSAGE,
            "filtering",
        )
    filtering, error = _parse_json("filtering", raw)
    if error:
        return [], error
    if not isinstance(filtering, dict) or not isinstance(
        filtering.get("material_id"), list
    ):
        return [], ValidationError(
            ValidationErrorKind.INVALID_FILTERING,
            INVALID_FILTERING_MESSAGE,
            "filtering",
        )
    return filtering["material_id"], None


def validate_report_query(params: Mapping[str, str]) -> ValidationResult:
    """
    Validate raw creative report query parameters.

    Checks run in order: info_fields, metrics_fields, filtering. The
    first failure is returned; there is no partial success.

    Args:
        params: Query string values (e.g. Flask's request.args)

    Returns:
        ValidationResult holding either a ReportQuery or a ValidationError
    """
    info_fields, error = _parse_string_list("info_fields", params.get("info_fields"))
    if error:
        return ValidationResult(error=error)

    metrics_fields, error = _parse_string_list(
        "metrics_fields", params.get("metrics_fields")
    )
    if error:
        return ValidationResult(error=error)

    material_ids, error = _parse_material_ids(params.get("filtering"))
    if error:
        return ValidationResult(error=error)

    return ValidationResult.success(
        ReportQuery(
            material_ids=material_ids,
            info_fields=info_fields,
            metrics_fields=metrics_fields,
            advertiser_id=params.get("advertiser_id"),
            material_type=params.get("material_type"),
            lifetime=params.get("lifetime"),
            start_date=params.get("start_date"),
            end_date=params.get("end_date"),
            page=params.get("page") or "1",
            page_size=params.get("page_size") or "10",
        )
    )
