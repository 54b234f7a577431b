"""Report row and response envelope models for the creative report API."""

from dataclasses import dataclass, field
from typing import Any

from ..utils.constants import CODE_OK, MESSAGE_OK


@dataclass
class ReportRow:
    """
    One synthesized report row per requested material.

    `info` always carries material_id, video_id, page_id and image_id,
    plus any extra requested info fields. `metrics` holds exactly the
    requested metric names with stringified values.
    """

    info: dict[str, Any] = field(default_factory=dict)
    metrics: dict[str, str] = field(default_factory=dict)

    @property
    def material_id(self) -> Any:
        return self.info.get('material_id')

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            'metrics': dict(self.metrics),
            'info': dict(self.info),
        }


@dataclass
class PageInfo:
    """Pagination block. The mock always returns one page holding every row."""

    total_number: int = 0
    total_page: int = 1
    page_size: int = 0
    page: int = 1

    @classmethod
    def single_page(cls, count: int) -> "PageInfo":
        """Build the page info for a single page containing `count` rows."""
        return cls(total_number=count, total_page=1, page_size=count, page=1)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            'total_number': self.total_number,
            'total_page': self.total_page,
            'page_size': self.page_size,
            'page': self.page,
        }


@dataclass
class ReportEnvelope:
    """
    Outer response shape shared by success and error responses.

    Success responses carry `data.list` and `data.page_info`; error
    responses carry an empty `data` object.
    """

    code: int
    message: str
    request_id: str
    rows: list[ReportRow] = field(default_factory=list)
    page_info: PageInfo | None = None

    @property
    def is_error(self) -> bool:
        return self.code != CODE_OK

    @classmethod
    def success(cls, rows: list[ReportRow], request_id: str) -> "ReportEnvelope":
        return cls(
            code=CODE_OK,
            message=MESSAGE_OK,
            request_id=request_id,
            rows=list(rows),
            page_info=PageInfo.single_page(len(rows)),
        )

    @classmethod
    def error(cls, code: int, message: str, request_id: str) -> "ReportEnvelope":
        return cls(code=code, message=message, request_id=request_id)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        if self.page_info is None:
            data: dict[str, Any] = {}
        else:
            data = {
                'list': [row.to_dict() for row in self.rows],
                'page_info': self.page_info.to_dict(),
            }
        return {
            'code': self.code,
            'message': self.message,
            'request_id': self.request_id,
            'data': data,
        }
