"""Mock API Constants and Configuration Values."""

# Endpoint paths
REPORT_PATH = "/open_api/v1.3/creative/report/get"
HEALTH_PATH = "/health"

# ID lengths
ENTITY_ID_LENGTH = 24
REQUEST_ID_LENGTH = 32

# Response codes carried in the envelope "code" field
CODE_OK = 0
CODE_INVALID_PARAMS = 40001
CODE_METHOD_NOT_ALLOWED = 40500
CODE_INTERNAL_ERROR = 50000

MESSAGE_OK = "OK"
MESSAGE_METHOD_NOT_ALLOWED = "Method not allowed"
MESSAGE_INVALID_PARAMS = "Invalid request parameters"
MESSAGE_INTERNAL_ERROR = "Internal server error"

# Info fields present on every report row; requested fields never overwrite them
FIXED_INFO_FIELDS: tuple[str, ...] = (
    "material_id",
    "video_id",
    "page_id",
    "image_id",
)

# Value reported for metrics that have no configured range
UNKNOWN_METRIC_VALUE = "0"

# CORS headers set on every response
CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": (
        "Origin, X-Requested-With, Content-Type, Accept, Access-Token"
    ),
    "Access-Control-Allow-Methods": "GET, OPTIONS",
}
