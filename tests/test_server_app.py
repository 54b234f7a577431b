"""Tests for the mock creative report HTTP server."""

import json
import re

import pytest

from src.tiktok_mock.config import ServerConfig
from src.tiktok_mock.models.metric_range import METRIC_RANGES
from src.tiktok_mock.report.synthesizer import ReportSynthesizer
from src.tiktok_mock.server import create_app

REPORT_PATH = "/open_api/v1.3/creative/report/get"


def _query(**overrides):
    """Valid report query string with optional overrides (None removes a key)."""
    params = {
        "advertiser_id": "7000000000000",
        "material_type": "VIDEO",
        "lifetime": "true",
        "info_fields": json.dumps(["material_id"]),
        "metrics_fields": json.dumps(["impressions"]),
        "filtering": json.dumps({"material_id": ["m1", "m2"]}),
        "page": "1",
        "page_size": "10",
    }
    for key, value in overrides.items():
        if value is None:
            params.pop(key, None)
        else:
            params[key] = value
    return params


@pytest.fixture
def client():
    """Test client for the default app."""
    app = create_app(ServerConfig())
    app.config["TESTING"] = True
    return app.test_client()


def _assert_cors(response):
    assert response.headers["Access-Control-Allow-Origin"] == "*"
    assert response.headers["Access-Control-Allow-Methods"] == "GET, OPTIONS"
    allowed = response.headers["Access-Control-Allow-Headers"]
    for header in ("Origin", "X-Requested-With", "Content-Type", "Accept", "Access-Token"):
        assert header in allowed


class TestCreativeReport:
    """Test the creative report endpoint."""

    def test_success(self, client):
        """Test a valid request returns two synthesized rows."""
        response = client.get(REPORT_PATH, query_string=_query())
        body = response.get_json()

        assert response.status_code == 200
        assert response.mimetype == "application/json"
        assert body["code"] == 0
        assert body["message"] == "OK"
        assert re.match(r"^[a-z0-9]{32}$", body["request_id"])

        rows = body["data"]["list"]
        assert len(rows) == 2
        assert rows[0]["info"]["material_id"] == "m1"
        assert rows[1]["info"]["material_id"] == "m2"
        assert list(rows[0]["metrics"]) == ["impressions"]
        assert 1000 <= int(rows[0]["metrics"]["impressions"]) < 100000
        assert body["data"]["page_info"] == {
            "total_number": 2,
            "total_page": 1,
            "page_size": 2,
            "page": 1,
        }
        _assert_cors(response)

    def test_pagination_parameters_ignored(self, client):
        """Test page/page_size never split the result."""
        response = client.get(
            REPORT_PATH,
            query_string=_query(
                page="3",
                page_size="1",
                filtering=json.dumps({"material_id": ["a", "b", "c"]}),
            ),
        )
        page_info = response.get_json()["data"]["page_info"]

        assert page_info == {"total_number": 3, "total_page": 1, "page_size": 3, "page": 1}

    def test_all_metrics_in_range(self, client):
        """Test every known metric is within its range."""
        response = client.get(
            REPORT_PATH,
            query_string=_query(metrics_fields=json.dumps(list(METRIC_RANGES) + ["ctr"])),
        )

        for row in response.get_json()["data"]["list"]:
            assert row["metrics"]["ctr"] == "0"
            for name, metric_range in METRIC_RANGES.items():
                assert metric_range.contains(int(row["metrics"][name]))

    def test_request_id_fresh_per_call(self, client):
        """Test each response carries a new request id."""
        first = client.get(REPORT_PATH, query_string=_query()).get_json()
        second = client.get(REPORT_PATH, query_string=_query()).get_json()

        assert first["request_id"] != second["request_id"]

    def test_missing_filtering(self, client):
        """Test omitted filtering is rejected."""
        response = client.get(REPORT_PATH, query_string=_query(filtering=None))
        body = response.get_json()

        assert response.status_code == 400
        assert body["code"] == 40001
        assert body["message"] == "filtering parameter with material_id array is required"
        assert re.match(r"^[a-z0-9]{32}$", body["request_id"])
        assert body["data"] == {}
        _assert_cors(response)

    def test_filtering_without_material_id(self, client):
        """Test filtering lacking material_id is rejected."""
        response = client.get(REPORT_PATH, query_string=_query(filtering='{"foo":"bar"}'))
        body = response.get_json()

        assert response.status_code == 400
        assert body["code"] == 40001
        assert body["message"] == (
            "material_id must be provided as an array in the filtering parameter"
        )

    def test_metrics_fields_not_json(self, client):
        """Test unparseable metrics_fields is rejected."""
        response = client.get(REPORT_PATH, query_string=_query(metrics_fields="not json"))
        body = response.get_json()

        assert response.status_code == 400
        assert body["code"] == 40001
        assert "not valid JSON" in body["message"]
        assert body["data"] == {}

    def test_post_not_allowed(self, client):
        """Test POST is rejected with the method envelope."""
        response = client.post(REPORT_PATH, query_string=_query())
        body = response.get_json()

        assert response.status_code == 405
        assert body["code"] == 40500
        assert body["message"] == "Method not allowed"
        assert re.match(r"^[a-z0-9]{32}$", body["request_id"])
        assert body["data"] == {}
        _assert_cors(response)

    @pytest.mark.parametrize("method", ["put", "patch", "delete"])
    def test_other_methods_not_allowed(self, client, method):
        """Test other write methods are rejected."""
        response = getattr(client, method)(REPORT_PATH)

        assert response.status_code == 405
        assert response.get_json()["code"] == 40500

    def test_head_not_allowed(self, client):
        """Test HEAD is rejected rather than served as GET."""
        response = client.head(REPORT_PATH, query_string=_query())

        assert response.status_code == 405
        assert response.data == b""
        _assert_cors(response)

    def test_options_preflight(self, client):
        """Test CORS preflight gets an empty 200."""
        response = client.options(REPORT_PATH)

        assert response.status_code == 200
        assert response.data == b""
        _assert_cors(response)

    def test_internal_error(self, client, monkeypatch):
        """Test unexpected failures map to a 500 envelope."""
        def boom(self, *args, **kwargs):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(ReportSynthesizer, "build_envelope", boom)
        response = client.get(REPORT_PATH, query_string=_query())
        body = response.get_json()

        assert response.status_code == 500
        assert body["code"] == 50000
        assert body["message"] == "Internal server error"
        assert "exploded" not in response.get_data(as_text=True)


class TestSeededServer:
    """Test reproducible responses with a configured seed."""

    def test_same_seed_same_rows(self):
        """Test seeded apps synthesize identical data every time."""
        client = create_app(ServerConfig(random_seed=1234)).test_client()

        first = client.get(REPORT_PATH, query_string=_query()).get_json()
        second = client.get(REPORT_PATH, query_string=_query()).get_json()

        assert first["data"] == second["data"]

    def test_request_id_fresh_when_seeded(self):
        """Test the request id is regenerated per call despite the seed."""
        client = create_app(ServerConfig(random_seed=1234)).test_client()

        first = client.get(REPORT_PATH, query_string=_query()).get_json()
        second = client.get(REPORT_PATH, query_string=_query()).get_json()

        assert re.match(r"^[a-z0-9]{32}$", first["request_id"])
        assert first["request_id"] != second["request_id"]


class TestCatchAll:
    """Test the serverless catch-all route."""

    @pytest.fixture
    def catch_all_client(self):
        return create_app(ServerConfig(catch_all=True)).test_client()

    def test_any_path_serves_report(self, catch_all_client):
        """Test unmatched paths are handled as report requests."""
        response = catch_all_client.get("/api/anything", query_string=_query())

        assert response.status_code == 200
        assert response.get_json()["code"] == 0

    def test_head_not_allowed_on_any_path(self, catch_all_client):
        """Test HEAD on the catch-all is rejected."""
        response = catch_all_client.head("/api/anything", query_string=_query())

        assert response.status_code == 405

    def test_health_still_served(self, catch_all_client):
        """Test explicit routes win over the catch-all."""
        response = catch_all_client.get("/health")

        assert response.get_json()["status"] == "ok"

    def test_catch_all_disabled_by_default(self, client):
        """Test unknown paths 404 without catch-all."""
        assert client.get("/api/anything").status_code == 404


class TestServiceRoutes:
    """Test index and health routes."""

    def test_health(self):
        """Test health reports status and deployment metadata."""
        client = create_app(ServerConfig(environment="production", region="iad1")).test_client()
        body = client.get("/health").get_json()

        assert body["status"] == "ok"
        assert body["env"] == "production"
        assert body["region"] == "iad1"
        assert "timestamp" in body

    def test_index(self, client):
        """Test the index lists the endpoints."""
        body = client.get("/").get_json()

        assert body["message"] == "TikTok Mock API Server"
        assert body["endpoints"] == {"health": "/health", "mockTikTok": REPORT_PATH}
