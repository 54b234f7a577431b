"""
Mock TikTok creative report server.

Serves a fake /open_api/v1.3/creative/report/get endpoint that returns
structurally valid report payloads with random ids and metric values.

Run with: python -m src.tiktok_mock.server.app
"""

import argparse
import random
import secrets
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, abort, current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from ..config.server_config import ServerConfig, load_server_config
from ..logging import LogContext, configure_logging, http_logger, report_logger
from ..models.report import ReportEnvelope
from ..report.synthesizer import ReportSynthesizer
from ..utils.constants import (
    CODE_INTERNAL_ERROR,
    CODE_METHOD_NOT_ALLOWED,
    CORS_HEADERS,
    HEALTH_PATH,
    MESSAGE_INTERNAL_ERROR,
    MESSAGE_INVALID_PARAMS,
    MESSAGE_METHOD_NOT_ALLOWED,
    REPORT_PATH,
)
from ..utils.id_generator import generate_request_id
from ..validation.request_validator import validate_report_query

_system_rng = secrets.SystemRandom()


def _request_rng() -> random.Random:
    """
    Random source for the current request.

    Seeded configs get a fresh random.Random per request so report rows are
    reproducible and nothing is shared between concurrent requests.
    """
    config: ServerConfig = current_app.config['SERVER_CONFIG']
    if config.random_seed is None:
        return _system_rng
    return random.Random(config.random_seed)


def _envelope_response(envelope: ReportEnvelope, status_code: int = 200):
    return jsonify(envelope.to_dict()), status_code


def create_app(config: Optional[ServerConfig] = None) -> Flask:
    """Create and configure the Flask application."""
    config = config or load_server_config()
    configure_logging(level=config.log_level, format=config.log_format)

    app = Flask(__name__)
    app.config['SERVER_CONFIG'] = config
    # Keep envelope keys in construction order
    app.json.sort_keys = False

    log = http_logger()

    @app.after_request
    def add_cors_headers(response):
        for header, value in CORS_HEADERS.items():
            response.headers[header] = value
        return response

    @app.errorhandler(MethodNotAllowed)
    def method_not_allowed(error):
        request_id = generate_request_id()
        with LogContext(request_id=request_id):
            log.warning(
                "Method not allowed",
                method=request.method,
                path=request.path,
            )
        envelope = ReportEnvelope.error(
            CODE_METHOD_NOT_ALLOWED, MESSAGE_METHOD_NOT_ALLOWED, request_id
        )
        return _envelope_response(envelope, 405)

    # =================================
    # Creative Report
    # =================================

    def creative_report(subpath: Optional[str] = None):
        """Mimic the creative report endpoint."""
        # Werkzeug adds HEAD to every GET rule; only GET and OPTIONS are served
        if request.method == 'HEAD':
            abort(405)

        rng = _request_rng()
        # Request ids stay fresh per call even when rows come from a seeded source
        request_id = generate_request_id()

        with LogContext(request_id=request_id):
            log.info(
                "Incoming request",
                method=request.method,
                path=request.path,
            )
            log.debug("Query parameters", query=request.args.to_dict())

            result = validate_report_query(request.args)
            if not result.ok:
                error = result.error
                log.warning(
                    "Invalid report request",
                    kind=error.kind.value,
                    field=error.field,
                    error=error.message,
                )
                envelope = ReportEnvelope.error(
                    error.code,
                    error.message or MESSAGE_INVALID_PARAMS,
                    request_id,
                )
                return _envelope_response(envelope, error.http_status)

            query = result.query
            report_logger().info(
                "Processing creative report request",
                material_ids=len(query.material_ids),
                info_fields=query.info_fields,
                metrics_fields=query.metrics_fields,
            )
            report_logger().debug("Ignored parameters", **query.passthrough())

            try:
                envelope = ReportSynthesizer(rng=rng).build_envelope(
                    query.material_ids,
                    query.info_fields,
                    query.metrics_fields,
                    request_id=request_id,
                )
            except Exception:
                log.error("Failed to synthesize report", exc_info=True)
                envelope = ReportEnvelope.error(
                    CODE_INTERNAL_ERROR, MESSAGE_INTERNAL_ERROR, request_id
                )
                return _envelope_response(envelope, 500)

            log.debug("Sending response", rows=len(envelope.rows))
            return _envelope_response(envelope)

    app.add_url_rule(
        REPORT_PATH,
        endpoint='creative_report',
        view_func=creative_report,
        methods=['GET'],
    )

    if config.catch_all:
        app.add_url_rule(
            '/<path:subpath>',
            endpoint='creative_report_catch_all',
            view_func=creative_report,
            methods=['GET'],
        )

    # =================================
    # Service Routes
    # =================================

    @app.route('/', methods=['GET'])
    def index():
        """Describe the mock service."""
        return jsonify({
            'message': 'TikTok Mock API Server',
            'endpoints': {
                'health': HEALTH_PATH,
                'mockTikTok': REPORT_PATH,
            },
        })

    @app.route(HEALTH_PATH, methods=['GET'])
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'ok',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'env': config.environment,
            'region': config.region,
        })

    return app


def run_server(
    host: Optional[str] = None,
    port: Optional[int] = None,
    debug: Optional[bool] = None,
    config: Optional[ServerConfig] = None,
):
    """
    Run the mock server.

    Args:
        host: Host to bind to (default: from config)
        port: Port to listen on (default: from config, 443)
        debug: Enable debug mode (default: from config)
        config: Preloaded ServerConfig (loaded from file/env if omitted)
    """
    config = config or load_server_config()
    if host is not None:
        config.host = host
    if port is not None:
        config.port = port
    if debug is not None:
        config.debug = debug

    app = create_app(config)
    http_logger().info(
        "Mock TikTok API server starting",
        url=f"http://localhost:{config.port}",
        report_path=REPORT_PATH,
        catch_all=config.catch_all,
        seeded=config.random_seed is not None,
    )
    app.run(host=config.host, port=config.port, debug=config.debug)


def main(argv: Optional[list[str]] = None):
    parser = argparse.ArgumentParser(description="Run the mock TikTok creative report server")
    parser.add_argument("--host", default=None, help="Host to bind to")
    parser.add_argument("--port", type=int, default=None, help="Port to run on")
    parser.add_argument("--debug", action="store_true", help="Enable debug mode")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    args = parser.parse_args(argv)

    config = load_server_config(args.config)
    run_server(
        host=args.host,
        port=args.port,
        debug=True if args.debug else None,
        config=config,
    )


if __name__ == '__main__':
    main()
