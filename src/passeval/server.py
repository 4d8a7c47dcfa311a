"""
Password Evaluator Server - HTTP adapter for breach verification.

Exposes POST /api/check-breach for browser front-ends. Internal error
details are logged and never returned to the client.

Copyright (c) 2025 DNS Science.io, an After Dark Systems, LLC company.
All rights reserved.
"""

import asyncio
import logging
from datetime import datetime

from flask import Flask, jsonify, request

from passeval import __version__
from passeval.evaluator import PasswordEvaluator
from passeval.exceptions import ConfigurationError, InvalidInputError, UpstreamError

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ERROR_METHOD_NOT_ALLOWED = {
    "error": "Método no permitido",
    "message": "Solo se permiten solicitudes POST",
}
ERROR_ROUTE_METHOD_NOT_ALLOWED = {
    "error": "Método no permitido",
    "message": "Método no permitido para esta ruta",
}
ERROR_BAD_REQUEST = {
    "error": "Solicitud inválida",
    "message": "Se requiere el campo password",
}
ERROR_INVALID_PASSWORD = {
    "error": "Solicitud inválida",
    "message": "La contraseña no es válida para verificar",
}
ERROR_INTERNAL = {
    "error": "Error interno del servidor",
    "message": "No se pudo completar la verificación. Por favor, intenta de nuevo.",
}


class EvaluatorServer:
    """REST API server for password breach verification.

    Provides endpoints for:
    - Breach checks (POST /api/check-breach)
    - Health checks (GET /health)
    """

    def __init__(self, evaluator: PasswordEvaluator | None = None):
        self.evaluator = evaluator or PasswordEvaluator()

        # Create Flask app
        self.app = Flask(__name__)
        self._setup_routes()

    def _setup_routes(self):
        """Setup Flask routes."""

        @self.app.after_request
        def after_request(response):
            response.headers.update(CORS_HEADERS)
            response.headers["X-Passeval-Version"] = __version__
            return response

        @self.app.errorhandler(405)
        def method_not_allowed(error):
            if request.path == "/api/check-breach":
                return jsonify(ERROR_METHOD_NOT_ALLOWED), 405
            return jsonify(ERROR_ROUTE_METHOD_NOT_ALLOWED), 405

        # ================================================================
        # Health check
        # ================================================================

        @self.app.route("/health")
        def health():
            return jsonify({"status": "ok", "timestamp": datetime.now().isoformat()})

        # ================================================================
        # Breach verification
        # ================================================================

        @self.app.route(
            "/api/check-breach",
            methods=["POST", "OPTIONS"],
            provide_automatic_options=False,
        )
        def check_breach():
            """Check a password against the breach corpus."""
            if request.method == "OPTIONS":
                return "", 200

            data = request.get_json(silent=True)
            password = data.get("password") if isinstance(data, dict) else None
            if not password:
                return jsonify(ERROR_BAD_REQUEST), 400

            try:
                report = asyncio.run(self.evaluator.verify(password))
            except InvalidInputError as e:
                logger.info(f"Rejected breach check: {e}")
                return jsonify(ERROR_INVALID_PASSWORD), 400
            except ConfigurationError as e:
                logger.error(f"Breach check misconfigured: {e}")
                return jsonify(ERROR_INTERNAL), 500
            except UpstreamError as e:
                logger.error(f"Breach check failed (status={e.status}): {e}")
                return jsonify(ERROR_INTERNAL), 500
            except Exception as e:
                logger.exception(f"Unexpected error in check-breach: {type(e).__name__}")
                return jsonify(ERROR_INTERNAL), 500

            return jsonify(report.to_api_dict())

    def run(self, host: str = "0.0.0.0", port: int = 8080, debug: bool = False):
        """Run the server."""
        self.app.run(host=host, port=port, debug=debug)


def create_app(evaluator: PasswordEvaluator | None = None) -> Flask:
    """Build the Flask application (WSGI entry point)."""
    return EvaluatorServer(evaluator=evaluator).app


# CLI command for running server
def add_server_commands(cli_group):
    """Add server commands to a Click group."""
    import click
    from rich.console import Console

    from passeval.config import EvaluatorConfig

    console = Console()

    @cli_group.group()
    def server():
        """Breach-check server management."""
        pass

    @server.command("run")
    @click.option("--host", default=None, help="Host to bind to")
    @click.option("--port", "-p", type=int, default=None, help="Port to listen on")
    @click.option("--debug", is_flag=True, help="Enable debug mode")
    def server_run(host: str | None, port: int | None, debug: bool):
        """Run the breach-check API server.

        Examples:
            passeval server run
            passeval server run --port 9000
        """
        config = EvaluatorConfig.from_env()
        errors = config.validate()
        if errors:
            for error in errors:
                console.print(f"[red]{error}[/red]")
            raise SystemExit(1)

        host = host or config.server_host
        port = port or config.server_port

        evaluator_server = EvaluatorServer(evaluator=PasswordEvaluator(config=config))

        console.print(f"[green]Starting breach-check server on {host}:{port}[/green]")
        evaluator_server.run(host=host, port=port, debug=debug)

    return server
