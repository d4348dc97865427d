"""HTTP routes serving runtime configuration to the browser."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify, request
from werkzeug.exceptions import MethodNotAllowed

from config_service.services import (
    IncompleteConfigurationError,
    render_dev_script,
    resolve_first,
    resolve_source,
)

config_bp = Blueprint("config", __name__)
api_bp = Blueprint("api", __name__)
dev_bp = Blueprint("dev", __name__)

CONFIG_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def add_cors_headers(response: Response) -> Response:
    for header, value in CORS_HEADERS.items():
        response.headers[header] = value
    response.headers["Content-Type"] = "application/json"
    return response


config_bp.after_request(add_cors_headers)
api_bp.after_request(add_cors_headers)


def method_not_allowed(error: MethodNotAllowed) -> Response:
    """JSON 405 for verbs the router rejects before any view runs."""
    return add_cors_headers(jsonify({"error": "Method not allowed"})), 405


def _incomplete_message() -> str:
    deployment = current_app.config["DEPLOYMENT_NAME"]
    return f"Server configuration incomplete. Check {deployment} Environment Variables."


def _log_incomplete(exc: IncompleteConfigurationError) -> None:
    current_app.logger.error(
        "Configuration incomplete (missing: %s): %s",
        ", ".join(exc.missing) or "-",
        exc,
    )


@config_bp.route("/config", methods=CONFIG_METHODS)
def get_config():
    """Return the client-visible configuration record."""
    if request.method == "OPTIONS":
        return Response("", status=200)
    if request.method != "GET":
        return jsonify({"error": "Method not allowed"}), 405

    try:
        record = resolve_first(current_app.config["CONFIG_SOURCES"])
    except IncompleteConfigurationError as exc:
        _log_incomplete(exc)
        return jsonify({"error": _incomplete_message()}), 500

    return jsonify(record.to_dict())


@api_bp.get("/health")
def healthcheck():
    """Report which configuration variables are set, never their values."""
    variables: dict[str, bool] = {}
    for source in current_app.config["CONFIG_SOURCES"]:
        for name in source.keys.names():
            variables[name] = variables.get(name, False) or bool(
                source.lookup.get(name)
            )

    try:
        resolve_first(current_app.config["CONFIG_SOURCES"])
        complete = True
    except IncompleteConfigurationError:
        complete = False

    return jsonify(
        {
            "status": "ok",
            "config_complete": complete,
            "environment_variables": variables,
        }
    )


@dev_bp.get("/env.local.js")
def dev_env_script():
    """Serve the injection script the app loads before startup in development.

    The script is rendered from the same source ``/config`` would serve.
    """
    try:
        source, _ = resolve_source(current_app.config["CONFIG_SOURCES"])
    except IncompleteConfigurationError as exc:
        _log_incomplete(exc)
        return Response(
            f"// {_incomplete_message()}\n",
            status=500,
            mimetype="application/javascript",
        )
    return Response(
        render_dev_script(source.lookup), mimetype="application/javascript"
    )
