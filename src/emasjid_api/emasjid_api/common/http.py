from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from ..core.exceptions import ValidationError


def route_path(app: Flask, path: str) -> str:
    """Prefix ``path`` with the configured deployment URL."""
    base = str(app.config.get("DEPLOY_URL") or "/").rstrip("/")
    return f"{base}/{path.lstrip('/')}"


def empty(status: int) -> Response:
    return Response(status=status)


def json_ok(payload: Any) -> Response:
    return jsonify(payload)


def json_body() -> Any:
    data = request.get_json(silent=True)
    if data is None:
        raise ValidationError("JSON tidak sah")
    return data


def int_arg(name: str, default: int) -> int:
    value = request.args.get(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValidationError(f"{name} tidak sah")


def bool_arg(name: str) -> bool:
    value = (request.args.get(name) or "").strip().lower()
    if value in {"true", "1", "t"}:
        return True
    if value in {"false", "0", "f"}:
        return False
    raise ValidationError(f"{name} tidak sah")


def required_int_arg(name: str) -> int:
    value = request.args.get(name)
    if value is None or value == "":
        raise ValidationError(f"{name} diperlukan")
    return int_arg(name, 0)
