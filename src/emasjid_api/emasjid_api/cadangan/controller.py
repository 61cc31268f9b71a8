from __future__ import annotations

from flask import Flask, request

from ..common.http import bool_arg, empty, int_arg, json_body, json_ok, route_path
from ..common.validators import optional_int
from ..core.constants import CADANGAN_DEFAULT_PAGE, CADANGAN_DEFAULT_PAGE_SIZE
from ..core.exceptions import NotFoundError
from ..container import Container
from .model import Cadangan


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "cadangan"), methods=["GET"], endpoint="cadangan_list")
    def list_by():
        log.info("get all cadangan by")
        try:
            page = container.cadangan_service.list_by(
                is_open=bool_arg("isOpen"),
                cadangan_type_id=optional_int(request.args.get("cadanganTypeId")),
                page=int_arg("page", CADANGAN_DEFAULT_PAGE),
                size=int_arg("size", CADANGAN_DEFAULT_PAGE_SIZE),
            )
            return json_ok(page.to_json())
        except Exception:
            log.exception("failed to get cadangan list")
            return empty(400)

    @app.route(route_path(app, "cadangan/count"), methods=["GET"], endpoint="cadangan_count")
    def count():
        log.info("get cadangan count")
        try:
            return json_ok(container.cadangan_service.count_by_type().to_json())
        except Exception:
            log.exception("failed to count cadangan")
            return empty(500)

    @app.route(route_path(app, "cadangan/<int:cadangan_id>"), methods=["GET"], endpoint="cadangan_get")
    def get_one(cadangan_id: int):
        log.info("get cadangan %s", cadangan_id)
        try:
            return json_ok(container.cadangan_service.get_one(cadangan_id).to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to get cadangan %s", cadangan_id)
            return empty(400)

    @app.route(route_path(app, "cadangan"), methods=["POST"], endpoint="cadangan_submit")
    def submit():
        log.info("submit cadangan")
        try:
            cadangan = Cadangan.from_json(json_body())
            with container.conn.transaction():
                saved = container.cadangan_service.submit(cadangan)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to submit cadangan")
            return empty(400)

    @app.route(route_path(app, "cadangan/<int:cadangan_id>"), methods=["PUT"], endpoint="cadangan_save")
    def save(cadangan_id: int):
        log.info("save cadangan %s", cadangan_id)
        try:
            cadangan = Cadangan.from_json(json_body())
            with container.conn.transaction():
                saved = container.cadangan_service.save(cadangan_id, cadangan)
            return json_ok(saved.to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to save cadangan")
            return empty(400)

    @app.route(route_path(app, "cadangan/<int:cadangan_id>"), methods=["DELETE"], endpoint="cadangan_delete")
    def delete(cadangan_id: int):
        log.info("delete cadangan %s", cadangan_id)
        try:
            with container.conn.transaction():
                container.cadangan_service.delete(cadangan_id)
            return empty(200)
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to delete cadangan")
            return empty(400)
