from __future__ import annotations

from flask import Flask

from ..common.http import empty, json_body, json_ok, route_path
from ..core.exceptions import NotFoundError
from ..container import Container
from .model import Tetapan


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "tetapan"), methods=["GET"], endpoint="tetapan_find_all")
    def find_all():
        log.info("find all tetapan")
        try:
            return json_ok([t.to_json() for t in container.tetapan_service.find_all()])
        except Exception:
            log.exception("failed to retrieve tetapan list")
            return empty(500)

    @app.route(route_path(app, "tetapan/<kunci>"), methods=["GET"], endpoint="tetapan_find_by_kunci")
    def find_by_kunci(kunci: str):
        log.info("find tetapan by kunci %s", kunci)
        try:
            return json_ok(container.tetapan_service.find_by_kunci(kunci).to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to retrieve tetapan %s", kunci)
            return empty(500)

    @app.route(route_path(app, "tetapan"), methods=["POST"], endpoint="tetapan_save")
    def save():
        log.info("save tetapan")
        try:
            tetapan = Tetapan.from_json(json_body())
            with container.conn.transaction():
                container.tetapan_service.save(tetapan)
            return empty(200)
        except Exception:
            log.exception("failed to save tetapan")
            return empty(400)

    @app.route(route_path(app, "tetapan/senarai"), methods=["POST"], endpoint="tetapan_save_all")
    def save_all():
        log.info("save all tetapan")
        try:
            tetapan_list = [Tetapan.from_json(t) for t in json_body()]
            with container.conn.transaction():
                container.tetapan_service.save_all(tetapan_list)
            return empty(200)
        except Exception:
            log.exception("failed to save tetapan list")
            return empty(400)

    @app.route(route_path(app, "tetapan/<kunci>"), methods=["DELETE"], endpoint="tetapan_delete")
    def delete(kunci: str):
        log.info("delete tetapan %s", kunci)
        try:
            with container.conn.transaction():
                container.tetapan_service.delete(kunci)
            return empty(200)
        except Exception:
            log.exception("failed to delete tetapan")
            return empty(400)

    @app.route(route_path(app, "tetapan-types"), methods=["GET"], endpoint="tetapan_types_group_names")
    def find_all_group_names():
        log.info("find all tetapan type group names")
        try:
            return json_ok(list(container.tetapan_type_service.find_all_group_names()))
        except Exception:
            log.exception("failed to retrieve tetapan type group names")
            return empty(500)

    @app.route(route_path(app, "tetapan-types/<group_name>"), methods=["GET"], endpoint="tetapan_types_by_group")
    def find_by_group_name(group_name: str):
        log.info("find tetapan type by group name %s", group_name)
        try:
            return json_ok([t.to_json() for t in container.tetapan_type_service.find_by_group_name(group_name)])
        except Exception:
            log.exception("failed to retrieve tetapan type by group name")
            return empty(500)
