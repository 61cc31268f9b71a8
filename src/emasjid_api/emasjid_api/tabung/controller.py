from __future__ import annotations

from flask import Flask

from ..common.http import empty, int_arg, json_body, json_ok, required_int_arg, route_path
from ..core.constants import KUTIPAN_DEFAULT_PAGE, KUTIPAN_DEFAULT_PAGE_SIZE
from ..core.exceptions import NotFoundError
from ..container import Container
from .model import Kutipan, Tabung, TabungType


def register(app: Flask, container: Container) -> None:
    log = app.logger

    # -------- Tabung types --------
    @app.route(route_path(app, "tabung-types"), methods=["GET"], endpoint="tabung_types_find_all")
    def find_all_types():
        log.info("get tabung types")
        try:
            return json_ok([t.to_json() for t in container.tabung_service.find_all_types()])
        except Exception:
            log.exception("failed to retrieve tabung types")
            return empty(500)

    @app.route(route_path(app, "tabung-types"), methods=["POST"], endpoint="tabung_types_save")
    def save_type():
        log.info("save tabung type")
        try:
            tabung_type = TabungType.from_json(json_body())
            with container.conn.transaction():
                saved = container.tabung_service.save_type(tabung_type)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save tabung type")
            return empty(400)

    @app.route(route_path(app, "tabung-types/<int:type_id>"), methods=["DELETE"], endpoint="tabung_types_delete")
    def delete_type(type_id: int):
        log.info("delete tabung type %s", type_id)
        try:
            with container.conn.transaction():
                container.tabung_service.delete_type(type_id)
            return empty(200)
        except Exception:
            log.exception("failed to delete tabung type")
            return empty(400)

    # -------- Tabung --------
    @app.route(route_path(app, "tabung"), methods=["GET"], endpoint="tabung_find_all")
    def find_all():
        log.info("get tabung list")
        try:
            return json_ok([t.to_json() for t in container.tabung_service.find_all()])
        except Exception:
            log.exception("failed to retrieve tabung list")
            return empty(500)

    @app.route(route_path(app, "tabung/<int:tabung_id>"), methods=["GET"], endpoint="tabung_find_by_id")
    def find_by_id(tabung_id: int):
        log.info("get tabung by id %s", tabung_id)
        try:
            return json_ok(container.tabung_service.find_by_id(tabung_id).to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to retrieve tabung")
            return empty(400)

    @app.route(route_path(app, "tabung"), methods=["POST"], endpoint="tabung_save")
    def save():
        log.info("save tabung")
        try:
            tabung = Tabung.from_json(json_body())
            with container.conn.transaction():
                saved = container.tabung_service.save(tabung)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save tabung")
            return empty(400)

    @app.route(route_path(app, "tabung/<int:tabung_id>"), methods=["DELETE"], endpoint="tabung_delete")
    def delete(tabung_id: int):
        log.info("delete tabung %s", tabung_id)
        try:
            with container.conn.transaction():
                container.tabung_service.delete(tabung_id)
            return empty(200)
        except Exception:
            log.exception("failed to delete tabung")
            return empty(400)

    # -------- Kutipan --------
    @app.route(
        route_path(app, "kutipan/tabung/<int:tabung_id>"),
        methods=["GET"],
        endpoint="kutipan_find_by_tabung",
    )
    def find_kutipan_by_tabung(tabung_id: int):
        log.info("get kutipan list by tabung id %s", tabung_id)
        try:
            return json_ok([k.to_json() for k in container.kutipan_service.find_all_by_tabung_id(tabung_id)])
        except Exception:
            log.exception("failed to retrieve kutipan list by tabung id")
            return empty(500)

    @app.route(
        route_path(app, "kutipan/tabung/<int:tabung_id>/betweenCreateDate"),
        methods=["GET"],
        endpoint="kutipan_find_between",
    )
    def find_kutipan_between(tabung_id: int):
        log.info("get kutipan list by tabung id %s between create date", tabung_id)
        try:
            page = container.kutipan_service.find_all_between(
                tabung_id=tabung_id,
                from_date=required_int_arg("fromDate"),
                to_date=required_int_arg("toDate"),
                page=int_arg("page", KUTIPAN_DEFAULT_PAGE),
                size=int_arg("size", KUTIPAN_DEFAULT_PAGE_SIZE),
            )
            return json_ok(page.to_json())
        except Exception:
            log.exception("failed to retrieve kutipan list between create date")
            return empty(400)

    @app.route(route_path(app, "kutipan/<int:kutipan_id>"), methods=["GET"], endpoint="kutipan_find_by_id")
    def find_kutipan(kutipan_id: int):
        log.info("get kutipan by id %s", kutipan_id)
        try:
            return json_ok(container.kutipan_service.find_by_id(kutipan_id).to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to retrieve kutipan")
            return empty(400)

    @app.route(route_path(app, "kutipan"), methods=["POST"], endpoint="kutipan_create")
    def create_kutipan():
        log.info("save kutipan")
        try:
            kutipan = Kutipan.from_json(json_body())
            with container.conn.transaction():
                saved = container.kutipan_service.create(kutipan)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save kutipan")
            return empty(400)

    @app.route(route_path(app, "kutipan/<int:kutipan_id>"), methods=["PUT"], endpoint="kutipan_update")
    def update_kutipan(kutipan_id: int):
        log.info("update kutipan %s", kutipan_id)
        try:
            kutipan = Kutipan.from_json(json_body())
            with container.conn.transaction():
                saved = container.kutipan_service.update(kutipan_id, kutipan)
            return json_ok(saved.to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to update kutipan")
            return empty(400)

    @app.route(route_path(app, "kutipan/<int:kutipan_id>"), methods=["DELETE"], endpoint="kutipan_delete")
    def delete_kutipan(kutipan_id: int):
        log.info("delete kutipan %s", kutipan_id)
        try:
            with container.conn.transaction():
                message = container.kutipan_service.delete(kutipan_id)
            return json_ok(message)
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to delete kutipan")
            return empty(400)
