from __future__ import annotations

from flask import Flask

from ..common.http import empty, json_body, json_ok, route_path
from ..container import Container
from .model import Dependent


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "dependents/save/<int:member_id>"), methods=["POST"], endpoint="dependents_save")
    def save(member_id: int):
        log.info("save dependent for member %s", member_id)
        try:
            dependent = Dependent.from_json(json_body())
            with container.conn.transaction():
                saved = container.dependent_service.save(dependent, member_id)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save dependent")
            return empty(400)

    @app.route(
        route_path(app, "dependents/delete/<int:dependent_id>"),
        methods=["DELETE"],
        endpoint="dependents_delete",
    )
    def delete(dependent_id: int):
        log.info("delete dependent %s", dependent_id)
        try:
            with container.conn.transaction():
                container.dependent_service.delete_by_id(dependent_id)
            return empty(200)
        except Exception:
            log.exception("failed to delete dependent")
            return empty(400)

    @app.route(
        route_path(app, "dependents/findByMemberId/<int:member_id>"),
        methods=["GET"],
        endpoint="dependents_find_by_member",
    )
    def find_by_member_id(member_id: int):
        log.info("find all dependent by member id %s", member_id)
        try:
            dependents = container.dependent_service.find_by_member_id(member_id)
            return json_ok([d.to_json() for d in dependents])
        except Exception:
            log.exception("failed to find dependents")
            return empty(404)
