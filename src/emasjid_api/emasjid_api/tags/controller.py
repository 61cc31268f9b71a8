from __future__ import annotations

from flask import Flask

from ..common.http import empty, json_body, json_ok, route_path
from ..container import Container
from .model import Tag


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "tags/findAll"), methods=["GET"], endpoint="tags_find_all")
    def find_all():
        log.info("find all tag")
        try:
            return json_ok([t.to_json() for t in container.tag_service.list_all()])
        except Exception:
            log.exception("failed to retrieve tag list")
            return empty(404)

    @app.route(route_path(app, "tags/save"), methods=["POST"], endpoint="tags_save")
    def save():
        log.info("save tag")
        try:
            tag = Tag.from_json(json_body())
            with container.conn.transaction():
                saved = container.tag_service.save(tag)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save tag")
            return empty(400)

    @app.route(route_path(app, "tags/delete/<int:tag_id>"), methods=["DELETE"], endpoint="tags_delete")
    def delete(tag_id: int):
        log.info("delete tag %s", tag_id)
        try:
            with container.conn.transaction():
                container.tag_service.delete(tag_id)
            return empty(200)
        except Exception:
            log.exception("failed to delete tag")
            return empty(400)
