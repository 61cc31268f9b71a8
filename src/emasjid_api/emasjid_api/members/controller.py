from __future__ import annotations

from flask import Flask, request

from ..common.http import empty, int_arg, json_body, json_ok, route_path
from ..common.validators import parse_id_list
from ..core.constants import DEFAULT_DIRECTION, DEFAULT_PAGE, DEFAULT_PAGE_SIZE, DEFAULT_SORT
from ..core.exceptions import NotFoundError
from ..container import Container
from .model import Member


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "members/findAll"), methods=["GET"], endpoint="members_find_all")
    def find_all():
        log.info("find all member")
        try:
            page = container.member_service.find_all(
                page=int_arg("page", DEFAULT_PAGE),
                size=int_arg("size", DEFAULT_PAGE_SIZE),
                sort=request.args.get("sort") or DEFAULT_SORT,
                direction=request.args.get("direction") or DEFAULT_DIRECTION,
            )
            return json_ok(page.to_json())
        except Exception:
            log.exception("failed to retrieve member list")
            return empty(400)

    @app.route(route_path(app, "members/find/<int:member_id>"), methods=["GET"], endpoint="members_find_one")
    def find_one(member_id: int):
        log.info("find member by id %s", member_id)
        try:
            return json_ok(container.member_service.find_one(member_id).to_json())
        except NotFoundError:
            return empty(404)
        except Exception:
            log.exception("failed to retrieve member %s", member_id)
            return empty(400)

    @app.route(route_path(app, "members/findBy"), methods=["GET"], endpoint="members_find_by")
    def find_by():
        log.info("find member by query")
        try:
            members = container.member_service.find_by_query(request.args.get("query", ""))
            return json_ok([m.to_json() for m in members])
        except Exception:
            log.exception("failed to retrieve member")
            return empty(404)

    @app.route(route_path(app, "members/findByTag"), methods=["GET"], endpoint="members_find_by_tag")
    def find_by_tag():
        log.info("find member by tag id")
        try:
            tag_ids = parse_id_list(request.args.get("tagId"), "tagId")
            members = container.member_service.find_by_tag_ids(tag_ids)
            return json_ok([m.to_json() for m in members])
        except Exception:
            log.exception("failed to retrieve member by tag")
            return empty(404)

    @app.route(route_path(app, "members/count"), methods=["GET"], endpoint="members_count")
    def count():
        log.info("count all member")
        try:
            return json_ok(container.member_service.count())
        except Exception:
            log.exception("failed to count member")
            return empty(404)

    @app.route(route_path(app, "members/save"), methods=["POST"], endpoint="members_save")
    def save():
        log.info("save member")
        try:
            member = Member.from_json(json_body())
            with container.conn.transaction():
                saved = container.member_service.save(member)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save member")
            return empty(400)

    @app.route(route_path(app, "members/saveBulk"), methods=["POST"], endpoint="members_save_bulk")
    def save_bulk():
        log.info("save bulk member")
        try:
            members = [Member.from_json(m) for m in json_body()]
            with container.conn.transaction():
                ok = container.member_service.save_bulk(members)
            return json_ok(ok)
        except Exception:
            log.exception("failed to save bulk member")
            return empty(400)
