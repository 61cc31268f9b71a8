from __future__ import annotations

from flask import Flask

from ..common.http import empty, json_body, json_ok, route_path
from ..container import Container
from .model import PaymentHistory


def register(app: Flask, container: Container) -> None:
    log = app.logger

    @app.route(route_path(app, "payment/save"), methods=["POST"], endpoint="payment_save")
    def save():
        log.info("save payment")
        try:
            payment = PaymentHistory.from_json(json_body())
            with container.conn.transaction():
                saved = container.payment_service.save(payment)
            return json_ok(saved.to_json())
        except Exception:
            log.exception("failed to save payment")
            return empty(400)

    @app.route(route_path(app, "payment/delete/<int:member_id>"), methods=["DELETE"], endpoint="payment_delete")
    def delete(member_id: int):
        log.info("delete current year payment of member %s", member_id)
        try:
            with container.conn.transaction():
                container.payment_service.delete_current_year(member_id)
            return empty(204)
        except Exception:
            log.exception("failed to delete payment")
            return empty(400)

    @app.route(
        route_path(app, "payment/totalMembersPaidForCurrentYear"),
        methods=["GET"],
        endpoint="payment_total_paid",
    )
    def total_members_paid_for_current_year():
        log.info("total members paid for current year")
        try:
            return json_ok(container.payment_service.total_members_paid_for_current_year())
        except Exception:
            log.exception("failed to count paid members")
            return empty(500)
