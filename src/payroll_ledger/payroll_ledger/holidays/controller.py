from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, body_date, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @api_errors
    def list_holidays():
        return jsonify([h.to_dict() for h in container.holiday_service.list_holidays()])

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @api_errors
    def add_holiday():
        data = json_body()
        holiday = container.holiday_service.add_holiday(holiday_date=body_date(data, "date"))
        return jsonify(holiday.to_dict()), 201
