from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, body_date, json_body, optional_str
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/entries", methods=["POST"], endpoint="upsert_entry")
    @api_errors
    def upsert_entry():
        data = json_body()
        employee = container.entry_service.upsert_entry(
            employee_name=data.get("empName") or "",
            work_date=body_date(data, "date"),
            work_type=optional_str(data, "workType"),
            start_time=optional_str(data, "startTime"),
            end_time=optional_str(data, "endTime"),
            hours=data.get("hours"),
        )
        return jsonify(employee.to_dict())

    @app.route("/api/entries/mass", methods=["POST"], endpoint="mass_upsert_entries")
    @api_errors
    def mass_upsert_entries():
        data = json_body()
        employees = container.entry_service.mass_upsert(
            department=data.get("department") or "",
            work_date=body_date(data, "date"),
            hours=data.get("hours"),
        )
        return jsonify([e.to_dict() for e in employees])
