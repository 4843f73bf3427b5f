from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, body_date, json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/departments", methods=["GET"], endpoint="list_departments")
    @api_errors
    def list_departments():
        return jsonify([d.to_dict() for d in container.department_service.list_departments()])

    @app.route("/api/departments", methods=["POST"], endpoint="create_department")
    @api_errors
    def create_department():
        data = json_body()
        department = container.department_service.create_department(
            name=data.get("name") or "",
            hours=data.get("hours"),
        )
        return jsonify(department.to_dict()), 201

    @app.route("/api/departments/<name>", methods=["DELETE"], endpoint="delete_department")
    @api_errors
    def delete_department(name: str):
        container.department_service.delete_department(name=name)
        return jsonify({"message": "Department deleted"})

    @app.route("/api/departments/<name>/hours", methods=["PUT"], endpoint="change_department_hours")
    @api_errors
    def change_department_hours(name: str):
        data = json_body()
        department = container.department_service.change_hours(
            name=name,
            hours=data.get("hours"),
            effective_date=body_date(data, "effectiveDate"),
        )
        return jsonify(department.to_dict())
