from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import api_errors, body_date, json_body, query_date
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @api_errors
    def list_employees():
        return jsonify([e.to_dict() for e in container.employee_service.list_employees()])

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @api_errors
    def create_employee():
        data = json_body()
        employee = container.employee_service.create_employee(
            name=data.get("name") or "",
            base_salary=data.get("baseSalary"),
            start_date=body_date(data, "startDate"),
            department=data.get("department") or "",
        )
        return jsonify(employee.to_dict()), 201

    @app.route("/api/employees/<name>", methods=["GET"], endpoint="get_employee")
    @api_errors
    def get_employee(name: str):
        return jsonify(container.employee_service.get_employee(name).to_dict())

    @app.route("/api/employees/<name>/department", methods=["PUT"], endpoint="transfer_employee")
    @api_errors
    def transfer_employee(name: str):
        data = json_body()
        employee = container.employee_service.transfer(name=name, department=data.get("department") or "")
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<name>/inactive", methods=["PUT"], endpoint="terminate_employee")
    @api_errors
    def terminate_employee(name: str):
        data = json_body()
        employee = container.employee_service.terminate(name=name, end_date=body_date(data, "endDate"))
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<name>/salary", methods=["PUT"], endpoint="change_employee_salary")
    @api_errors
    def change_employee_salary(name: str):
        data = json_body()
        employee = container.employee_service.change_salary(
            name=name,
            salary=data.get("salary"),
            effective_date=body_date(data, "effectiveDate"),
        )
        return jsonify(employee.to_dict())

    @app.route("/api/employees/<name>/report", methods=["GET"], endpoint="employee_report")
    @api_errors
    def employee_report(name: str):
        report = container.payroll_report_service.build_ledger_report(
            employee_name=name,
            start=query_date("start"),
            end=query_date("end"),
        )
        return jsonify({"rows": report.rows, "summary": report.summary})
