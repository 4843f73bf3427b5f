from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..common.formatting import quantize_money
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]


class PayrollReportService:
    """Read-side: ledger rows of one employee with per-month totals."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def build_ledger_report(
        self,
        *,
        employee_name: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> ReportData:
        if start and end and start > end:
            raise ValidationError("Report start must not be after end")

        employee = self._employees.get_by_name(employee_name)
        if not employee:
            raise NotFoundError(f"Employee {employee_name} not found")

        out_rows: list[dict] = []
        summary_map: dict[str, dict] = {}

        for entry in employee.entries:
            if start and entry.work_date < start:
                continue
            if end and entry.work_date > end:
                continue

            out_rows.append(entry.to_dict())

            month = entry.work_date.strftime("%Y-%m")
            s = summary_map.get(month)
            if not s:
                s = {"month": month, "entries": 0, "total_hours": Decimal(0), "total_pay": Decimal(0)}
                summary_map[month] = s
            s["entries"] += 1
            s["total_hours"] += entry.hours
            s["total_pay"] += entry.pay

        summary = []
        for month in sorted(summary_map):
            s = summary_map[month]
            summary.append(
                {
                    "month": month,
                    "entries": s["entries"],
                    "total_hours": float(s["total_hours"]),
                    "total_pay": float(quantize_money(s["total_pay"])),
                }
            )

        out_rows.sort(key=lambda r: r["date"])
        return ReportData(rows=out_rows, summary=summary)
