"""Example: drive the service layer directly, without Flask.

Usage: python -m examples.example_usage <employee name>
"""

import importlib
import sys

from config import get_settings_module

from src.payroll_ledger.payroll_ledger.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    name = sys.argv[1] if len(sys.argv) > 1 else "Alice"
    report = container.payroll_report_service.build_ledger_report(employee_name=name)
    for month in report.summary:
        print(f"{month['month']}: {month['entries']} days, {month['total_hours']} h, {month['total_pay']:.2f}")


if __name__ == "__main__":
    main()
