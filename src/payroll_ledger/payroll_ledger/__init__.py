"""Payroll Ledger package.

This package is organized by feature modules (departments, employees, entries,
holidays, payroll) with a thin Flask JSON controller layer on top of the
service/repository layers. The ledger recalculation itself lives in
``payroll.engine`` and is free of I/O.
"""
