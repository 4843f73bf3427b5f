"""Constants and business limits.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

MIN_BASE_SALARY = 1000
# Largest value of a DECIMAL(12, 2) salary column.
MAX_BASE_SALARY = Decimal("9999999999.99")
MAX_NAME_LENGTH = 50

MIN_DEPARTMENT_HOURS = 1
MAX_DEPARTMENT_HOURS = 24
MAX_CUSTOM_HOURS = 24

# Salaries and declared hours are stored with two decimals.
AMOUNT_PLACES = 2
MAX_WORK_TYPE_LENGTH = 20

# Monday..Saturday are paid working days; Sunday never is.
REGULAR_DAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

MONEY_PLACES = 2
