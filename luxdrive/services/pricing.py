"""Rental pricing.

Pure functions with no database access. All money is ``Decimal`` rounded
to two places with round-half-up, the way amounts are shown to customers.
"""

from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP
import math

CENT = Decimal('0.01')

PriceLine = namedtuple('PriceLine', ['price_per_day', 'rental_days'])


def to_money(value):
    """Convert a number to a 2-place Decimal using currency rounding."""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def rental_days(pickup_date, return_date):
    """Number of billable days between pickup and return, never below 1."""
    seconds = (return_date - pickup_date).total_seconds()
    days = math.ceil(seconds / 86400)
    return max(1, days)


def subtotal(price_per_day, days):
    return to_money(Decimal(str(price_per_day)) * days)


def total(lines):
    """Sum the subtotals of ``PriceLine``-like items."""
    amount = Decimal('0.00')
    for line in lines:
        amount += subtotal(line.price_per_day, line.rental_days)
    return to_money(amount)
