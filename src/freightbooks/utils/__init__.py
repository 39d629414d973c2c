"""Utility functions for freightbooks."""

from freightbooks.utils.date_parser import parse_date, get_date_range
from freightbooks.utils.amount_parser import parse_amount, coerce_amount, coerce_quantity

__all__ = ["parse_date", "get_date_range", "parse_amount", "coerce_amount", "coerce_quantity"]
