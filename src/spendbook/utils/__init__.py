"""Utility functions for spendbook."""

from spendbook.utils.date_parser import parse_date, extract_date_time_from_description
from spendbook.utils.amount_parser import validate_amount, validate_balance, parse_amount
from spendbook.utils.csv_rows import normalize_csv_data, get_csv_field

__all__ = [
    "parse_date",
    "extract_date_time_from_description",
    "validate_amount",
    "parse_amount",
    "validate_balance",
    "normalize_csv_data",
    "get_csv_field",
]
