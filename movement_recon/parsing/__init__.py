"""Parsing of raw movement rows."""

from movement_recon.parsing.coerce import (
    Parsed,
    to_datetime,
    to_decimal,
    to_int,
    to_str,
    try_parse_datetime,
    try_parse_decimal,
    try_parse_int,
)
from movement_recon.parsing.transaction import TransactionParser

__all__ = [
    "Parsed",
    "TransactionParser",
    "to_datetime",
    "to_decimal",
    "to_int",
    "to_str",
    "try_parse_datetime",
    "try_parse_decimal",
    "try_parse_int",
]
