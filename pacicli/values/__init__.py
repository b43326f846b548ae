"""
Typed wire values.

Scalar types that convert losslessly between the API's wire text and
structured Python values.
"""

from pacicli.values.address import IPAddr, IPAddrList
from pacicli.values.base import SupportsText, TextValue
from pacicli.values.timestamp import (
    ARG_TIMESTAMP_HELP,
    DATA_TIMESTAMP_FORMAT,
    Timestamp,
    parse_argument_timestamp,
    parse_data_timestamp,
    parse_unix_date,
)

__all__ = [
    "SupportsText",
    "TextValue",
    "IPAddr",
    "IPAddrList",
    "Timestamp",
    "DATA_TIMESTAMP_FORMAT",
    "ARG_TIMESTAMP_HELP",
    "parse_data_timestamp",
    "parse_unix_date",
    "parse_argument_timestamp",
]
