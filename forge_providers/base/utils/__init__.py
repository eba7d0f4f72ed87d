"""Payload access helpers shared by parsers."""

from .payload import (
    as_list,
    as_mapping,
    int_or,
    parse_tool_arguments,
    payload_id,
    payload_timestamp,
    str_or_none,
)

__all__ = [
    "as_list",
    "as_mapping",
    "int_or",
    "parse_tool_arguments",
    "payload_id",
    "payload_timestamp",
    "str_or_none",
]
