"""
Parsing of directive strings given on the command line.

A directive string is ``kind:field=value``, ``range:field=low..high``,
``query_string:text`` or ``match_all:``.
"""

from typing import Any, Dict, Optional

from ...core.entities import QueryDirective
from ...core.interfaces import DriverInterface

FIELD_KINDS = (
    "match",
    "match_phrase",
    "match_phrase_prefix",
    "term",
    "fuzzy",
    "wildcard",
    "regexp",
    "range",
)


def parse_directive(driver: DriverInterface, text: str) -> Optional[QueryDirective]:
    """
    Build a directive from a command line string.

    Args:
        driver: Driver whose factories build the directive
        text: Directive string

    Returns:
        Optional[QueryDirective]: The directive; None from a disabled driver

    Raises:
        ValueError: If the string cannot be parsed
    """
    kind, separator, rest = text.partition(":")
    if not separator:
        raise ValueError(f"Directive '{text}' must look like kind:field=value")

    kind = kind.strip().lower().replace("-", "_")
    if kind == "query_string":
        return driver.query_string(rest)
    if kind == "match_all":
        return driver.match_all()
    if kind not in FIELD_KINDS:
        raise ValueError(f"Unsupported directive kind: {kind}")

    field, equals, value = rest.partition("=")
    field = field.strip()
    if not equals or not field:
        raise ValueError(f"Directive '{text}' must look like {kind}:field=value")

    if kind == "term":
        return driver.term({field: value})
    if kind == "range":
        return driver.range(field, _range_args(value))
    return getattr(driver, kind)(field, value)


def _range_args(value: str) -> Dict[str, Any]:
    """Turn ``low..high`` into inclusive range bounds; either side may be empty."""
    low, dots, high = value.partition("..")
    if not dots:
        raise ValueError(f"Range '{value}' must look like low..high")

    args: Dict[str, Any] = {}
    if low:
        args["gte"] = low
    if high:
        args["lte"] = high
    return args
