from __future__ import annotations


def _title(segment: str) -> str:
    return segment[:1].upper() + segment[1:]


def camel_case(name: str) -> str:
    """
    snake_case -> UpperCamelCase, with ``id`` segments fully upper-cased.

    ``user_id`` -> ``UserID``; empty segments (``a__b``) are dropped.
    """
    out = ""
    for segment in name.split("_"):
        if not segment:
            continue
        if segment.lower() == "id":
            out += segment.upper()
        else:
            out += _title(segment)
    return out


def small_camel_case(name: str) -> str:
    """snake_case -> lowerCamelCase. The first segment is kept verbatim."""
    head, *rest = name.split("_")
    return head + "".join(_title(segment) for segment in rest if segment)
