from typing import Any, Iterable, Mapping, Optional, Sequence


def resolve_field(data: Any, candidates: Iterable[Sequence[str]]) -> Optional[Any]:
    """
    Return the first non-empty value found at one of the candidate paths.

    Each candidate is a tuple of keys walked from the top of ``data``,
    e.g. ``("data", "payment_link")``. Paths that cross a non-mapping
    value are skipped.
    """
    for path in candidates:
        value = data
        for key in path:
            if not isinstance(value, Mapping):
                value = None
                break
            value = value.get(key)

        if value not in (None, ""):
            return value

    return None


def first_param(params: Mapping[str, str], aliases: Iterable[str]) -> Optional[str]:
    """Resolve a logical query parameter that may arrive under several names."""
    for name in aliases:
        value = params.get(name)
        if value:
            return value
    return None
