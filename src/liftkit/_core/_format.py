from typing import Any

_PLACEHOLDER = "..."


def value_repr(v: Any, max_length: int) -> str:
    """Repr of `v`, cut to `max_length` characters with a trailing `...`."""
    text = repr(v)
    if len(text) <= max_length:
        return text
    keep = max(max_length - len(_PLACEHOLDER), 0)
    return text[:keep] + _PLACEHOLDER
