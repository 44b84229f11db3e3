from __future__ import annotations


class ContentIntegrityError(Exception):
    """Base class for errors raised by the content integrity analyzers."""


class InvalidInputError(ContentIntegrityError, TypeError):
    """Raised when an analyzer receives something other than text."""


def require_text(value: object, name: str = "candidate") -> str:
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a str, got {type(value).__name__}")
    return value


def require_sources(sources: object) -> tuple[str, ...]:
    # A bare string is iterable, but iterating it would compare single characters.
    if isinstance(sources, (str, bytes)) or sources is None:
        raise InvalidInputError(f"sources must be a sequence of str, got {type(sources).__name__}")
    try:
        items = tuple(sources)  # type: ignore[arg-type]
    except TypeError as exc:
        raise InvalidInputError(f"sources must be a sequence of str, got {type(sources).__name__}") from exc
    for i, item in enumerate(items):
        require_text(item, f"sources[{i}]")
    return items
