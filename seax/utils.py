"""Small helpers shared by the client and settings."""

from pydantic import ValidationError


def validation_message(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line.

    Errors raised by our own validators are reported verbatim; the rest are
    prefixed with the dotted location of the offending field.
    """
    parts: list[str] = []
    for err in exc.errors():
        cause = (err.get("ctx") or {}).get("error")
        if cause is not None:
            parts.append(str(cause))
            continue
        loc = ".".join(str(p) for p in err.get("loc", ())) or "value"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)
