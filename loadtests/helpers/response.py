"""Response error extraction for load test observability.

Every API error body has the shape ``{"message": "...", "errors": ...}``
where ``errors`` is present only on 400s: a ``{"field": ["msg"]}`` mapping
for business-rule failures or a list of Pydantic error dicts for malformed
requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a compact, human-readable message from an API error response."""
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    message = body.get("message", "")
    errors = body.get("errors")

    if isinstance(errors, dict):
        details = " | ".join(f"{field}: {', '.join(msgs)}" for field, msgs in errors.items())
        return f"{message}: {details}" if message else details

    if isinstance(errors, list):
        parts = []
        for err in errors:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return f"{message}: {' | '.join(parts)}" if message else " | ".join(parts)

    return message or str(body)[:300]
