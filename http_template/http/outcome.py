"""
HTTP Outcome

Transient view of a transport response, consumed within one execute call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

# Responses with these status codes never carry an entity
NO_ENTITY_STATUS_CODES = frozenset({204, 304})

HTTP_OK = 200


@dataclass
class HttpOutcome:
    """
    Status and raw entity of a response.

    content is None when the response carries no entity at all, which is
    different from an entity of zero length.
    """
    status_code: int
    content: Optional[bytes]
    headers: dict[str, str] = field(default_factory=dict)
    url: str = ""
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        """Only an exact 200 counts as success."""
        return self.status_code == HTTP_OK

    @property
    def has_entity(self) -> bool:
        return self.content is not None

    def text(self, charset: str) -> str:
        """Decode the entity with the given charset."""
        if self.content is None:
            return ""
        return self.content.decode(charset)

    @classmethod
    def from_response(cls, response: Any) -> "HttpOutcome":
        """Build an outcome from a requests.Response."""
        status_code = response.status_code
        content = None
        if status_code not in NO_ENTITY_STATUS_CODES:
            content = response.content
        elapsed = getattr(response, "elapsed", None)
        return cls(
            status_code=status_code,
            content=content,
            headers=dict(response.headers or {}),
            url=str(response.url or ""),
            elapsed_ms=elapsed.total_seconds() * 1000 if elapsed is not None else 0.0,
        )
