"""
Transport-facing error body (RFC 7807 problem details) and the request
context the mapping engine reads.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, ConfigDict, Field

PROBLEM_MEDIA_TYPE = "application/problem+json"

_STANDARD_MEMBERS = ("type", "title", "status", "detail", "instance")


class ProblemDescription(BaseModel):
    """Mapped error representation. Built fresh for every failed request."""
    model_config = ConfigDict(frozen=True)

    status: int
    title: str
    detail: Optional[str] = None
    type: str = "about:blank"
    instance: Optional[str] = None
    extensions: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """
        JSON body with extensions flattened next to the standard members.
        Standard members win over an extension of the same name.
        """
        payload: dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "status": self.status,
        }
        if self.detail is not None:
            payload["detail"] = self.detail
        if self.instance is not None:
            payload["instance"] = self.instance
        for key, value in self.extensions.items():
            if key in _STANDARD_MEMBERS:
                continue
            payload[key] = jsonable_encoder(value)
        return payload


@dataclass(frozen=True)
class RequestContext:
    """Read-only per-request data: correlation id and logical path."""
    trace_id: str
    path: str
