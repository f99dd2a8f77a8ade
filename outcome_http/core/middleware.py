"""
Trace id middleware.

Reuses the incoming correlation header or generates a UUID, exposes it as
`request.state.trace_id` and echoes it on the response.
"""
from __future__ import annotations

import uuid


class TraceIdMiddleware:
    def __init__(self, app, header_name: str = "X-Request-Id") -> None:  # type: ignore[no-untyped-def]
        self.app = app
        self.header_name = header_name
        self._header_key = header_name.lower().encode("latin-1")

    async def __call__(self, scope, receive, send):  # type: ignore[no-untyped-def]
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        trace_id = None
        for key, value in scope.get("headers") or []:
            if key.lower() == self._header_key and value:
                trace_id = value.decode("latin-1")
                break
        if not trace_id:
            trace_id = str(uuid.uuid4())

        scope.setdefault("state", {})["trace_id"] = trace_id

        async def send_wrapper(message):  # type: ignore[no-untyped-def]
            if message.get("type") == "http.response.start":
                headers = list(message.get("headers") or [])
                if not any(k.lower() == self._header_key for k, _ in headers):
                    headers.append((self.header_name.encode("latin-1"), trace_id.encode("latin-1")))
                message = {**message, "headers": headers}
            await send(message)

        await self.app(scope, receive, send_wrapper)


__all__ = ["TraceIdMiddleware"]
