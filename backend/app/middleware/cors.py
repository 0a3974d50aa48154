"""Permissive CORS headers on every response."""

from starlette.datastructures import MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

DEFAULT_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


class CORSHeadersMiddleware:
    """ASGI middleware stamping fixed CORS headers onto all HTTP responses.

    Unlike Starlette's CORSMiddleware this does not depend on an ``Origin``
    request header and never answers preflight requests itself; OPTIONS is
    left to the routes.
    """

    def __init__(self, app: ASGIApp, headers: dict[str, str] | None = None) -> None:
        """Initialize CORS middleware.

        Args:
            app: Wrapped ASGI app
            headers: Header overrides (default: DEFAULT_CORS_HEADERS)
        """
        self.app = app
        self._headers = headers or DEFAULT_CORS_HEADERS

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in self._headers.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_cors)
