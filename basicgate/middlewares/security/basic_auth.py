from typing import TYPE_CHECKING

from starlette import status
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Receive, Scope, Send
from starlette.websockets import WebSocketClose

from basicgate.logger import get_logger
from basicgate.security.authentication.auth import AuthFailure
from basicgate.security.authentication.basic_auth import parse_authorization

if TYPE_CHECKING:
    from basicgate.basicgate import BasicAuth

logger = get_logger(__name__)


class BasicAuthMiddleware:
    """Security middleware guarding an app with HTTP Basic Authentication.

    Each request goes through the same steps:
    1. Missing or malformed ``Authorization`` header: invalid scheme response
    2. Credentials refused by the authenticator: invalid credentials response
    3. Otherwise the wrapped app is called with the request untouched

    Websocket connections are closed with a policy violation instead of
    receiving the failure responses.
    """

    def __init__(self, app: ASGIApp, auth: "BasicAuth") -> None:
        self.app = app
        self.auth = auth

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] not in ("http", "websocket"):
            await self.app(scope, receive, send)
            return

        logger.debug("Call BasicAuthMiddleware")

        username, password, ok = parse_authorization(
            Headers(scope=scope).get("authorization")
        )
        if not ok:
            await self._reject(AuthFailure.INVALID_SCHEME, scope, receive, send)
            return

        if not await self._verify(username, password):
            await self._reject(AuthFailure.INVALID_CREDENTIALS, scope, receive, send)
            return

        await self.app(scope, receive, send)

    async def _verify(self, username: str, password: str) -> bool:
        try:
            return await self.auth.verify(username, password)
        except Exception:
            logger.exception("BasicAuth - authenticator failed, rejecting request")
            return False

    async def _reject(
        self, failure: AuthFailure, scope: Scope, receive: Receive, send: Send
    ) -> None:
        client = scope.get("client")
        logger.info(
            "BasicAuth - request rejected",
            failure=failure.value,
            path=scope.get("path"),
            client_host=client[0] if client else None,
        )

        if scope["type"] == "websocket":
            websocket_close = WebSocketClose(code=status.WS_1008_POLICY_VIOLATION)
            await websocket_close(scope, receive, send)
            return

        if failure is AuthFailure.INVALID_SCHEME:
            await self.auth.send_invalid_scheme_response(scope, receive, send)
        else:
            await self.auth.send_invalid_credentials_response(scope, receive, send)
