"""HTTP Basic Authentication (RFC 7617) for ASGI applications.

A ``BasicAuth`` instance holds the whole configuration of a gate: the
authenticator, the charset and realm announced in the ``WWW-Authenticate``
challenge, the two responses sent on failure and the optional static users.
It is built once, usually at startup, and shared by every request.

The ``WWW-Authenticate`` header is only sent when both ``charset`` and
``realm`` are set.

    auth = BasicAuth.custom(charset="UTF-8", realm="Private", users={"alice": "s3cret"})
    app = auth.authenticate(app)
"""

import inspect
from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from types import MappingProxyType

from starlette.datastructures import MutableHeaders
from starlette.responses import PlainTextResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from basicgate.middlewares.security.basic_auth import BasicAuthMiddleware
from basicgate.security.authentication.auth import Authenticator
from basicgate.security.authentication.verifier import default_authenticator

DEFAULT_CHARSET = "UTF-8"


def http_error(message: str, status_code: int = HTTPStatus.UNAUTHORIZED) -> ASGIApp:
    """Plain text error response, the same shape for every caller."""

    async def app(scope: Scope, receive: Receive, send: Send) -> None:
        response = PlainTextResponse(
            content=f"{message}\n",
            status_code=status_code,
            headers={"X-Content-Type-Options": "nosniff"},
        )
        await response(scope, receive, send)

    return app


@dataclass(frozen=True, slots=True)
class BasicAuth:
    authenticator: Authenticator
    charset: str
    invalid_credentials_response: ASGIApp
    invalid_scheme_response: ASGIApp
    realm: str
    users: Mapping[str, str]

    @classmethod
    def default(cls, users: Mapping[str, str] | None = None) -> "BasicAuth":
        """Gate over a static user table, with the default responses and no realm."""
        users = MappingProxyType(dict(users or {}))

        return cls(
            authenticator=default_authenticator(users),
            # RFC 7617: only `UTF-8` is allowed.
            charset=DEFAULT_CHARSET,
            invalid_credentials_response=http_error("Invalid username and/or password!"),
            invalid_scheme_response=http_error("Invalid authentication scheme!"),
            realm="",
            users=users,
        )

    @classmethod
    def custom(
        cls,
        authenticator: Authenticator | None = None,
        charset: str | None = None,
        invalid_credentials_response: ASGIApp | None = None,
        invalid_scheme_response: ASGIApp | None = None,
        realm: str | None = "",
        users: Mapping[str, str] | None = None,
    ) -> "BasicAuth":
        """Gate with every option customizable.

        Any option left to ``None`` falls back to its default, so this never
        fails. An explicit empty ``charset`` is kept and disables the challenge
        header.
        """
        default_config = cls.default(users)

        return cls(
            authenticator=authenticator
            if authenticator is not None
            else default_config.authenticator,
            charset=charset if charset is not None else default_config.charset,
            invalid_credentials_response=invalid_credentials_response
            if invalid_credentials_response is not None
            else default_config.invalid_credentials_response,
            invalid_scheme_response=invalid_scheme_response
            if invalid_scheme_response is not None
            else default_config.invalid_scheme_response,
            realm=realm or "",
            users=default_config.users,
        )

    @property
    def www_authenticate(self) -> str | None:
        if self.realm and self.charset:
            return f'Basic realm="{self.realm}", charset="{self.charset}"'
        return None

    def set_www_authenticate(self, send: Send) -> Send:
        """Wrap ``send`` so the response carries the ``WWW-Authenticate`` challenge."""
        challenge = self.www_authenticate
        if challenge is None:
            return send

        async def send_with_challenge(message: Message) -> None:
            if message["type"] == "http.response.start":
                # Response objects may reuse their header list between calls.
                message = {**message, "headers": list(message.get("headers", []))}
                MutableHeaders(scope=message)["WWW-Authenticate"] = challenge
            await send(message)

        return send_with_challenge

    async def send_invalid_credentials_response(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        await self.invalid_credentials_response(
            scope, receive, self.set_www_authenticate(send)
        )

    async def send_invalid_scheme_response(
        self, scope: Scope, receive: Receive, send: Send
    ) -> None:
        await self.invalid_scheme_response(
            scope, receive, self.set_www_authenticate(send)
        )

    async def verify(self, username: str, password: str) -> bool:
        result = self.authenticator(username, password)
        if inspect.isawaitable(result):
            result = await result
        return bool(result)

    def authenticate(self, next: ASGIApp) -> ASGIApp:
        """Protect ``next`` with this configuration."""
        return BasicAuthMiddleware(next, auth=self)
