from base64 import b64encode
from http import HTTPStatus

import pytest
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route

USERS = {"gerysantoso": "gerysantoso", "a_username": "a_password"}


@pytest.fixture
def users() -> dict[str, str]:
    return dict(USERS)


@pytest.fixture
def basic_headers():
    def build(username: str, password: str) -> dict[str, str]:
        credentials = f"{username}:{password}".encode("utf-8")
        return {"Authorization": f"Basic {b64encode(credentials).decode('ascii')}"}

    return build


@pytest.fixture
def private_app() -> Starlette:
    """Unprotected app, wrapped by each test with the gate under test."""

    async def private(request: Request):
        return PlainTextResponse(
            "Welcome to the private endpoint!", status_code=HTTPStatus.OK
        )

    return Starlette(routes=[Route("/private", endpoint=private)])
