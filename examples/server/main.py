from http import HTTPStatus

import uvicorn
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route, request_response
from starlette.types import ASGIApp, Receive, Scope, Send

from basicgate import BasicAuth
from basicgate.logger import get_logger, setup_structlog

logger = get_logger(__name__)


def failure(status_code: int, error: str, error_code: str) -> Response:
    return JSONResponse(
        {
            "status": "fail",
            "statusCode": status_code,
            "statusText": HTTPStatus(status_code).phrase,
            "message": "Error!",
            "error": error,
            "errorCode": error_code,
        },
        status_code=status_code,
    )


async def simple_auth(request: Request) -> Response:
    return PlainTextResponse("Welcome to the private endpoint!")


async def complex_auth(request: Request) -> Response:
    return JSONResponse(
        {
            "status": "success",
            "statusCode": HTTPStatus.OK,
            "statusText": HTTPStatus.OK.phrase,
            "message": "Successfully authenticated!",
            "data": [],
        }
    )


class HelloMiddleware:
    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        logger.info("Middleware says hello!")
        await self.app(scope, receive, send)


def create_app() -> Starlette:
    users = {"gerysantoso": "gerysantoso"}

    basic_auth_simple = BasicAuth.custom(charset="UTF-8", realm="Private", users=users)

    basic_auth_complex = BasicAuth.custom(
        charset="UTF-8",
        invalid_credentials_response=failure(
            HTTPStatus.UNAUTHORIZED, "Invalid username and/or password!", "BAUTH: E0002"
        ),
        invalid_scheme_response=failure(
            HTTPStatus.UNAUTHORIZED, "Invalid authentication scheme!", "BAUTH: E0001"
        ),
        realm="Secret",
        users=users,
    )

    routes = [
        Route("/simple", basic_auth_simple.authenticate(request_response(simple_auth))),
        Route("/complex", basic_auth_complex.authenticate(request_response(complex_auth))),
        Route(
            "/middleware",
            HelloMiddleware(basic_auth_simple.authenticate(request_response(simple_auth))),
        ),
    ]

    return Starlette(routes=routes)


if __name__ == "__main__":
    setup_structlog(log_level="INFO", json_logs=False)
    logger.info("Starlette server powered by 'uvicorn' is listening at port 5000.")
    uvicorn.run(create_app(), host="0.0.0.0", port=5000)
