from collections.abc import Awaitable
from enum import Enum
from typing import Protocol


class Authenticator(Protocol):
    """Decides whether a username/password pair is allowed through the gate.

    May return the answer directly or an awaitable resolving to it, so that
    lookups against an async credential store can be plugged in.
    """

    def __call__(self, username: str, password: str) -> bool | Awaitable[bool]: ...


class AuthFailure(Enum):
    """The two ways a request can fail to pass the gate."""

    INVALID_SCHEME = "invalid_scheme"
    INVALID_CREDENTIALS = "invalid_credentials"
