import hashlib
import hmac
from collections.abc import Mapping

from basicgate.security.authentication.auth import Authenticator


def compare_inputs(input: str, expected: str) -> bool:
    """Compare two strings without leaking where they differ.

    Both operands are hashed to fixed-size SHA-256 digests first, so the
    constant-time comparison always runs over 32 bytes whatever the input
    lengths are.
    """
    # surrogateescape restores the raw bytes of non UTF-8 credentials.
    input_hash = hashlib.sha256(
        input.encode("utf-8", errors="surrogateescape")
    ).digest()
    expected_hash = hashlib.sha256(
        expected.encode("utf-8", errors="surrogateescape")
    ).digest()

    return hmac.compare_digest(input_hash, expected_hash)


def default_authenticator(users: Mapping[str, str]) -> Authenticator:
    """Build the authenticator backed by a static username -> password table."""

    def authenticate(username: str, password: str) -> bool:
        stored_password = users.get(username) if users else None
        if stored_password is None:
            return False

        # The entry was found under the supplied username, so the username
        # comparison always holds and the password comparison decides.
        usernames_match = compare_inputs(username, username)
        passwords_match = compare_inputs(password, stored_password)

        return usernames_match and passwords_match

    return authenticate
