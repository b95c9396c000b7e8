from base64 import b64decode

SCHEME_PREFIX = "basic "


def parse_authorization(header: str | None) -> tuple[str, str, bool]:
    """Extract the Basic credentials carried by an ``Authorization`` header value.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so any
    decodable pair reaches the authenticator.

    Returns:
        A ``(username, password, ok)`` triple. ``ok`` is False, and both strings
        empty, when the header is absent, uses another scheme, is not valid
        base64 or has no ``:`` separator.
    """
    if not header or header[: len(SCHEME_PREFIX)].lower() != SCHEME_PREFIX:
        return "", "", False

    try:
        payload = b64decode(header[len(SCHEME_PREFIX) :], validate=True)
    except ValueError:  # binascii.Error, non-ASCII input
        return "", "", False

    username, separator, password = payload.decode(
        "utf-8", errors="surrogateescape"
    ).partition(":")
    if not separator:
        return "", "", False

    return username, password, True
