import hmac
from types import MappingProxyType

import pytest

from basicgate.security.authentication.verifier import (
    compare_inputs,
    default_authenticator,
)


class TestCompareInputs:
    def test_equal_inputs(self):
        assert compare_inputs("gerysantoso", "gerysantoso") is True

    def test_different_inputs(self):
        assert compare_inputs("gerysantoso", "gerysantos0") is False

    def test_prefix_is_not_a_match(self):
        assert compare_inputs("gery", "gerysantoso") is False
        assert compare_inputs("gerysantoso", "gery") is False

    def test_empty_inputs(self):
        assert compare_inputs("", "") is True
        assert compare_inputs("", "x") is False

    def test_non_ascii_inputs(self):
        assert compare_inputs("pässwörd", "pässwörd") is True
        assert compare_inputs("pässwörd", "passwort") is False

    def test_non_utf8_inputs(self):
        raw = b"caf\xe9".decode("utf-8", errors="surrogateescape")
        assert compare_inputs(raw, raw) is True
        assert compare_inputs(raw, "café") is False

    def test_compares_fixed_size_digests(self, mocker):
        spy = mocker.spy(hmac, "compare_digest")

        compare_inputs("short", "a much longer value than the first one")

        spy.assert_called_once()
        input_hash, expected_hash = spy.call_args.args
        assert isinstance(input_hash, bytes)
        assert isinstance(expected_hash, bytes)
        assert len(input_hash) == len(expected_hash) == 32


class TestDefaultAuthenticator:
    @pytest.fixture
    def authenticator(self, users):
        return default_authenticator(MappingProxyType(users))

    @pytest.mark.parametrize(
        "username, password",
        [
            ("gerysantoso", "gerysantoso"),
            ("a_username", "a_password"),
        ],
    )
    def test_registered_users(self, authenticator, username, password):
        assert authenticator(username, password) is True

    @pytest.mark.parametrize(
        "username, password",
        [
            ("gery", "gery"),
            ("test", "wrong_password"),
            ("a_username", "wrong_password"),
            ("a_password", "a_username"),
            ("a_username", ""),
            ("", ""),
            ("A_USERNAME", "a_password"),
        ],
    )
    def test_rejected_pairs(self, authenticator, username, password):
        assert authenticator(username, password) is False

    def test_username_distinct_from_password(self, authenticator):
        # The username is only checked against the table key, never against
        # the stored password.
        assert authenticator("a_username", "a_password") is True
        assert authenticator("a_username", "a_username") is False

    def test_unknown_user_skips_comparison(self, authenticator, mocker):
        spy = mocker.spy(hmac, "compare_digest")

        assert authenticator("unknownuser", "whatever") is False
        spy.assert_not_called()

    @pytest.mark.parametrize("users", [{}, MappingProxyType({})])
    def test_empty_table_rejects_everyone(self, users):
        authenticator = default_authenticator(users)
        assert authenticator("gerysantoso", "gerysantoso") is False
        assert authenticator("", "") is False
