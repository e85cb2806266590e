"""Tests for guard.auth.factory."""

import pytest

from guard.auth import (
    GoogleOptions,
    ProviderNotFoundError,
    TokenAuthOptions,
    get_auth_options,
    list_providers,
)


class TestGetAuthOptions:
    def test_list_providers(self):
        assert list_providers() == ["google", "token-auth"]

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("google", GoogleOptions),
            (" Google ", GoogleOptions),
            ("token-auth", TokenAuthOptions),
        ],
    )
    def test_by_name(self, name, expected):
        opts = get_auth_options(name)
        assert isinstance(opts, expected)
        assert not opts.is_set()

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("GUARD_AUTH_PROVIDER", "token-auth")
        assert isinstance(get_auth_options(), TokenAuthOptions)

    def test_unspecified(self, monkeypatch):
        monkeypatch.delenv("GUARD_AUTH_PROVIDER", raising=False)
        with pytest.raises(ProviderNotFoundError, match="GUARD_AUTH_PROVIDER"):
            get_auth_options()

    def test_unknown(self):
        with pytest.raises(ProviderNotFoundError, match="Invalid auth provider name"):
            get_auth_options("github")

    def test_returns_fresh_instances(self):
        assert get_auth_options("google") is not get_auth_options("google")
