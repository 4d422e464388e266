"""
Unit tests for MessageCatalog.

Tests locale negotiation and message resolution with English fallback.
"""

import pytest

from signup.adapters.locale.catalog import MESSAGES, MessageCatalog

ERROR_CODES = [
    "username_null",
    "username_size",
    "email_null",
    "email_not_valid",
    "email_inuse",
    "password_null",
    "password_size",
    "password_pattern",
]


class TestCatalogContents:
    """Every error code has a message in every locale."""

    @pytest.mark.parametrize("locale", ["en", "tr"])
    @pytest.mark.parametrize("code", ERROR_CODES)
    def test_code_translated(self, locale: str, code: str) -> None:
        assert MESSAGES[locale][code]

    @pytest.mark.parametrize("code", ERROR_CODES)
    def test_turkish_differs_from_english(self, code: str) -> None:
        assert MESSAGES["tr"][code] != MESSAGES["en"][code]


class TestNegotiate:
    """Tests for Accept-Language negotiation."""

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            (None, "en"),
            ("", "en"),
            ("tr", "tr"),
            ("TR", "tr"),
            ("tr-TR", "tr"),
            ("en-US,en;q=0.9", "en"),
            ("de", "en"),
            ("de,tr;q=0.5", "tr"),
            ("en;q=0.3,tr;q=0.8", "tr"),
            ("tr;q=0,en", "en"),
            ("*", "en"),
            ("tr;q=abc,en;q=0.1", "en"),
        ],
    )
    def test_negotiate(self, header: str | None, expected: str) -> None:
        assert MessageCatalog().negotiate(header) == expected

    def test_custom_default_locale(self) -> None:
        assert MessageCatalog(default_locale="tr").negotiate("fr") == "tr"

    def test_unknown_default_locale_rejected(self) -> None:
        """A default without messages would leak raw codes to clients."""
        with pytest.raises(ValueError):
            MessageCatalog(default_locale="fr")


class TestResolve:
    """Tests for resolving codes to messages."""

    def test_english(self) -> None:
        assert MessageCatalog().resolve("username_null", "en") == "Username cannot be null"

    def test_email_in_use(self) -> None:
        assert MessageCatalog().resolve("email_inuse", "en") == "E-Mail in use"

    def test_turkish(self) -> None:
        assert MessageCatalog().resolve("username_null", "tr") == "Kullanıcı adı boş olamaz"

    def test_unknown_locale_falls_back_to_english(self) -> None:
        assert MessageCatalog().resolve("email_null", "fr") == "E-mail cannot be null"

    def test_missing_code_in_locale_falls_back_to_english(self) -> None:
        catalog = MessageCatalog(messages={"en": {"x": "English"}, "tr": {}})
        assert catalog.resolve("x", "tr") == "English"

    def test_unknown_code_returns_code(self) -> None:
        assert MessageCatalog().resolve("no_such_code", "en") == "no_such_code"

    def test_translate_keeps_field_order(self) -> None:
        errors = {"username": "username_null", "email": "email_null"}
        translated = MessageCatalog().translate(errors, "tr")

        assert list(translated) == ["username", "email"]
        assert translated["email"] == "E-posta boş olamaz"
