"""
Message catalog adapter - Localized text for validation error codes.

Maps error codes to human-readable messages per locale and negotiates the
locale from an Accept-Language header. English is the fallback for both
unknown locales and codes missing from a locale's table.
"""

DEFAULT_LOCALE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "username_null": "Username cannot be null",
        "username_size": "Must have min 4 and max 32 characters",
        "email_null": "E-mail cannot be null",
        "email_not_valid": "E-mail is not valid",
        "email_inuse": "E-Mail in use",
        "password_null": "Password cannot be null",
        "password_size": "Password must be at least 6 characters",
        "password_pattern": "Password must have at least 1 uppercase, 1 lowercase letter and 1 number",
    },
    "tr": {
        "username_null": "Kullanıcı adı boş olamaz",
        "username_size": "En az 4 en fazla 32 karakter olmalı",
        "email_null": "E-posta boş olamaz",
        "email_not_valid": "E-posta geçerli değil",
        "email_inuse": "Bu E-posta kullanılıyor",
        "password_null": "Şifre boş olamaz",
        "password_size": "Şifre en az 6 karakter olmalı",
        "password_pattern": "Şifrede en az 1 büyük, 1 küçük harf ve 1 sayı bulunmalıdır",
    },
}


def _parse_accept_language(header: str) -> list[str]:
    """Return language tags ordered by descending q-value (stable)."""
    weighted: list[tuple[float, str]] = []
    for part in header.split(","):
        tag, _, params = part.strip().partition(";")
        tag = tag.strip().lower()
        if not tag:
            continue
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        if quality > 0:
            weighted.append((quality, tag))
    weighted.sort(key=lambda item: item[0], reverse=True)
    return [tag for _, tag in weighted]


class MessageCatalog:
    """Resolves error codes to messages for the supported locales."""

    def __init__(
        self,
        messages: dict[str, dict[str, str]] | None = None,
        default_locale: str = DEFAULT_LOCALE,
    ) -> None:
        self._messages = messages if messages is not None else MESSAGES
        if default_locale not in self._messages:
            raise ValueError(f"No messages for default locale {default_locale!r}")
        self._default_locale = default_locale

    @property
    def locales(self) -> tuple[str, ...]:
        return tuple(self._messages)

    def negotiate(self, accept_language: str | None) -> str:
        """
        Pick the best supported locale for an Accept-Language header.

        Tries each tag in preference order, first as given ("tr-tr") and
        then by its primary subtag ("tr"). Falls back to the default locale.
        """
        if not accept_language:
            return self._default_locale
        for tag in _parse_accept_language(accept_language):
            if tag in self._messages:
                return tag
            primary = tag.split("-", 1)[0]
            if primary in self._messages:
                return primary
        return self._default_locale

    def resolve(self, code: str, locale: str) -> str:
        """Message for `code` in `locale`, else the default locale, else the code."""
        message = self._messages.get(locale, {}).get(code)
        if message is None:
            message = self._messages.get(self._default_locale, {}).get(code, code)
        return message

    def translate(self, errors: dict[str, str], locale: str) -> dict[str, str]:
        """Localize a field -> code mapping, keeping field order."""
        return {field: self.resolve(code, locale) for field, code in errors.items()}
