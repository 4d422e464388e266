"""Locale adapters - Message catalogs."""

from .catalog import DEFAULT_LOCALE, MessageCatalog

__all__ = ["DEFAULT_LOCALE", "MessageCatalog"]
