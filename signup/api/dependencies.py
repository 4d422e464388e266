"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from concurrent.futures import Executor
from functools import lru_cache

from fastapi import Depends, Header, Request

from signup.adapters.locale.catalog import MessageCatalog
from signup.adapters.smtp.console import ConsoleEmailSender
from signup.adapters.smtp.smtp import SmtpEmailSender
from signup.config.settings import Settings, get_settings
from signup.domain.ports import AccountRepository, EmailSender
from signup.domain.registration import RegistrationService

# Module-level singleton - ConsoleEmailSender is stateless
_console_email_sender = ConsoleEmailSender()


def build_email_sender(settings: Settings) -> EmailSender:
    """Create the email sender selected by EMAIL_BACKEND."""
    if settings.email_backend == "smtp":
        return SmtpEmailSender(
            host=settings.smtp_host,
            port=settings.smtp_port,
            sender=settings.mail_from,
            username=settings.smtp_username,
            password=settings.smtp_password,
            use_tls=settings.smtp_use_tls,
        )
    return _console_email_sender


def get_repository(request: Request) -> AccountRepository:
    """
    Get the account store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.account_repository


def get_email_sender(request: Request) -> EmailSender:
    """Get the configured email sender, console logging by default."""
    return getattr(request.app.state, "email_sender", _console_email_sender)


def get_notification_executor(request: Request) -> Executor | None:
    """Get the background executor for activation emails, if one is running."""
    return getattr(request.app.state, "notification_executor", None)


def get_registration_service(
    repository: AccountRepository = Depends(get_repository),
    email_sender: EmailSender = Depends(get_email_sender),
    executor: Executor | None = Depends(get_notification_executor),
    settings: Settings = Depends(get_settings),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the account store, email sender and notification
    executor for the domain service.
    """
    return RegistrationService(
        repository=repository,
        email_sender=email_sender,
        bcrypt_rounds=settings.bcrypt_cost,
        notification_executor=executor,
    )


@lru_cache
def get_message_catalog() -> MessageCatalog:
    """Get cached message catalog using the configured default locale."""
    return MessageCatalog(default_locale=get_settings().default_locale)


def get_locale(
    accept_language: str | None = Header(default=None),
    catalog: MessageCatalog = Depends(get_message_catalog),
) -> str:
    """Negotiate the response locale from the Accept-Language header."""
    return catalog.negotiate(accept_language)
