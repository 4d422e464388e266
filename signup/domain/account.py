"""Account entity and the record handed to the account store on creation."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewAccount:
    """Account fields known before the store assigns an identifier."""

    username: str
    email: str
    password_hash: str
    activation_token: str
    inactive: bool = True


@dataclass(frozen=True)
class Account:
    """Persisted account as returned by the account store."""

    id: int
    username: str
    email: str
    password_hash: str
    inactive: bool
    activation_token: str
    created_at: datetime
