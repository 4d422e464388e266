"""
In-memory repository adapter - Implements AccountRepository protocol.

Keeps accounts in a process-local dict keyed by email. Used for local
development (ACCOUNT_STORE=memory) and tests. Email uniqueness is enforced
under a lock, mirroring the UNIQUE constraint of the PostgreSQL adapter.
"""

import itertools
import threading
from datetime import datetime, timezone

from signup.domain.account import Account, NewAccount


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with a dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Safe to share between request threads.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, account: NewAccount) -> Account | None:
        with self._lock:
            if account.email in self._accounts:
                return None
            stored = Account(
                id=next(self._ids),
                username=account.username,
                email=account.email,
                password_hash=account.password_hash,
                inactive=account.inactive,
                activation_token=account.activation_token,
                created_at=datetime.now(timezone.utc),
            )
            self._accounts[account.email] = stored
            return stored

    def find_by_email(self, email: str) -> Account | None:
        with self._lock:
            return self._accounts.get(email)

    def find_all(self) -> list[Account]:
        with self._lock:
            return sorted(self._accounts.values(), key=lambda account: account.id)

    def delete_all(self) -> None:
        with self._lock:
            self._accounts.clear()

    def ping(self) -> None:
        return None
