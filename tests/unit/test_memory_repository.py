"""
Unit tests for InMemoryAccountRepository adapter.

Tests the AccountRepository contract: create, lookup, listing, deletion
and the email uniqueness constraint.
"""

from concurrent.futures import ThreadPoolExecutor

from signup.adapters.repository.memory import InMemoryAccountRepository
from signup.domain.account import NewAccount


def new_account(email: str = "user1@mail.com", username: str = "user1") -> NewAccount:
    return NewAccount(
        username=username,
        email=email,
        password_hash="$2b$10$hash",
        activation_token="a" * 32,
    )


class TestCreate:
    """Tests for create method."""

    def test_create_assigns_id(self, repository: InMemoryAccountRepository) -> None:
        account = repository.create(new_account())

        assert account is not None
        assert account.id == 1
        assert account.created_at is not None

    def test_create_copies_fields(self, repository: InMemoryAccountRepository) -> None:
        account = repository.create(new_account())

        assert account.username == "user1"
        assert account.email == "user1@mail.com"
        assert account.password_hash == "$2b$10$hash"
        assert account.activation_token == "a" * 32
        assert account.inactive is True

    def test_duplicate_email_returns_none(self, repository: InMemoryAccountRepository) -> None:
        """Duplicate email is reported by None, not an exception."""
        assert repository.create(new_account()) is not None
        assert repository.create(new_account(username="other")) is None
        assert len(repository.find_all()) == 1

    def test_concurrent_creates_one_wins(self, repository: InMemoryAccountRepository) -> None:
        """Only one of many racing creates for an email succeeds."""
        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: repository.create(new_account()), range(20)))

        assert sum(result is not None for result in results) == 1


class TestQueries:
    """Tests for find_by_email, find_all and delete_all."""

    def test_find_by_email(self, repository: InMemoryAccountRepository) -> None:
        created = repository.create(new_account())
        assert repository.find_by_email("user1@mail.com") == created

    def test_find_by_email_missing(self, repository: InMemoryAccountRepository) -> None:
        assert repository.find_by_email("nobody@mail.com") is None

    def test_find_by_email_exact_case(self, repository: InMemoryAccountRepository) -> None:
        repository.create(new_account())
        assert repository.find_by_email("USER1@mail.com") is None

    def test_find_all_ordered_by_id(self, repository: InMemoryAccountRepository) -> None:
        repository.create(new_account("b@mail.com", "bbbb"))
        repository.create(new_account("a@mail.com", "aaaa"))

        assert [account.email for account in repository.find_all()] == ["b@mail.com", "a@mail.com"]

    def test_delete_all(self, repository: InMemoryAccountRepository) -> None:
        repository.create(new_account())
        repository.delete_all()

        assert repository.find_all() == []
        assert repository.create(new_account()) is not None

    def test_ping(self, repository: InMemoryAccountRepository) -> None:
        assert repository.ping() is None
