"""Repository adapters - Account store implementations."""

from .memory import InMemoryAccountRepository
from .postgres import PostgresAccountRepository, ensure_schema

__all__ = ["InMemoryAccountRepository", "PostgresAccountRepository", "ensure_schema"]
