"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class Account:
    """
    Persisted user account.

    `password` always holds the bcrypt hash, never the raw credential.
    `id` and `created_at` are assigned by the store.
    """

    email: str
    password: str
    name: str
    id: int | None = None
    created_at: datetime | None = None


class UserRepository(Protocol):
    """Port interface for account persistence."""

    def find_by_email(self, email: str) -> Account | None:
        """
        Look up an account by its email address.

        Args:
            email: Email address (unique key)

        Returns:
            The stored Account, or None if no account uses this email
        """
        ...

    def create(self, email: str, password_hash: str, name: str) -> Account | None:
        """
        Insert a new account.

        The store's uniqueness constraint on email is authoritative: a
        concurrent insert of the same email makes this call return None
        instead of creating a second record.

        Args:
            email: Email address
            password_hash: bcrypt hashed password
            name: Display name

        Returns:
            The Account as stored, or None if the email is already taken
        """
        ...


class OtpDispatcher(Protocol):
    """Port interface for one-time passcode issuance."""

    def send_otp(self, email: str) -> None:
        """
        Request that a one-time passcode be sent to the email address.

        Args:
            email: Recipient email address

        Raises:
            OtpDispatchError: If the request could not be delivered
        """
        ...
