"""
Signup domain service.

This module contains the core business logic for account signup:

    1. Existence check by email (fail fast on duplicates)
    2. bcrypt hashing of the raw password at the configured work factor
    3. Account insert (the store's UNIQUE constraint is authoritative)
    4. One-time passcode dispatch

Input shape validation (email format, password length, non-empty name)
happens before this service is called; an invalid request never reaches
the repository.

OTP dispatch is best-effort. Once the account is stored, a dispatch
failure is logged and the signup still succeeds; the account is not
rolled back and the caller can request a new passcode later.
"""

import logging
from dataclasses import dataclass

import bcrypt

from .exceptions import OtpDispatchError, UserAlreadyExists
from .ports import Account, OtpDispatcher, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_WORK_FACTOR = 10


@dataclass
class SignupService:
    """
    Domain service for account signup.

    Orchestrates the signup flow: duplicate check, password hashing,
    account persistence and OTP dispatch.
    """

    repository: UserRepository
    otp_dispatcher: OtpDispatcher
    work_factor: int = DEFAULT_WORK_FACTOR

    def signup(self, email: str, password: str, name: str) -> Account:
        """
        Create a new account and trigger OTP issuance.

        Args:
            email: Validated email address (will be normalized)
            password: Raw password (will be hashed)
            name: Display name

        Returns:
            The Account as returned by the repository

        Raises:
            UserAlreadyExists: If an account with this email already exists
        """
        email = self._normalize_email(email)

        if self.repository.find_by_email(email) is not None:
            logger.warning("Signup rejected, email already registered: %s", email)
            raise UserAlreadyExists(email)

        password_hash = self._hash_password(password)

        account = self.repository.create(email, password_hash, name)
        if account is None:
            # Lost the race against a concurrent signup for the same email
            logger.warning("Signup rejected by unique constraint: %s", email)
            raise UserAlreadyExists(email)

        logger.info("Account created: %s", email)
        self._dispatch_otp(email)
        return account

    def _normalize_email(self, email: str) -> str:
        """
        Normalize email address for consistent storage and lookup.

        Applies: strip whitespace + lowercase
        """
        return email.strip().lower()

    def _hash_password(self, password: str) -> str:
        """Hash password using bcrypt with the configured cost factor."""
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.work_factor)).decode()

    def _dispatch_otp(self, email: str) -> None:
        try:
            self.otp_dispatcher.send_otp(email)
        except OtpDispatchError as e:
            logger.warning("OTP dispatch failed for %s: %s", email, e)
