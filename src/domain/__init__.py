"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account signup.
It defines its own port interfaces for infrastructure abstraction,
keeping the web framework, database driver and HTTP client out of
the domain.
"""

from .exceptions import OtpDispatchError, SignupError, UserAlreadyExists
from .ports import Account, OtpDispatcher, UserRepository
from .signup import DEFAULT_WORK_FACTOR, SignupService

__all__ = [
    "DEFAULT_WORK_FACTOR",
    "Account",
    "OtpDispatchError",
    "OtpDispatcher",
    "SignupError",
    "SignupService",
    "UserAlreadyExists",
    "UserRepository",
]
