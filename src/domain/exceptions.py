"""
Domain exceptions - Semantic error types for signup.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class SignupError(Exception):
    """Base class for signup domain errors."""

    pass


class UserAlreadyExists(SignupError):
    """An account with this email is already stored."""

    pass


class OtpDispatchError(SignupError):
    """The OTP dispatcher could not deliver the send-otp request."""

    pass
