"""OTP dispatcher adapters."""

from .console import ConsoleOtpDispatcher
from .http import HttpOtpDispatcher

__all__ = ["ConsoleOtpDispatcher", "HttpOtpDispatcher"]
