"""
Console OTP dispatcher adapter - Implements OtpDispatcher protocol.

Development stand-in for the HTTP dispatcher: logs the send-otp request
instead of calling the OTP service. Selected with OTP_DISPATCHER=console.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleOtpDispatcher:
    """
    Implements OtpDispatcher protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def send_otp(self, email: str) -> None:
        """
        Log the OTP request at INFO level (visible in docker-compose logs).

        Args:
            email: Recipient email address
        """
        logger.info("[OTP] send-otp requested for %s", email)
