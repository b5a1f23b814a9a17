"""
HTTP OTP dispatcher adapter - Implements OtpDispatcher protocol.

Calls the OTP service's send-otp endpoint:

    POST {base_url}/api/auth/send-otp
    Content-Type: application/json

    {"email": "<email>"}

The base URL is injected at construction. Transport errors and non-2xx
responses are raised as OtpDispatchError; the domain decides what a
failed dispatch means for the signup.
"""

import logging

import httpx

from src.domain.exceptions import OtpDispatchError

logger = logging.getLogger(__name__)

SEND_OTP_PATH = "/api/auth/send-otp"


class HttpOtpDispatcher:
    """
    Implements OtpDispatcher protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, base_url: str, client: httpx.Client | None = None, timeout: float = 5.0) -> None:
        """
        Initialize dispatcher.

        Args:
            base_url: Scheme and host of the OTP service (trailing slash ignored)
            client: Shared httpx client, left open by close(); a private one
                is created and owned if omitted
            timeout: Request timeout in seconds for the private client
        """
        self._url = base_url.rstrip("/") + SEND_OTP_PATH
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def url(self) -> str:
        return self._url

    def send_otp(self, email: str) -> None:
        """
        POST the email to the send-otp endpoint.

        Args:
            email: Recipient email address

        Raises:
            OtpDispatchError: On transport failure or non-2xx response
        """
        try:
            response = self._client.post(
                self._url,
                headers={"Content-Type": "application/json"},
                json={"email": email},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise OtpDispatchError(
                f"send-otp returned {e.response.status_code} for {email}"
            ) from e
        except httpx.HTTPError as e:
            raise OtpDispatchError(f"send-otp request failed for {email}: {e}") from e

        logger.info("OTP requested for %s", email)

    def close(self) -> None:
        """Close the HTTP client if this dispatcher created it."""
        if self._owns_client:
            self._client.close()
