"""HTTP signup gateway implementation.

Posts credentials as JSON to the configured signup endpoint using httpx.
"""

from typing import Any

import httpx

from signupflow.core.config import Settings
from signupflow.core.logging import get_logger
from signupflow.domain.exceptions import SignupTransportError
from signupflow.infrastructure.signup.signup_gateway import SignupGateway, SignupResponse

logger = get_logger(__name__)


class HttpSignupClient(SignupGateway):
    """Signup gateway backed by httpx.

    A single POST is made per call; there is no retry.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the client.

        Args:
            settings: Settings holding the endpoint, credential and timeout.
            client: Optional shared AsyncClient. It is used as-is and not closed.
        """
        self.settings = settings
        self._client = client

    @property
    def url(self) -> str:
        return self.settings.signup_url

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": self.settings.auth_token.get_secret_value(),
        }

    async def create_user(self, username: str, password: str) -> SignupResponse:
        """POST the credentials to the signup endpoint.

        Args:
            username: Username to register.
            password: Password to register.

        Returns:
            SignupResponse for any HTTP status.

        Raises:
            SignupTransportError: If the request fails before a response arrives.
        """
        payload = {"username": username, "password": password}

        try:
            if self._client is not None:
                response = await self._post(self._client, payload)
            else:
                async with httpx.AsyncClient(timeout=self.settings.request_timeout) as client:
                    response = await self._post(client, payload)
        except httpx.HTTPError as e:
            logger.error(
                "Signup request failed",
                url=self.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise SignupTransportError(f"Signup request failed: {e}") from e

        body = _parse_body(response)

        logger.info(
            "Signup endpoint responded",
            url=self.url,
            status_code=response.status_code,
            has_body=body is not None,
        )

        return SignupResponse(status_code=response.status_code, body=body)

    async def _post(self, client: httpx.AsyncClient, payload: dict[str, str]) -> httpx.Response:
        return await client.post(
            self.url,
            json=payload,
            headers=self._headers(),
            timeout=self.settings.request_timeout,
        )


def _parse_body(response: httpx.Response) -> dict[str, Any] | None:
    """Parse a JSON object body, returning None for anything else."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
