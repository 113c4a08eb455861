"""Abstract base class for signup gateways.

Defines the interface the SignupController uses to create an account
on the remote endpoint.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SignupResponse:
    """HTTP response from the signup endpoint.

    Attributes:
        status_code: HTTP status code.
        body: Parsed JSON object, or None if absent or unparseable.
    """

    status_code: int
    body: dict[str, Any] | None = None

    @property
    def is_success(self) -> bool:
        """Check if the status is in the 2xx range."""
        return 200 <= self.status_code < 300

    @property
    def message(self) -> str | None:
        """The body's 'message' field when it is a string."""
        if self.body is None:
            return None
        value = self.body.get("message")
        return value if isinstance(value, str) else None


class SignupGateway(ABC):
    """Abstract base class for signup gateways.

    Implementations return any HTTP response, whatever its status, and
    raise only when no response was obtained.
    """

    @abstractmethod
    async def create_user(self, username: str, password: str) -> SignupResponse:
        """Submit credentials to the signup endpoint.

        Args:
            username: Username to register.
            password: Password to register.

        Returns:
            The endpoint's response.

        Raises:
            SignupTransportError: On network errors or timeouts.
        """
        pass
