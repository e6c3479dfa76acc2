"""
Access-token providers.

The catalog never performs the identity-provider handshake itself; it only
asks a ``TokenProvider`` for an access token when a request needs one.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Union

from utils.masking import mask_token
from vier.responses import Failure, authentication_failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessToken:
    token: str
    token_type: str = 'Bearer'
    expires_in: Optional[int] = None

    def __repr__(self) -> str:
        return f"AccessToken(token={mask_token(self.token)!r}, token_type={self.token_type!r})"


class AuthenticationError(Exception):
    """Raised by token providers that cannot produce a token."""


class TokenProvider(ABC):
    """Source of access tokens for authenticated requests."""

    @abstractmethod
    def get_access_token(self) -> Union[AccessToken, Failure]:
        """Return a usable token, or an ``AUTHENTICATION`` failure."""


class StaticTokenProvider(TokenProvider):
    """Hands out a fixed, externally obtained token."""

    def __init__(self, token: Optional[str], token_type: str = 'Bearer'):
        self._token = token
        self._token_type = token_type

    def get_access_token(self) -> Union[AccessToken, Failure]:
        if not self._token:
            logger.warning('No access token configured')
            return authentication_failure(AuthenticationError('no access token configured'))
        return AccessToken(token=self._token, token_type=self._token_type)


def create_token_provider_from_config(access_token: Optional[str]) -> Optional[TokenProvider]:
    """
    Create a token provider for the configured access token.

    Returns:
        A ``StaticTokenProvider``, or *None* when no token is configured so
        that requests are sent anonymously.
    """
    if not access_token:
        return None
    logger.debug(f"Using configured access token {mask_token(access_token)}")
    return StaticTokenProvider(access_token)
