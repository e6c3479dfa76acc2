"""
Request Handler for the VIER catalog

This module provides the HTTP transport used by every repository:
- Browser-like headers for the server-rendered pages
- JSON bodies for the API endpoints (search)
- Optional bearer credentials from a token provider
- Conversion of every transport outcome into either the raw body or a
  ``Failure`` value (nothing is raised to the caller)

Retries, caching and rate limiting are left to the caller.

Usage:
    from utils.request_handler import HttpRequest, create_request_handler_from_config

    handler = create_request_handler_from_config(base_url='https://www.vier.be')
    body = handler.fetch(HttpRequest('GET', handler.config.base_url))
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

import requests

from utils.masking import mask_token
from vier.responses import Failure, empty_json, network_failure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpRequest:
    """Descriptor of a single upstream call."""
    method: str
    url: str
    json_body: Optional[Dict[str, Any]] = None
    authenticated: bool = False


@dataclass
class RequestConfig:
    """Configuration for request handler"""
    base_url: str = 'https://www.vier.be'
    api_base_url: str = 'https://api.viervijfzes.be'
    categories_url: str = 'https://www.vier.be/api/categories'
    search_site: str = 'vier'
    timeout: int = 30
    user_agent: str = ('Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
                       '(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36')


class RequestHandler:
    """
    HTTP transport shared by the catalog repositories.

    ``fetch`` is blocking; the repositories run it on worker threads, so
    concurrent calls share one ``requests.Session``. Only its connection
    pool (thread-safe) and cookie jar (internally locked) are touched
    after construction.
    """

    DEFAULT_HEADERS = {
        'Accept': 'text/html,application/xhtml+xml,application/json;q=0.9,*/*;q=0.8',
        'Accept-Language': 'nl-BE,nl;q=0.9,en-US;q=0.8,en;q=0.7',
    }

    def __init__(self, config: Optional[RequestConfig] = None, token_provider=None,
                 session: Optional[requests.Session] = None):
        """
        Initialize request handler.

        Args:
            config: RequestConfig instance with configuration settings
            token_provider: Optional ``utils.auth.TokenProvider`` used for
                requests flagged ``authenticated``
            session: Optional pre-configured ``requests.Session``
        """
        self.config = config or RequestConfig()
        self.token_provider = token_provider
        self.session = session or requests.Session()

    def build_headers(self, request: HttpRequest) -> Union[Dict[str, str], Failure]:
        """
        Build the headers for *request*.

        Returns:
            Header dict, or an ``AUTHENTICATION`` failure when the token
            provider could not supply a token.
        """
        headers = dict(self.DEFAULT_HEADERS)
        headers['User-Agent'] = self.config.user_agent

        if request.authenticated and self.token_provider is not None:
            token = self.token_provider.get_access_token()
            if isinstance(token, Failure):
                logger.warning(f"[{request.method}] No access token for {request.url}: {token.describe()}")
                return token
            headers['Authorization'] = f"{token.token_type} {token.token}"
            logger.debug(f"[{request.method}] Using access token {mask_token(token.token)}")

        return headers

    def fetch(self, request: HttpRequest) -> Union[str, Failure]:
        """
        Execute *request* and return its body.

        Returns:
            The response text, or a ``Failure``:
            - ``NETWORK`` with the status code for a non-2xx response
            - ``NETWORK`` without status code when no response was received
            - ``EMPTY_JSON`` for a 2xx response with an empty body
            - ``AUTHENTICATION`` when credentials were required but unavailable
        """
        headers = self.build_headers(request)
        if isinstance(headers, Failure):
            return headers

        try:
            logger.debug(f"[{request.method}] Requesting: {request.url}")
            response = self.session.request(
                request.method,
                request.url,
                json=request.json_body,
                headers=headers,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"[{request.method}] Error requesting {request.url}: {e}")
            return network_failure(None, request, e)

        if not 200 <= response.status_code < 300:
            logger.warning(f"[{request.method}] HTTP {response.status_code} for {request.url}")
            return network_failure(response.status_code, request)

        body = response.text
        logger.debug(f"[{request.method}] Response: HTTP {response.status_code}, Text-Length: {len(body)} chars")
        if not body or not body.strip():
            logger.warning(f"[{request.method}] Empty body for {request.url}")
            return empty_json()

        return body

    def close(self):
        self.session.close()


def create_request_handler_from_config(token_provider=None, **config_kwargs) -> RequestHandler:
    """
    Create a RequestHandler instance from configuration.

    Args:
        token_provider: Optional token provider for authenticated requests
        **config_kwargs: Configuration parameters for RequestConfig

    Returns:
        Configured RequestHandler instance
    """
    config = RequestConfig(**config_kwargs)
    return RequestHandler(config=config, token_provider=token_provider)
