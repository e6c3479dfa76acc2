"""
Unit tests for utils/request_handler.py
"""
import os
import sys
import pytest
from unittest.mock import MagicMock, Mock
import requests

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from utils.auth import StaticTokenProvider
from utils.request_handler import (
    HttpRequest,
    RequestConfig,
    RequestHandler,
    create_request_handler_from_config,
)
from vier.responses import FailureKind


def _response(status_code=200, text='<html></html>'):
    response = Mock()
    response.status_code = status_code
    response.text = text
    return response


def _handler(response=None, side_effect=None, token_provider=None):
    session = MagicMock()
    if side_effect is not None:
        session.request.side_effect = side_effect
    else:
        session.request.return_value = response
    return RequestHandler(token_provider=token_provider, session=session), session


class TestRequestConfig:
    """Test cases for RequestConfig class."""

    def test_default_values(self):
        """Test default configuration values."""
        config = RequestConfig()

        assert config.base_url == 'https://www.vier.be'
        assert config.api_base_url == 'https://api.viervijfzes.be'
        assert config.categories_url == 'https://www.vier.be/api/categories'
        assert config.search_site == 'vier'
        assert config.timeout == 30

    def test_custom_values(self):
        """Test custom configuration values."""
        config = RequestConfig(base_url='https://www.vijf.be', search_site='vijf', timeout=5)

        assert config.base_url == 'https://www.vijf.be'
        assert config.search_site == 'vijf'
        assert config.timeout == 5


class TestFetch:
    """Test cases for RequestHandler.fetch."""

    def test_success_returns_body(self):
        """Test a 2xx response yields the body text."""
        handler, session = _handler(_response(200, '<html>ok</html>'))

        body = handler.fetch(HttpRequest('GET', 'https://www.vier.be'))

        assert body == '<html>ok</html>'
        args, kwargs = session.request.call_args
        assert args == ('GET', 'https://www.vier.be')
        assert kwargs['json'] is None
        assert kwargs['timeout'] == 30
        assert 'Authorization' not in kwargs['headers']

    def test_post_sends_json_body(self):
        """Test the JSON body is passed through for POST requests."""
        handler, session = _handler(_response(200, '{"hits": {"hits": []}}'))

        handler.fetch(HttpRequest('POST', 'https://api.viervijfzes.be/search', json_body={'query': 'x'}))

        assert session.request.call_args[1]['json'] == {'query': 'x'}

    @pytest.mark.parametrize('status', [301, 403, 404, 500])
    def test_non_2xx_is_network_failure(self, status):
        """Test every non-2xx status becomes a NETWORK failure with that code."""
        handler, _ = _handler(_response(status, 'nope'))
        request = HttpRequest('GET', 'https://www.vier.be/missing')

        failure = handler.fetch(request)

        assert failure.kind is FailureKind.NETWORK
        assert failure.status_code == status
        assert failure.request == request

    @pytest.mark.parametrize('text', ['', '   \n'])
    def test_empty_body(self, text):
        """Test an empty 2xx body becomes EMPTY_JSON."""
        handler, _ = _handler(_response(200, text))

        assert handler.fetch(HttpRequest('GET', 'https://www.vier.be')).kind is FailureKind.EMPTY_JSON

    def test_connection_error(self):
        """Test a transport exception becomes NETWORK without status code."""
        error = requests.ConnectionError('connection reset')
        handler, _ = _handler(side_effect=error)

        failure = handler.fetch(HttpRequest('GET', 'https://www.vier.be'))

        assert failure.kind is FailureKind.NETWORK
        assert failure.status_code is None
        assert failure.cause is error

    def test_timeout(self):
        """Test a timeout is treated like any other transport error."""
        handler, _ = _handler(side_effect=requests.Timeout('read timed out'))

        failure = handler.fetch(HttpRequest('GET', 'https://www.vier.be'))

        assert failure.kind is FailureKind.NETWORK
        assert failure.status_code is None


class TestAuthentication:
    """Test cases for bearer credentials."""

    def test_authenticated_request_carries_token(self):
        """Test the Authorization header for authenticated requests."""
        handler, session = _handler(_response(200, '{}'), token_provider=StaticTokenProvider('tok-123'))

        handler.fetch(HttpRequest('GET', 'https://api.viervijfzes.be/video/abc', authenticated=True))

        assert session.request.call_args[1]['headers']['Authorization'] == 'Bearer tok-123'

    def test_anonymous_request_skips_token(self):
        """Test requests not flagged authenticated never carry the token."""
        handler, session = _handler(_response(200, '{}'), token_provider=StaticTokenProvider('tok-123'))

        handler.fetch(HttpRequest('GET', 'https://www.vier.be'))

        assert 'Authorization' not in session.request.call_args[1]['headers']

    def test_authenticated_without_provider_is_anonymous(self):
        """Test an authenticated request without a provider is sent anonymously."""
        handler, session = _handler(_response(200, '{}'))

        handler.fetch(HttpRequest('GET', 'https://api.viervijfzes.be/video/abc', authenticated=True))

        assert 'Authorization' not in session.request.call_args[1]['headers']

    def test_missing_token_stops_request(self):
        """Test an unavailable token fails before anything is sent."""
        handler, session = _handler(_response(200, '{}'), token_provider=StaticTokenProvider(''))

        failure = handler.fetch(HttpRequest('GET', 'https://api.viervijfzes.be/video/abc', authenticated=True))

        assert failure.kind is FailureKind.AUTHENTICATION
        session.request.assert_not_called()


class TestCreateRequestHandlerFromConfig:
    """Test cases for create_request_handler_from_config function."""

    def test_create_default(self):
        handler = create_request_handler_from_config()

        assert isinstance(handler, RequestHandler)
        assert handler.config.base_url == 'https://www.vier.be'
        assert handler.token_provider is None

    def test_create_with_kwargs(self):
        provider = StaticTokenProvider('tok')
        handler = create_request_handler_from_config(token_provider=provider, api_base_url='https://api.test')

        assert handler.config.api_base_url == 'https://api.test'
        assert handler.token_provider is provider

    def test_close_closes_session(self):
        handler, session = _handler(_response())

        handler.close()

        session.close.assert_called_once()
