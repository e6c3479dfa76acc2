"""
Tests for the failure taxonomy and the accumulating combinator.
"""
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from utils.request_handler import HttpRequest
from vier.responses import (
    FailureKind,
    HtmlError,
    HtmlErrorKind,
    Invalid,
    collect_all,
    empty_json,
    html_parsing,
    json_parsing,
    network_failure,
    no_episode_found,
)


def _error(position):
    return HtmlError(HtmlErrorKind.INVALID_ELEMENT, 'a.link', position, ('href',))


class TestCollectAll:
    def test_all_valid(self):
        assert collect_all(['a', 'b', 'c']) == ['a', 'b', 'c']

    def test_accumulates_every_error_in_order(self):
        result = collect_all(['a', Invalid((_error(1),)), 'c', Invalid((_error(3), _error(4)))])
        assert isinstance(result, Invalid)
        assert [e.position for e in result.errors] == [1, 3, 4]

    def test_empty_input(self):
        assert collect_all([]) == []


class TestFailureConstructors:
    def test_network_failure(self):
        request = HttpRequest('GET', 'https://www.vier.be/x')
        failure = network_failure(503, request)
        assert failure.kind is FailureKind.NETWORK
        assert failure.status_code == 503
        assert failure.request is request
        assert '503' in failure.describe()
        assert 'https://www.vier.be/x' in failure.describe()

    def test_network_failure_without_response(self):
        failure = network_failure(None, HttpRequest('GET', 'https://www.vier.be'), ConnectionError('reset'))
        assert 'no response' in failure.describe()

    def test_html_parsing_requires_errors(self):
        with pytest.raises(ValueError):
            html_parsing([])

    def test_html_parsing_describe_lists_all_errors(self):
        failure = html_parsing([_error(0), _error(2)])
        assert failure.describe().count('missing href') == 2
        assert len(failure.to_dict()['errors']) == 2

    def test_simple_kinds(self):
        assert empty_json().kind is FailureKind.EMPTY_JSON
        assert no_episode_found().kind is FailureKind.NO_EPISODE_FOUND
        assert no_episode_found() == no_episode_found()

    def test_failures_with_request_bodies_are_hashable(self):
        request = HttpRequest('POST', 'https://api.viervijfzes.be/search', json_body={'query': 'x'})
        first = network_failure(500, request)
        second = network_failure(500, HttpRequest('POST', 'https://api.viervijfzes.be/search'))

        assert hash(first) == hash(second)
        assert first == second
        assert len({first, second, network_failure(502, request)}) == 2

    def test_json_parsing_keeps_cause(self):
        cause = ValueError('bad')
        failure = json_parsing(cause)
        assert failure.cause is cause
        assert failure.to_dict()['detail'] == 'json_parsing_exception: bad'

