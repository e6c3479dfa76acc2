"""
Pytest configuration and fixtures for the VIER catalog tests.
"""
import html
import json
import os
import sys

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from utils.request_handler import RequestConfig
from vier.responses import network_failure


# ---------------------------------------------------------------------------
# Payload builders
# ---------------------------------------------------------------------------

def _episode(node_id, title=None, episode_id=None):
    return {
        'id': episode_id or f'ep-{node_id}',
        'title': title or f'Aflevering {node_id}',
        'pageInfo': {'nodeId': node_id, 'url': f'/video/aflevering-{node_id}', 'site': 'vier'},
        'videoUuid': f'uuid-{node_id}',
        'duration': 2712.0,
        'episodeNumber': 1,
        'seasonNumber': 19,
        'somethingNew': {'ignored': True},
    }


def _program(title='De Slimste Mens ter Wereld', playlists=None, program_id='prog-1'):
    if playlists is None:
        playlists = [{'id': 'pl-1', 'title': 'Seizoen 19', 'episodes': [_episode('101'), _episode('102')]}]
    return {
        'id': program_id,
        'title': title,
        'description': 'Quiz',
        'pageInfo': {'nodeId': '900', 'url': '/de-slimste-mens-ter-wereld'},
        'playlists': playlists,
        'trackingData': {'ignored': 'yes'},
    }


def _attr(payload):
    return html.escape(json.dumps(payload), quote=True)


def _program_page(program, clip=None):
    parts = [f'<div class="hero" data-hero="{_attr({"data": program})}"></div>']
    if clip is not None:
        parts.append(f'<div data-video="{_attr(clip)}"></div>')
    return '<html><body>' + ''.join(parts) + '</body></html>'


def _clip_page(video_id='c0ffee-1234'):
    return f'<html><body><div class="clip" data-video="{_attr({"id": video_id, "type": "clip"})}"></div></body></html>'


def _catalog_index(links):
    anchors = []
    for href, name in links:
        href_attr = f' href="{href}"' if href is not None else ''
        anchors.append(f'<a class="program-overview__link"{href_attr}><span>{name}</span></a>')
    return '<html><body><div class="program-overview">' + ''.join(anchors) + '</div></body></html>'


@pytest.fixture
def make_episode():
    return _episode


@pytest.fixture
def make_program():
    return _program


@pytest.fixture
def program_page():
    return _program_page


@pytest.fixture
def clip_page():
    return _clip_page


@pytest.fixture
def catalog_index():
    return _catalog_index


@pytest.fixture
def search_response_json():
    """Search index response with two hits, newest first."""
    return json.dumps({
        'took': 3,
        'hits': {
            'total': 2,
            'hits': [
                {
                    '_index': 'vier',
                    '_id': 'node-1',
                    '_score': 1.5,
                    '_source': {
                        'id': '101',
                        'title': 'De Slimste Mens ter Wereld',
                        'url': 'https://www.vier.be/de-slimste-mens-ter-wereld',
                        'bundle': 'program',
                        'intro': 'Quiz',
                    },
                },
                {
                    '_index': 'vier',
                    '_id': 'node-2',
                    '_score': 1.1,
                    '_source': {
                        'id': '102',
                        'title': 'Aflevering 102',
                        'url': 'https://www.vier.be/video/de-slimste-mens/aflevering-102',
                        'bundle': 'video',
                    },
                },
            ],
        },
    })


# ---------------------------------------------------------------------------
# Fake transport
# ---------------------------------------------------------------------------

class FakeRequestHandler:
    """Stands in for ``RequestHandler``: answers from a URL → body map.

    A mapped value may be a string (the body), a ``Failure`` or a callable
    taking the request.  Unmapped URLs answer HTTP 404.
    """

    def __init__(self, responses=None, config=None):
        self.config = config or RequestConfig()
        self.responses = responses if responses is not None else {}
        self.requests = []
        self.closed = False

    def fetch(self, request):
        self.requests.append(request)
        response = self.responses.get(request.url)
        if response is None:
            return network_failure(404, request)
        if callable(response):
            return response(request)
        return response

    def close(self):
        self.closed = True

    def urls(self):
        return [r.url for r in self.requests]


@pytest.fixture
def fake_handler():
    return FakeRequestHandler()
