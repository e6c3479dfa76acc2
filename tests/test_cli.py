"""
Tests for the vier-catalog command line.
"""
import json
import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest

from conftest import FakeRequestHandler
from vier.catalog import create_catalog
from vier.cli import episode_key, main, parse_arguments
from vier.models import EpisodeByNodeIdKey, EpisodeKey, EpisodeUuid

BASE = 'https://www.vier.be'
API = 'https://api.viervijfzes.be'


class TestParseArguments:
    def test_program(self):
        args = parse_arguments(['program', '/de-slimste-mens'])
        assert args.command == 'program'
        assert args.path == '/de-slimste-mens'

    def test_log_options(self):
        args = parse_arguments(['--log-level', 'DEBUG', '--log-file', 'x.log', 'categories'])
        assert args.log_level == 'DEBUG'
        assert args.log_file == 'x.log'

    def test_episode_keys(self):
        assert episode_key(parse_arguments(['episode', '--video-id', 'abc'])) == EpisodeUuid('abc')
        assert episode_key(parse_arguments(['episode', '--program', '/p', '--node-id', '1'])) == \
            EpisodeKey(program_path='/p', node_id='1')
        assert episode_key(parse_arguments(['episode', '--url', f'{BASE}/v', '--node-id', '1'])) == \
            EpisodeByNodeIdKey(url=f'{BASE}/v', node_id='1')

    def test_episode_requires_node_id(self):
        with pytest.raises(SystemExit):
            parse_arguments(['episode', '--program', '/p'])

    def test_video_id_rejects_node_id(self):
        with pytest.raises(SystemExit):
            parse_arguments(['episode', '--video-id', 'abc', '--node-id', '1'])

    def test_episode_targets_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse_arguments(['episode', '--program', '/p', '--url', f'{BASE}/v', '--node-id', '1'])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            parse_arguments([])


class TestMain:
    def test_search_prints_json(self, capsys, search_response_json):
        handler = FakeRequestHandler({f'{API}/search': search_response_json})

        assert main(['search', 'slimste mens'], catalog=create_catalog(handler)) == 0

        output = json.loads(capsys.readouterr().out)
        assert len(output['hits']) == 2
        assert handler.closed is True

    def test_failure_exit_code(self, capsys):
        handler = FakeRequestHandler()

        assert main(['program', '/bestaat-niet'], catalog=create_catalog(handler)) == 1

        output = json.loads(capsys.readouterr().out)
        assert output['kind'] == 'network_failure'
        assert output['status_code'] == 404
        assert handler.closed is True

    def test_episode_by_page(self, capsys, program_page, make_program):
        url = f'{BASE}/video/de-slimste-mens/aflevering-101'
        handler = FakeRequestHandler({url: program_page(make_program())})

        assert main(['episode', '--url', url, '--node-id', '101'], catalog=create_catalog(handler)) == 0

        output = json.loads(capsys.readouterr().out)
        assert output['episode']['page_info']['node_id'] == '101'
