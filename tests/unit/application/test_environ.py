"""Tests for mrtparser.application.environ module.

Tests environment variable display functionality.
"""

from __future__ import annotations

import argparse
import os
from io import StringIO
from typing import Generator
from unittest.mock import patch

import pytest

from mrtparser.application.environ import cmdline, default, setargs


@pytest.fixture(autouse=True)
def isolated(clean_environment: None) -> Generator[None, None, None]:
    yield


def parse_args(*argv: str) -> argparse.Namespace:
    parser = argparse.ArgumentParser()
    setargs(parser)
    return parser.parse_args(list(argv))


class TestSetargs:
    def test_default_values(self) -> None:
        args = parse_args()
        assert args.diff is False
        assert args.env is False

    def test_flags(self) -> None:
        args = parse_args('-d', '-e')
        assert args.diff is True
        assert args.env is True


class TestCmdline:
    def test_ini_format(self) -> None:
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            assert cmdline(parse_args()) == 0
            output = mock_stdout.getvalue()
        assert '[mrtparser.reader]' in output
        assert "errors = 'strict'" in output

    def test_env_format(self) -> None:
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            cmdline(parse_args('--env'))
            output = mock_stdout.getvalue()
        assert "mrtparser.reader.errors='strict'" in output

    def test_diff_shows_changes_only(self) -> None:
        with patch.dict(os.environ, {'mrtparser_reader_errors': 'skip'}):
            with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
                cmdline(parse_args('--diff', '--env'))
                output = mock_stdout.getvalue()
        assert output == "mrtparser.reader.errors='skip'\n"


class TestDefault:
    def test_default_lists_options(self) -> None:
        with patch('sys.stdout', new_callable=StringIO) as mock_stdout:
            default()
            output = mock_stdout.getvalue()
        assert 'Environment values are' in output
        assert 'mrtparser.reader.max_length' in output
