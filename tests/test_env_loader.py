"""
Tests for loading override files into the process environment.
"""

import os

import pytest

from envy.env_loader import load_overrides
from envy.errors import FileNotFound, InvalidConfiguration


def test_sets_variables(write_file):
    path = write_file(".env", "FOO=qux\n")

    assert load_overrides(path) == {"FOO": "qux"}
    assert os.environ["FOO"] == "qux"


def test_overwrites_existing_values(monkeypatch, write_file):
    monkeypatch.setenv("FOO", "old")
    write_file(".env", "FOO=new\n")

    load_overrides(".env")

    assert os.environ["FOO"] == "new"


def test_splits_on_first_separator(write_file):
    write_file(".env", "FOO=a=b=c\n")

    load_overrides(".env")

    assert os.environ["FOO"] == "a=b=c"


def test_empty_file_is_noop(write_file):
    write_file(".env", "")

    assert load_overrides(".env") == {}


def test_line_without_separator_is_skipped(write_file):
    write_file(
        ".env",
        """\
        FOO
        BAR=set
        """,
    )

    applied = load_overrides(".env")

    assert applied == {"BAR": "set"}
    assert "FOO" not in os.environ
    assert os.environ["BAR"] == "set"


def test_empty_value_is_kept(write_file):
    write_file(".env", "FOO=\n")

    load_overrides(".env")

    assert os.environ["FOO"] == ""


def test_missing_file_raises_file_not_found(tmp_path):
    with pytest.raises(FileNotFound) as excinfo:
        load_overrides(tmp_path / "missing.env")

    assert isinstance(excinfo.value.error, FileNotFoundError)
    assert excinfo.value.__cause__ is excinfo.value.error
    assert excinfo.value.path == tmp_path / "missing.env"


def test_unquoted_inline_comment_is_dropped(write_file):
    write_file(".env", "SALT=abc #def\n")

    assert load_overrides(".env") == {"SALT": "abc"}


def test_quoted_value_keeps_hash(write_file):
    write_file(".env", 'SALT="abc #def"\n')

    assert load_overrides(".env") == {"SALT": "abc #def"}


def test_hash_without_leading_space_is_part_of_value(write_file):
    write_file(".env", "SALT=abc#def\n")

    assert load_overrides(".env") == {"SALT": "abc#def"}


def test_whitespace_and_export_are_ignored(write_file):
    write_file(
        ".env",
        """\
        SP = x
        export FOO=bar
        """,
    )

    assert load_overrides(".env") == {"SP": "x", "FOO": "bar"}


def test_single_quoted_value_is_literal(write_file):
    write_file(".env", "FOO='${HOME} a'\n")

    assert load_overrides(".env") == {"FOO": "${HOME} a"}


def test_invalid_utf8_raises_invalid_configuration(tmp_path):
    path = tmp_path / ".env"
    path.write_bytes(b"FOO=\xff\xfe\n")

    with pytest.raises(InvalidConfiguration) as excinfo:
        load_overrides(path)

    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert "FOO" not in os.environ
