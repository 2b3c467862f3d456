"""Tests for environment parsing helpers."""

import logging

import pytest

from yh_common.config.env import collect_env, parse_bool_env, parse_str_env


pytestmark = pytest.mark.unit_common


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, None),
        ("1", True),
        ("YES", True),
        (" on ", True),
        ("0", False),
        ("off", False),
        ("nope", None),
    ],
)
def test_parse_bool_env(value, expected):
    assert parse_bool_env(value) is expected


def test_parse_str_env():
    assert parse_str_env(None) is None
    assert parse_str_env("   ") is None
    assert parse_str_env(" yarn ") == "yarn"


def test_collect_env_skips_unset_and_warns_on_garbage(caplog):
    env = {"YH_USE_NVM": "maybe", "YH_BOOTSTRAP": "1"}
    fields = {"YH_USE_NVM": "use_version_manager", "YH_BOOTSTRAP": "bootstrap", "YH_X": "x"}

    with caplog.at_level(logging.WARNING):
        values = collect_env(env, fields, parse_bool_env)

    assert values == {"bootstrap": True}
    assert "Ignoring YH_USE_NVM='maybe'" in caplog.text
