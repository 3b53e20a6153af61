"""Tests for timeout configuration."""

import pytest

from gitwait.config import TIMEOUT_ENV_VAR, WaitConfig, parse_timeout_ms
from gitwait.exceptions import ConfigError


class TestParseTimeout:
    def test_milliseconds_to_seconds(self):
        assert parse_timeout_ms("1500") == 1.5

    def test_zero(self):
        assert parse_timeout_ms("0") == 0

    def test_leading_plus(self):
        assert parse_timeout_ms("+10") == 0.01

    @pytest.mark.parametrize("raw", ["", "-5", "1.5", " 10", "10 ", "ten", "0x10", "²"])
    def test_rejects(self, raw):
        with pytest.raises(ConfigError, match=TIMEOUT_ENV_VAR):
            parse_timeout_ms(raw)


class TestFromEnv:
    def test_unset_waits_forever(self):
        assert WaitConfig.from_env({}).timeout is None

    def test_set(self):
        assert WaitConfig.from_env({TIMEOUT_ENV_VAR: "250"}).timeout == 0.25

    def test_set_but_empty_is_error(self):
        with pytest.raises(ConfigError):
            WaitConfig.from_env({TIMEOUT_ENV_VAR: ""})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(TIMEOUT_ENV_VAR, "42")
        assert WaitConfig.from_env().timeout == 0.042

    def test_other_variables_ignored(self):
        assert WaitConfig.from_env({"GIT_WAIT_TIMEOUT": "5"}).timeout is None
