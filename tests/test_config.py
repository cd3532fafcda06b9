# -*- coding: utf-8 -*-
"""Tests for the configuration module."""

import json

import pytest

from topsis_rank.config import (
    Config,
    InputConfig,
    LogLevel,
    TOPSISConfig,
    get_config,
    get_default_config,
    reset_config,
    set_config,
)


class TestConfig:
    def test_defaults(self):
        config = get_default_config()
        assert config.input.delimiter == ","
        assert config.input.benefit_symbol == "+"
        assert config.input.cost_symbol == "-"
        assert config.topsis.score_decimals == 4
        assert config.topsis.degenerate_score == 0.5
        assert config.output.score_header == "Topsis Score"
        assert config.output.rank_header == "Rank"

    def test_global_config_roundtrip(self):
        custom = Config(topsis=TOPSISConfig(score_decimals=6))
        set_config(custom)
        assert get_config() is custom
        reset_config()
        assert get_config().topsis.score_decimals == 4

    def test_to_dict_and_save(self, tmp_path):
        config = Config()
        d = config.to_dict()
        assert d["logging"]["level"] == "INFO"
        assert d["topsis"]["degenerate_score"] == 0.5

        path = tmp_path / "config.json"
        config.save(path)
        assert json.loads(path.read_text()) == d

    def test_summary_mentions_settings(self):
        summary = Config().summary()
        assert "Topsis Score" in summary
        assert "Degenerate score: 0.5" in summary

    @pytest.mark.parametrize("kwargs", [
        {"score_decimals": -1},
        {"degenerate_score": 1.5},
        {"degenerate_score": -0.1},
    ])
    def test_invalid_topsis_config(self, kwargs):
        with pytest.raises(ValueError):
            TOPSISConfig(**kwargs)

    @pytest.mark.parametrize("kwargs", [
        {"delimiter": ""},
        {"benefit_symbol": "+", "cost_symbol": "+"},
        {"min_rows": 1},
        {"min_columns": 1},
    ])
    def test_invalid_input_config(self, kwargs):
        with pytest.raises(ValueError):
            InputConfig(**kwargs)

    def test_log_level_numeric(self):
        assert LogLevel.DEBUG.numeric == 10
        assert LogLevel.ERROR.numeric == 40
