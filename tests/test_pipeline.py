# -*- coding: utf-8 -*-
"""
End-to-end tests for validate_and_rank / TopsisRankingPipeline.
"""

import pandas as pd
import pytest

from topsis_rank import (
    Config,
    NonNumericCell,
    ShapeMismatch,
    TopsisRankingPipeline,
    validate_and_rank,
)
from topsis_rank.config import OutputConfig, TOPSISConfig
from topsis_rank.ranking import format_score


class TestValidateAndRank:
    def test_correlated_scenario(self, correlated_table):
        result = validate_and_rank(correlated_table, "1,1", "+,+")
        by_name = {row.identifier: row for row in result}

        assert by_name["C"].rank == 1
        assert by_name["C"].score_text == "1.0000"
        assert by_name["A"].rank == 3
        assert by_name["A"].score_text == "0.0000"
        assert by_name["B"].score_text == "0.5000"

    def test_headers(self, correlated_table):
        result = validate_and_rank(correlated_table, "1,1", "+,+")
        assert result.headers == ["Name", "C1", "C2", "Topsis Score", "Rank"]

    def test_rows_in_input_order_with_raw_cells(self, phone_table):
        result = validate_and_rank(phone_table, "1,1,1,1", "-,+,+,+")
        assert [row.index for row in result] == [0, 1, 2, 3, 4]
        assert [list(row.cells) for row in result] == phone_table[1:]

    def test_ranks_are_permutation(self, phone_table):
        result = validate_and_rank(phone_table, "1,1,1,2", "-,+,+,+")
        assert len(result) == 5
        assert sorted(result.ranks) == [1, 2, 3, 4, 5]

    def test_score_text_is_rounded_full_score(self, phone_table):
        result = validate_and_rank(phone_table, "0.25,0.25,0.25,0.25", "-,+,+,+")
        for row in result:
            assert row.score_text == format_score(row.score)
            assert 0.0 <= row.score <= 1.0

    def test_best_and_sorted(self, phone_table):
        result = validate_and_rank(phone_table, "1,1,1,1", "-,+,+,+")
        ordered = result.sorted_by_rank()
        assert [row.rank for row in ordered] == [1, 2, 3, 4, 5]
        assert result.best() is ordered[0]
        assert result.best().score == max(result.scores)

    def test_records(self, correlated_table):
        result = validate_and_rank(correlated_table, "1,1", "+,+")
        assert result.to_records()[2] == ["C", 3, 3, "1.0000", 1]

    def test_dataframe(self, correlated_table):
        df = validate_and_rank(correlated_table, "1,1", "+,+").to_dataframe()
        assert list(df.columns) == ["Name", "C1", "C2", "Topsis Score", "Rank"]
        assert df["Rank"].tolist() == [3, 2, 1]

    def test_dataframe_input(self):
        df = pd.DataFrame({
            "Model": ["M1", "M2"],
            "Price": [250, 200],
            "Storage": [16, 32],
        })
        result = validate_and_rank(df, "1,1", "-,+")
        assert result.best().identifier == "M2"

    def test_shape_mismatch(self, correlated_table):
        with pytest.raises(ShapeMismatch):
            validate_and_rank(correlated_table, "1,1", "+,-,+")

    def test_non_numeric_cell(self, correlated_table):
        correlated_table[2][2] = "abc"
        with pytest.raises(NonNumericCell) as exc_info:
            validate_and_rank(correlated_table, "1,1", "+,+")
        assert (exc_info.value.row, exc_info.value.column) == (3, 3)

    def test_topsis_details_attached(self, correlated_table):
        result = validate_and_rank(correlated_table, "1,1", "+,+")
        assert result.topsis is not None
        assert result.topsis.ranks.tolist() == result.ranks

    def test_identical_calls_identical_output(self, phone_table):
        first = validate_and_rank(phone_table, "1,2,1,1", "-,+,-,+")
        second = validate_and_rank(phone_table, "1,2,1,1", "-,+,-,+")
        assert first.to_records() == second.to_records()
        assert first.scores == second.scores


class TestPipelineConfig:
    def test_custom_headers_and_decimals(self, correlated_table):
        config = Config(
            topsis=TOPSISConfig(score_decimals=2),
            output=OutputConfig(score_header="Score", rank_header="Position"),
        )
        result = TopsisRankingPipeline(config).run(correlated_table, "1,1", "+,+")
        assert result.headers[-2:] == ["Score", "Position"]
        assert [row.score_text for row in result] == ["0.00", "0.50", "1.00"]

    def test_pipeline_keeps_no_state_between_runs(self, correlated_table, phone_table):
        pipeline = TopsisRankingPipeline()
        first = pipeline.run(correlated_table, "1,1", "+,+")
        pipeline.run(phone_table, "1,1,1,1", "-,+,+,+")
        again = pipeline.run(correlated_table, "1,1", "+,+")
        assert first.to_records() == again.to_records()

    def test_ranking_uses_full_precision(self):
        # C and D both print as 0.5000; D is ahead by 0.00001
        table = [
            ["N", "C1", "C2"],
            ["A", 0, 1],
            ["B", 100000, 1],
            ["C", 50000, 1],
            ["D", 50001, 1],
        ]
        result = validate_and_rank(table, "1,1", "+,+")
        assert [row.score_text for row in result] == ["0.0000", "1.0000", "0.5000", "0.5000"]
        assert result.ranks == [4, 1, 3, 2]

    def test_format_score(self):
        assert format_score(0.123456) == "0.1235"
        assert format_score(1, decimals=2) == "1.00"
        assert format_score(0.0, decimals=8) == "0.00000000"

    def test_format_score_rounds_half_up(self):
        assert format_score(0.03125) == "0.0313"
        assert format_score(0.125, decimals=2) == "0.13"
        assert format_score(0.5) == "0.5000"

    def test_half_way_score_text(self):
        # B sits at exactly 1/32 of the way from the worst to the best point
        table = [
            ["N", "C1", "C2"],
            ["A", 0, 1],
            ["B", 1, 1],
            ["C", 32, 1],
        ]
        result = validate_and_rank(table, "1,1", "+,+")
        assert result.rows[1].score == 0.03125
        assert result.rows[1].score_text == "0.0313"
        assert result.ranks == [3, 2, 1]
