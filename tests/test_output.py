# -*- coding: utf-8 -*-
"""
Tests for OutputManager rendering (delimited text, HTML, DataFrame).
"""

import pytest

from topsis_rank import Config, validate_and_rank
from topsis_rank.config import OutputConfig
from topsis_rank.output_manager import OutputManager, create_output_manager


@pytest.fixture
def result(correlated_table):
    return validate_and_rank(correlated_table, "1,1", "+,+")


class TestCSV:
    def test_plain_csv(self, result):
        text = create_output_manager().to_csv(result)
        assert text.splitlines() == [
            "Name,C1,C2,Topsis Score,Rank",
            "A,1,1,0.0000,3",
            "B,2,2,0.5000,2",
            "C,3,3,1.0000,1",
        ]

    def test_raw_cells_written_unmodified(self, phone_table):
        ranked = validate_and_rank(phone_table, "1,1,1,1", "-,+,+,+")
        lines = OutputManager().to_csv(ranked).splitlines()
        assert lines[1].startswith("M1,250,16,12,5,")

    def test_delimiter_and_quotes_are_escaped(self):
        table = [
            ["Company", "C1", "C2"],
            ["Acme, Inc", 1, 2],
            ['Say "hi"', 2, 1],
        ]
        text = OutputManager().to_csv(validate_and_rank(table, "1,1", "+,+"))
        lines = text.splitlines()
        assert lines[1].startswith('"Acme, Inc",1,2,')
        assert lines[2].startswith('"Say ""hi""",2,1,')

    def test_custom_separator(self, result):
        manager = OutputManager(Config(output=OutputConfig(csv_separator=";")))
        assert manager.to_csv(result).splitlines()[0] == "Name;C1;C2;Topsis Score;Rank"


class TestHTML:
    def test_table_structure(self, result):
        html = OutputManager().to_html(result)
        assert html.startswith("<table")
        assert "topsis-result" in html
        for header in ["Name", "C1", "C2", "Topsis Score", "Rank"]:
            assert f"<th>{header}</th>" in html
        assert "<td>1.0000</td>" in html
        assert html.count("<tr") == 4

    def test_cells_escaped(self):
        table = [["Name", "C1", "C2"], ["<b>A</b>", 1, 2], ["B & co", 2, 1]]
        html = OutputManager().to_html(validate_and_rank(table, "1,1", "+,+"))
        assert "&lt;b&gt;A&lt;/b&gt;" in html
        assert "B &amp; co" in html
        assert "<b>A</b>" not in html


class TestFrame:
    def test_frame_matches_records(self, result):
        df = OutputManager().to_frame(result)
        assert df.values.tolist() == result.to_records()
