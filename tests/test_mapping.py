# File: tests/test_mapping.py
"""
Test the mapping from raw sheet rows to Node / Member / Support records.

Sheets are passed as header=None DataFrames, exactly as the loader reads
them: row 0 is the header row.
"""

import logging
import math

import pandas as pd
import pytest

from mount_stick.mapping import (
    SheetLayout,
    build_model,
    parse_float,
    parse_id,
    rows_to_members,
    rows_to_nodes,
    rows_to_supports,
)
from mount_stick.model import Member, Node, Support


def sheet(rows):
    """Raw sheet as read with header=None."""
    return pd.DataFrame(rows)


class TestParseFloat:

    @pytest.mark.parametrize("value, expected", [
        (3, 3.0),
        (2.5, 2.5),
        ("4.75", 4.75),
        ("  -1e2 ", -100.0),
    ])
    def test_numbers_and_numeric_strings(self, value, expected):
        assert parse_float(value) == expected

    @pytest.mark.parametrize("value", [None, "", "abc", True, float("nan")])
    def test_everything_else_is_nan(self, value):
        assert math.isnan(parse_float(value))


class TestParseId:

    @pytest.mark.parametrize("value", [1, 1.0, "1", " 1 ", "1.0"])
    def test_integral_values_normalise_to_int(self, value):
        assert parse_id(value) == 1
        assert isinstance(parse_id(value), int)

    def test_text_ids_are_trimmed_strings(self):
        assert parse_id(" N12 ") == "N12"

    def test_non_integral_number_kept_as_string(self):
        assert parse_id(1.5) == "1.5"

    @pytest.mark.parametrize("value", [1.5, "1.5", "1.50", " 1.500 "])
    def test_non_integral_number_and_text_match(self, value):
        assert parse_id(value) == "1.5"

    @pytest.mark.parametrize("value", ["inf", "nan"])
    def test_non_finite_text_is_kept_as_text(self, value):
        assert parse_id(value) == value

    @pytest.mark.parametrize("value", [None, "", "   ", float("nan")])
    def test_blank_is_none(self, value):
        assert parse_id(value) is None


class TestNodes:

    def test_header_row_is_skipped(self):
        nodes = rows_to_nodes(sheet([
            ["Node", "X", "Y", "Z"],
            [1, 0, 0, 0],
            [2, 10.5, 0, 3],
        ]))
        assert list(nodes) == [1, 2]
        assert nodes[2] == Node(2, 10.5, 0.0, 3.0)

    def test_coordinates_are_floats(self):
        nodes = rows_to_nodes(sheet([["id", "x", "y", "z"], [1, "2", "3.5", 4]]))
        assert nodes[1].xyz == (2.0, 3.5, 4.0)

    def test_bad_coordinate_becomes_nan(self):
        nodes = rows_to_nodes(sheet([["id", "x", "y", "z"], [1, "abc", 0, 0]]))
        assert math.isnan(nodes[1].x)
        assert not nodes[1].is_finite

    def test_missing_columns_read_as_nan(self):
        nodes = rows_to_nodes(sheet([["id", "x"], [1, 5]]))
        assert nodes[1].x == 5.0
        assert math.isnan(nodes[1].y) and math.isnan(nodes[1].z)

    def test_blank_rows_are_dropped(self):
        nodes = rows_to_nodes(sheet([
            ["id", "x", "y", "z"],
            [1, 0, 0, 0],
            [None, None, None, None],
            [2, 1, 1, 1],
        ]))
        assert list(nodes) == [1, 2]

    def test_row_without_id_is_dropped(self):
        nodes = rows_to_nodes(sheet([["id", "x", "y", "z"], [None, 1, 2, 3], [4, 0, 0, 0]]))
        assert list(nodes) == [4]

    def test_duplicate_id_keeps_first(self, caplog):
        with caplog.at_level(logging.WARNING, logger="mount_stick.mapping"):
            nodes = rows_to_nodes(sheet([
                ["id", "x", "y", "z"],
                [1, 0, 0, 0],
                [1, 9, 9, 9],
            ]))
        assert nodes[1].xyz == (0.0, 0.0, 0.0)
        warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert warnings == ["Duplicate node id 1, keeping the first definition"]

    def test_header_is_first_occupied_row_and_column(self):
        nodes = rows_to_nodes(sheet([
            [None, None, None, None, None],
            [None, None, None, None, None],
            [None, "id", "x", "y", "z"],
            [None, 1, 0, 0, 0],
            [None, 2, 5, 6, 7],
        ]))
        assert list(nodes) == [1, 2]
        assert nodes[2].xyz == (5.0, 6.0, 7.0)

    def test_blank_sheet_gives_no_nodes(self):
        assert rows_to_nodes(sheet([[None, None], [None, None]])) == {}

    def test_header_only_sheet_gives_no_nodes(self):
        assert rows_to_nodes(sheet([["id", "x", "y", "z"]])) == {}


class TestMembers:

    def test_first_column_is_ignored(self):
        members = rows_to_members(sheet([
            ["Member", "Start", "End"],
            ["M1", 1, 2],
            [99, 2, 3],
        ]))
        assert members == [Member(1, 2), Member(2, 3)]

    def test_row_order_and_duplicates_are_kept(self):
        members = rows_to_members(sheet([
            ["Member", "Start", "End"],
            ["a", 2, 1],
            ["b", 2, 1],
        ]))
        assert members == [Member(2, 1), Member(2, 1)]

    def test_float_and_string_ids_match_int_nodes(self):
        members = rows_to_members(sheet([["m", "s", "e"], ["a", 1.0, "2"]]))
        assert members == [Member(1, 2)]

    def test_missing_end_is_none(self):
        members = rows_to_members(sheet([["m", "s", "e"], ["a", 1, None]]))
        assert members == [Member(1, None)]


    def test_offset_member_table(self):
        members = rows_to_members(sheet([
            [None, None, None, None],
            [None, "Member", "Start", "End"],
            [None, "M1", 1, 2],
        ]))
        assert members == [Member(1, 2)]

    def test_float_id_matches_decimal_text_id(self):
        members = rows_to_members(sheet([["m", "s", "e"], ["a", 1.5, "2.50"]]))
        assert members == [Member("1.5", "2.5")]


class TestSupports:

    def test_supports(self):
        supports = rows_to_supports(sheet([
            ["Node", "Type"],
            [1, "Fixed"],
            [2, " Pinned "],
        ]))
        assert supports == [Support(1, "Fixed"), Support(2, "Pinned")]

    def test_missing_type_is_empty_string(self):
        supports = rows_to_supports(sheet([["Node", "Type"], [3, None]]))
        assert supports == [Support(3, "")]


class TestBuildModel:

    def test_build_model_uses_layout(self):
        tables = {
            "Members": sheet([["m", "s", "e"], ["a", 1, 2]]),
            "Nodes": sheet([["id", "x", "y", "z"], [1, 0, 0, 0], [2, 0, 0, 5]]),
            "Supports": sheet([["n", "t"], [1, "Fixed"]]),
        }
        layout = SheetLayout(members="Members", nodes="Nodes", supports="Supports")
        model = build_model(tables, layout, source="book.xlsx")

        assert model.source == "book.xlsx"
        assert len(model.nodes) == 2
        assert model.members == [Member(1, 2)]
        assert model.supports == [Support(1, "Fixed")]

    def test_default_layout_names(self):
        assert SheetLayout().names == ["A", "B", "C"]
