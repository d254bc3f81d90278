"""Tests for mapping chooser output back to objects."""

from __future__ import annotations

import pytest

from manifest_fzf.core.selection import has_output, parse_selection_output, pick_objects
from manifest_fzf.models import ManifestObject

OBJS = [ManifestObject(kind="A"), ManifestObject(kind="B"), ManifestObject(kind="C")]


class TestParseSelectionOutput:
    def test_two_lines(self) -> None:
        assert parse_selection_output("0\tConfigMap cm1\n1\tDeployment web\n") == [0, 1]

    def test_unparsable_field(self) -> None:
        assert parse_selection_output("x\tbogus\n") == []

    def test_blank_lines_ignored(self) -> None:
        assert parse_selection_output("\n\n2\tC c\n   \n0\tA a\n\n") == [2, 0]

    def test_order_follows_output(self) -> None:
        assert parse_selection_output("2\tC c\n0\tA a\n1\tB b") == [2, 0, 1]

    def test_duplicates_kept(self) -> None:
        assert parse_selection_output("1\tB b\n1\tB b\n") == [1, 1]

    def test_line_without_tab(self) -> None:
        assert parse_selection_output("3\n") == [3]

    def test_mixed_valid_and_invalid(self) -> None:
        assert parse_selection_output("x\tbogus\n1\tB b\n\tno index\n") == [1]

    def test_empty(self) -> None:
        assert parse_selection_output("") == []

    @pytest.mark.parametrize("field", ["1_0", "+1", "\u0661", "1.0", "0x1", ""])
    def test_non_decimal_fields_rejected(self, field: str) -> None:
        assert parse_selection_output(f"{field}\tfoo\n") == []

    def test_negative_index_parsed(self) -> None:
        assert parse_selection_output("-1\tfoo\n") == [-1]

    def test_padded_field(self) -> None:
        assert parse_selection_output(" 2 \tfoo\n") == [2]


class TestPickObjects:
    def test_in_order_of_indices(self) -> None:
        assert [o.kind for o in pick_objects(OBJS, [2, 0])] == ["C", "A"]

    def test_out_of_range_skipped(self) -> None:
        assert [o.kind for o in pick_objects(OBJS, [-1, 3, 1, 99])] == ["B"]

    def test_duplicates(self) -> None:
        assert [o.kind for o in pick_objects(OBJS, [0, 0])] == ["A", "A"]

    def test_no_objects(self) -> None:
        assert pick_objects([], [0]) == []


class TestHasOutput:
    def test_blank(self) -> None:
        assert not has_output("")
        assert not has_output("\n  \n\t\n")

    def test_any_line(self) -> None:
        assert has_output("x\tbogus\n")
