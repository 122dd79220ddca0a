"""Tests for the Diff Engine."""

import pytest

from json_workbench.engine.diff_engine import DiffEngine, DiffMode, canonical_json, diff, diff_lines


@pytest.fixture
def engine():
    """Create a diff engine."""
    return DiffEngine()


class TestStructuralDiff:
    """Tests for structural comparison of parseable inputs."""

    def test_formatting_and_key_order_ignored(self, engine):
        result = engine.diff('{"a":1,"b":[1,2]}', '{\n  "b": [1, 2],\n    "a": 1\n}')

        assert result.mode == DiffMode.STRUCTURAL
        assert result.added_count == 0
        assert result.removed_count == 0
        assert not result.has_changes

    def test_changed_value(self, engine):
        result = engine.diff('{"a": 1}', '{"a": 2}')
        segments = list(result)

        assert [s.content for s in segments if s.removed] == ['  "a": 1\n']
        assert [s.content for s in segments if s.added] == ['  "a": 2\n']
        removed_index = next(i for i, s in enumerate(segments) if s.removed)
        added_index = next(i for i, s in enumerate(segments) if s.added)
        assert removed_index < added_index

    def test_added_key_does_not_mark_sibling_changed(self, engine):
        result = engine.diff('{"a": 1}', '{"a": 1, "b": 2}')

        assert result.removed_count == 0
        assert [s.content for s in result if s.added] == ['  "b": 2\n']

    def test_yaml_with_impossible_date(self, engine):
        result = engine.diff("a: 2024-13-01\nb: 1", "a: 1\nb: 1")

        assert result.mode == DiffMode.STRUCTURAL
        assert [s.content for s in result if s.removed] == ['  "a": "2024-13-01",\n']

    def test_falsy_values_compare_structurally(self, engine):
        result = engine.diff('""', '"x"')

        assert result.mode == DiffMode.STRUCTURAL
        assert result.has_changes

    def test_across_formats(self, engine):
        result = engine.diff("a: 1\nb: 2", '{"b": 2, "a": 1}')

        assert result.mode == DiffMode.STRUCTURAL
        assert not result.has_changes

    def test_canonical_json_sorts_keys(self):
        assert canonical_json({"b": 1, "a": 2}) == '{\n  "a": 2,\n  "b": 1\n}'


class TestLineDiff:
    """Tests for the raw line fallback."""

    def test_unparseable_inputs_use_line_mode(self, engine):
        result = engine.diff("hello\nworld", "hello\nthere")

        assert result.mode == DiffMode.LINES
        assert [(s.content, s.added, s.removed) for s in result] == [
            ("hello\n", False, False),
            ("world", False, True),
            ("there", True, False),
        ]

    def test_segments_rebuild_both_inputs(self):
        old = "one\ntwo\nthree\n"
        new = "one\n2\nthree\nfour\n"
        segments = diff_lines(old, new)

        assert "".join(s.content for s in segments if not s.added) == old
        assert "".join(s.content for s in segments if not s.removed) == new

    def test_identical_texts(self):
        segments = diff_lines("same\n", "same\n")

        assert len(segments) == 1
        assert segments[0].unchanged

    def test_module_level_diff(self):
        result = diff("x\ny", "x\nz")

        assert len(result) == 3
        assert result.to_dict()["mode"] == "lines"
