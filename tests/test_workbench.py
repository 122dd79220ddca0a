"""Tests for the Workbench session renderer."""

import jwt
import pytest
import yaml

from json_workbench.config.base import MockConfig, OutputMode, SchemaConfig, WorkbenchConfig
from json_workbench.engine.diff_engine import DiffMode
from json_workbench.engine.workbench import Workbench, WorkbenchSession, render_diff
from json_workbench.parsing.base import InputFormat
from json_workbench.parsing.detector import UNDETECTABLE_MESSAGE


@pytest.fixture
def workbench():
    """Create a workbench with a fixed mock seed."""
    return Workbench(WorkbenchConfig(mock=MockConfig(count=3, seed=11)))


class TestStructuredModes:
    """Tests for modes rendering the parsed primary input."""

    def test_tree(self, workbench):
        output = workbench.render(WorkbenchSession(input='{"a":1}'))

        assert output.mode == OutputMode.TREE
        assert output.parse_result.format == InputFormat.JSON
        assert output.data == {"a": 1}
        assert output.content == '{\n  "a": 1\n}'
        assert output.error is None

    def test_empty_input(self, workbench):
        output = workbench.render(WorkbenchSession(input="  "))

        assert output.content == ""
        assert output.error is None

    def test_yaml_with_impossible_date(self, workbench):
        output = workbench.render(WorkbenchSession(input="a: 2024-13-01\nb: 1"))

        assert output.error is None
        assert output.data == {"a": "2024-13-01", "b": 1}

    def test_undetectable_input(self, workbench):
        output = workbench.render(WorkbenchSession(input="just words"))

        assert output.error == UNDETECTABLE_MESSAGE
        assert output.content == ""

    def test_schema_mode_with_root_override(self, workbench):
        session = WorkbenchSession(mode=OutputMode.TYPESCRIPT, input='{"id": 1}', root_name="User")

        output = workbench.render(session)

        assert output.content == "export interface User {\n  id: number;\n}"

    def test_schema_mode_uses_configured_root(self):
        workbench = Workbench(WorkbenchConfig(schemas=SchemaConfig(sql_table="people")))

        output = workbench.render(WorkbenchSession(mode=OutputMode.SQL, input="id: 1\nname: Ada"))

        assert output.content.startswith("CREATE TABLE people (")

    def test_sql_mode_non_object(self, workbench):
        output = workbench.render(WorkbenchSession(mode=OutputMode.SQL, input="[1, 2]"))

        assert output.content.startswith("--")

    def test_yaml_mode_from_csv(self, workbench):
        output = workbench.render(WorkbenchSession(mode=OutputMode.YAML, input="name,age\nAda,36"))

        assert output.parse_result.format == InputFormat.CSV
        assert yaml.safe_load(output.content) == [{"name": "Ada", "age": "36"}]

    def test_xml_mode(self, workbench):
        output = workbench.render(WorkbenchSession(mode=OutputMode.XML, input='{"a": 1}'))

        assert output.content == "<root>\n    <a>1</a>\n</root>"

    def test_query_mode(self, workbench):
        session = WorkbenchSession(mode=OutputMode.QUERY, input='{"a": {"b": [1, 2]}}', query="a.b[1]")

        output = workbench.render(session)

        assert output.data == 2
        assert output.content == "2"

    def test_query_error_inline(self, workbench):
        session = WorkbenchSession(mode=OutputMode.QUERY, input='{"a": 1}', query="a[")

        output = workbench.render(session)

        assert output.error.startswith("Invalid JMESPath query:")

    def test_transform_mode(self, workbench):
        session = WorkbenchSession(
            mode=OutputMode.TRANSFORM,
            input='{"items": [1, 2, 3]}',
            second_input='[x for x in data["items"] if x > 1]',
        )

        output = workbench.render(session)

        assert output.data == [2, 3]
        assert output.error is None

    def test_transform_error_inline(self, workbench):
        session = WorkbenchSession(mode=OutputMode.TRANSFORM, input="[1]", second_input="import os")

        output = workbench.render(session)

        assert output.error.startswith("Transformation Error:")

    def test_render_does_not_mutate_session(self, workbench):
        session = WorkbenchSession(mode=OutputMode.ZOD, input='{"a": 1}')
        before = session.model_copy(deep=True)

        workbench.render(session)

        assert session == before


class TestDiffMode:
    """Tests for diff mode."""

    def test_structural(self, workbench):
        session = WorkbenchSession(mode=OutputMode.DIFF, input='{"a": 1}', second_input='{"a": 2}')

        output = workbench.render(session)

        assert output.diff.mode == DiffMode.STRUCTURAL
        assert '-   "a": 1' in output.content
        assert '+   "a": 2' in output.content

    def test_render_diff_prefixes(self, workbench):
        result = workbench.diff_engine.diff("hello\nworld", "hello\nthere")

        assert render_diff(result) == "  hello\n- world\n+ there"


class TestToolModes:
    """Tests for modes that bypass format detection."""

    def test_mock_uses_config(self, workbench):
        session = WorkbenchSession(mode=OutputMode.MOCK, input='{"name": "{{person.fullName}}"}')

        output = workbench.render(session)

        assert len(output.data) == 3
        assert workbench.render(session).data == output.data

    def test_mock_count_override(self, workbench):
        session = WorkbenchSession(mode=OutputMode.MOCK, input='{"n": 1}', mock_count=2)

        assert workbench.render(session).data == [{"n": 1}, {"n": 1}]

    def test_jwt_mode(self, workbench):
        token = jwt.encode({"sub": "1"}, "a-test-secret-that-is-long-enough-for-hs256", algorithm="HS256")

        output = workbench.render(WorkbenchSession(mode=OutputMode.JWT, input=token))

        assert output.jwt.is_valid
        assert '"sub": "1"' in output.content

    def test_jwt_mode_invalid(self, workbench):
        output = workbench.render(WorkbenchSession(mode=OutputMode.JWT, input="garbage"))

        assert output.error == "Invalid JWT Format"
        assert output.content == ""

    def test_utils_mode(self, workbench):
        output = workbench.render(WorkbenchSession(mode=OutputMode.UTILS, input="hello"))

        assert output.data == "hello"
        assert '"base64": "aGVsbG8="' in output.content


class TestFormatInput:
    """Tests for prettify/minify."""

    def test_minify(self, workbench):
        assert workbench.format_input('{\n  "a": [1, 2]\n}', minify=True) == '{"a": [1, 2]}'

    def test_prettify_yaml(self, workbench):
        assert workbench.format_input("a: 1\nb: 2") == '{\n  "a": 1,\n  "b": 2\n}'

    def test_invalid_input_unchanged(self, workbench):
        assert workbench.format_input("not structured") == "not structured"
