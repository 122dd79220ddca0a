"""Tests for the serialization converters."""

import yaml

from json_workbench.converters.serializers import to_csv, to_json, to_xml, to_yaml


class TestToJson:
    """Tests for JSON output."""

    def test_pretty(self):
        assert to_json({"a": 1}) == '{\n  "a": 1\n}'

    def test_minified(self):
        assert to_json({"a": [1, 2]}, indent=None) == '{"a": [1, 2]}'

    def test_non_ascii_kept(self):
        assert to_json("café") == '"café"'


class TestToYaml:
    """Tests for YAML output."""

    def test_block_style_keeps_key_order(self):
        assert to_yaml({"b": 1, "a": [1, 2]}) == "b: 1\na:\n- 1\n- 2\n"

    def test_round_trips(self):
        data = [{"name": "Ada", "age": "36"}]

        assert yaml.safe_load(to_yaml(data)) == data


class TestToXml:
    """Tests for XML output."""

    def test_lists_become_repeated_elements(self):
        assert to_xml({"name": "Ada", "tags": ["x", "y"]}) == (
            "<root>\n"
            "    <name>Ada</name>\n"
            "    <tags>x</tags>\n"
            "    <tags>y</tags>\n"
            "</root>"
        )

    def test_attributes_and_text(self):
        output = to_xml({"user": {"_attributes": {"id": "1"}, "_text": "Ada"}})

        assert output == '<root>\n    <user id="1">Ada</user>\n</root>'

    def test_list_root(self):
        assert to_xml([1, 2]) == "<root>\n    <item>1</item>\n    <item>2</item>\n</root>"

    def test_booleans_and_null(self):
        output = to_xml({"ok": True, "none": None})

        assert "<ok>true</ok>" in output
        assert "<none />" in output


class TestToCsv:
    """Tests for CSV output."""

    def test_union_header_and_nested_values(self):
        output = to_csv([{"a": 1, "b": True}, {"a": 2, "c": {"x": 1}}])

        assert output.split("\r\n") == ["a,b,c", "1,true,", '2,,"{""x"": 1}"']

    def test_single_object(self):
        assert to_csv({"id": 1, "name": "Ada"}) == "id,name\r\n1,Ada"

    def test_non_tabular_input(self):
        assert to_csv(5) == "Error: CSV conversion requires an array or object. Got int"
        assert to_csv(None) == "Error: CSV conversion requires an array or object. Got null"

    def test_rows_must_be_objects(self):
        assert to_csv([1, 2]).startswith("Error converting to CSV:")
