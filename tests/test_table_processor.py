"""Tests for record formatting."""

import json

from tabletree import RecordOutputFormat, RecordProcessor, RecordProcessorConfig, flatten_record

RECORDS = [
    {"region": "North", "sales": {"jan": "100", "feb": "200"}},
    {"region": "South", "sales": {"jan": "150", "feb": "a | b"}},
]


class TestFlattenRecord:

    def test_nested_keys_are_joined(self):
        assert flatten_record(RECORDS[0]) == {"region": "North", "sales.jan": "100", "sales.feb": "200"}

    def test_custom_separator(self):
        assert flatten_record({"a": {"b": {"c": "1"}}}, separator="/") == {"a/b/c": "1"}


class TestRecordProcessor:

    def test_json_keeps_nesting(self):
        output = RecordProcessor().format_records(RECORDS)
        assert json.loads(output) == RECORDS

    def test_markdown(self):
        config = RecordProcessorConfig(output_format=RecordOutputFormat.MARKDOWN)
        lines = RecordProcessor(config).format_records(RECORDS).splitlines()
        assert lines[0] == "| region | sales.jan | sales.feb |"
        assert lines[1] == "| --- | --- | --- |"
        assert lines[2] == "| North | 100 | 200 |"
        assert lines[3] == "| South | 150 | a \\| b |"

    def test_text(self):
        config = RecordProcessorConfig(output_format=RecordOutputFormat.TEXT)
        output = RecordProcessor(config).format_records(RECORDS[:1])
        assert output == "region\tsales.jan\tsales.feb\nNorth\t100\t200"

    def test_missing_keys_are_blank(self):
        config = RecordProcessorConfig(output_format=RecordOutputFormat.TEXT)
        output = RecordProcessor(config).format_records([{"a": "1"}, {"b": "2"}])
        assert output.splitlines() == ["a\tb", "1\t", "\t2"]

    def test_no_records(self):
        config = RecordProcessorConfig(output_format=RecordOutputFormat.MARKDOWN)
        assert RecordProcessor(config).format_records([]) == ""
