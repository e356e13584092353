"""Tests for parsing API responses into records."""

import pytest
from pydantic import ValidationError

from device_export.errors import ParseFailed
from device_export.records import MISSING, Record, parse_records


class TestParseRecords:

    def test_preserves_order_and_fields(self):
        records = parse_records(
            '[{"id": "1", "name": "Apple Watch", "data": {"price": 399}},'
            ' {"id": "2", "name": "Samsung TV", "data": {"price": 599, "size": "55in"}}]'
        )

        assert [r.name for r in records] == ["Apple Watch", "Samsung TV"]
        assert records[0].attributes == {"price": 399}
        assert records[1].attributes == {"price": 599, "size": "55in"}

    def test_empty_array(self):
        assert parse_records("[]") == []

    def test_missing_and_null_fields_do_not_fail(self):
        records = parse_records('[{"id": "1"}, {"name": null, "data": null}, {"name": "Apple Pencil"}]')

        assert len(records) == 3
        assert records[0].name is None
        assert records[0].attributes == {}
        assert records[1].name is None
        assert records[1].attributes == {}
        assert records[2].name == "Apple Pencil"
        assert records[2].attributes == {}

    def test_non_string_name_becomes_none(self):
        records = parse_records('[{"name": 42, "data": {}}, {"name": ["Apple"]}]')

        assert [r.name for r in records] == [None, None]

    def test_nested_attribute_values_are_kept(self):
        records = parse_records('[{"name": "x", "data": {"price": {"amount": 5}, "tags": [1, 2], "new": true}}]')

        assert records[0].attributes == {"price": {"amount": 5}, "tags": [1, 2], "new": True}

    @pytest.mark.parametrize(
        "body",
        [
            "",
            "not json",
            '{"name": "Apple Watch"}',
            "null",
            '["Apple Watch"]',
            '[{"name": "Apple Watch"}, 3]',
            '[{"name": "Apple Watch", "data": [1, 2]}]',
        ],
    )
    def test_rejects_malformed_bodies(self, body):
        with pytest.raises(ParseFailed):
            parse_records(body)

    def test_parse_failure_keeps_cause(self):
        with pytest.raises(ParseFailed) as exc_info:
            parse_records("{")

        assert exc_info.value.__cause__ is not None


class TestRecord:

    def test_price_present(self):
        record = Record(name="Apple Watch", attributes={"price": 399})

        assert record.price == 399

    def test_price_missing(self):
        record = Record(name="Apple Pencil")

        assert record.price is MISSING

    def test_price_null_is_not_missing(self):
        record = Record(name="Apple Pencil", attributes={"price": None})

        assert record.price is None

    def test_price_lookup_is_case_sensitive(self):
        record = Record(name="Apple iPad Air", attributes={"Price": "519.99"})

        assert record.price is MISSING

    def test_records_are_immutable(self):
        record = Record(name="Apple Watch")

        with pytest.raises(ValidationError):
            record.name = "Samsung Watch"

    def test_attributes_are_read_only(self):
        record = parse_records('[{"name": "Apple Watch", "data": {"price": 399}}]')[0]

        with pytest.raises(TypeError):
            record.attributes["price"] = 1

        assert record.price == 399

    def test_default_attributes_are_read_only(self):
        record = Record(name="Apple Pencil")

        with pytest.raises(TypeError):
            record.attributes["price"] = 1

    def test_attributes_do_not_alias_the_input(self):
        data = {"price": 399}
        record = Record(name="Apple Watch", attributes=data)

        data["price"] = 1

        assert record.price == 399
