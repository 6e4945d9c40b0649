"""Tests for structured response decoding."""

from __future__ import annotations

from decimal import Decimal

import pytest

from structured_prompting.decode import Invalid, Ok, decode_structured_response, try_decode


def _items(outcome):
    assert isinstance(outcome, Ok)
    return [(i.department, i.average_salary) for i in outcome.value.items]


class TestDecodeStructuredResponse:
    """Tests for decode_structured_response."""

    def test_valid_payload(self):
        """Test entries equal the parsed field values."""
        outcome = decode_structured_response(
            '{"Items":[{"Department":"Engineering","AverageSalary":95000.5},'
            '{"Department":"Sales","AverageSalary":72000}]}'
        )
        assert _items(outcome) == [
            ("Engineering", Decimal("95000.5")),
            ("Sales", Decimal("72000")),
        ]

    @pytest.mark.parametrize(
        "items_key,dept_key,salary_key",
        [
            ("Items", "Department", "AverageSalary"),
            ("items", "department", "averagesalary"),
            ("ITEMS", "DEPARTMENT", "AVERAGESALARY"),
            ("iTeMs", "dePartMent", "averageSalary"),
        ],
    )
    def test_case_insensitive_keys(self, items_key, dept_key, salary_key):
        """Test key casing does not change the outcome."""
        text = f'{{"{items_key}":[{{"{dept_key}":"Eng","{salary_key}":100.25}}]}}'
        assert _items(decode_structured_response(text)) == [("Eng", Decimal("100.25"))]

    def test_extra_keys_ignored(self):
        outcome = decode_structured_response(
            '{"Items":[{"Department":"Eng","AverageSalary":1,"Headcount":3}],"Note":"x"}'
        )
        assert _items(outcome) == [("Eng", Decimal("1"))]

    def test_none_is_invalid(self):
        assert decode_structured_response(None) == Invalid()

    @pytest.mark.parametrize(
        "text",
        [
            "{not json",
            "",
            "   ",
            "NaN",
            '{"Items":[{"Department":"Eng","AverageSalary":NaN}]}',
        ],
    )
    def test_malformed_json_is_invalid(self, text):
        """Test parse failures come back as Invalid without raising."""
        assert isinstance(decode_structured_response(text), Invalid)

    def test_deeply_nested_json_is_invalid(self):
        """Test nesting past the recursion limit is Invalid, not an error."""
        assert isinstance(decode_structured_response("[" * 100000 + "]" * 100000), Invalid)

    @pytest.mark.parametrize(
        "text",
        [
            '{"Items":[{"Department":"Eng","AverageSalary":"high"}]}',
            '{"Items":[{"Department":"Eng","AverageSalary":"95000"}]}',
            '{"Items":[{"Department":"Eng","AverageSalary":true}]}',
            '{"Items":[{"Department":"Eng","AverageSalary":null}]}',
            '{"Items":[{"Department":42,"AverageSalary":1}]}',
            '{"Items":[{"Department":"","AverageSalary":1}]}',
            '{"Items":[{"Department":"   ","AverageSalary":1}]}',
            '{"Items":[{"AverageSalary":1}]}',
            '{"Items":[{"Department":"Eng"}]}',
            '{"Items":"Eng"}',
            '[{"Department":"Eng","AverageSalary":1}]',
            '"just a string"',
            "null",
        ],
    )
    def test_schema_mismatch_is_invalid(self, text):
        """Test shape and type mismatches come back as Invalid."""
        assert isinstance(decode_structured_response(text), Invalid)

    def test_partial_validity_discards_everything(self):
        """Test one bad entry invalidates the whole response."""
        outcome = decode_structured_response(
            '{"Items":[{"Department":"Eng","AverageSalary":1},'
            '{"Department":"Ops","AverageSalary":"n/a"}]}'
        )
        assert isinstance(outcome, Invalid)

    def test_empty_items_is_ok(self):
        """Test an empty collection decodes, distinct from Invalid."""
        outcome = decode_structured_response('{"Items":[]}')
        assert isinstance(outcome, Ok)
        assert outcome.value.items == []

    @pytest.mark.parametrize("text", ['{"Items":null}', "{}"])
    def test_missing_items_decodes_empty(self, text):
        outcome = decode_structured_response(text)
        assert isinstance(outcome, Ok)
        assert outcome.value.items == []


class TestTryDecode:
    """Tests for the sanitize-then-decode pipeline."""

    @pytest.mark.parametrize("raw", [None, "", "  \n "])
    def test_blank_is_invalid(self, raw):
        assert isinstance(try_decode(raw), Invalid)

    def test_fenced_payload(self):
        """Test a fenced answer still decodes."""
        outcome = try_decode('```json\n{"Items":[{"Department":"Eng","AverageSalary":10}]}\n```')
        assert _items(outcome) == [("Eng", Decimal("10"))]

    def test_prose_is_invalid(self):
        assert isinstance(try_decode("The average salary is 50000."), Invalid)


class TestDepartmentName:
    """Tests for department name handling."""

    def test_surrounding_whitespace_kept(self):
        """Test names are not altered, only blank ones rejected."""
        outcome = decode_structured_response('{"Items":[{"Department":" Eng ","AverageSalary":1}]}')
        assert _items(outcome) == [(" Eng ", Decimal("1"))]
