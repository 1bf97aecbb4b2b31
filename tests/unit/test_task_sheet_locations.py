"""
Unit tests for stop extraction and address parsing.

Run: pytest tests/unit/test_task_sheet_locations.py -v
"""

import pytest

from parsers.task_sheet_locations import extract_locations, parse_address

ADDRESS_FIELDS = ["company", "title", "street_address", "city", "postal_code", "country"]


# ===================
# ADDRESS TESTS
# ===================

class TestParseAddress:
    """Tests for parse_address()"""

    def test_full_address(self):
        """All six fields come from one match."""
        address = parse_address("Acme GmbH , Hauptstr 1 , DE-12345 Berlin")

        assert address.company == "Acme GmbH"
        assert address.title == "Acme GmbH"
        assert address.street_address == "Hauptstr 1"
        assert address.postal_code == "12345"
        assert address.city == "Berlin"
        assert address.country == "DE"

    def test_vehicle_code_without_hyphen(self):
        """One-letter vehicle codes resolve to ISO."""
        address = parse_address("Papier AG, Werkstr. 5, D 80331 München")

        # "D 80331" has a space, not a hyphen: not a postal token
        assert address.company is None

        address = parse_address("Papier AG, Werkstr. 5, D80331 München")
        assert address.postal_code == "80331"
        assert address.country == "DE"
        assert address.city == "München"

    def test_lowercase_country_letters(self):
        """Country letters match case-insensitively."""
        address = parse_address("UAB Linas , Gedimino 1 , lt-01103 Vilnius")

        assert address.postal_code == "01103"
        assert address.country == "LT"

    def test_unknown_country_is_none(self):
        """Unresolvable letters leave country None, other fields set."""
        address = parse_address("Foo Ltd , Main St 2 , QQ-99999 Nowhere")

        assert address.company == "Foo Ltd"
        assert address.postal_code == "99999"
        assert address.country is None

    @pytest.mark.parametrize("line", [
        "",
        None,
        "Broken address line",
        "Acme GmbH, Hauptstr 1",
        "Acme GmbH , Hauptstr 1 , 123 Berlin",
        "Acme GmbH ,Hauptstr 1 , DE-12345 Berlin",
    ])
    def test_non_matching_is_all_none(self, line):
        """No partial extraction."""
        address = parse_address(line)

        for name in ADDRESS_FIELDS:
            assert getattr(address, name) is None

    def test_custom_resolver(self):
        """Injected resolver receives the letters."""
        seen = []

        def resolver(letters):
            seen.append(letters)
            return "XX"

        address = parse_address("A , B , AB-1234 C", country_resolver=resolver)

        assert seen == ["AB"]
        assert address.country == "XX"

    def test_failing_resolver_degrades_to_none(self):
        """Resolver errors do not abort address parsing."""
        def resolver(letters):
            raise RuntimeError("lookup down")

        address = parse_address("A , B , AB-1234 C", country_resolver=resolver)

        assert address.company == "A"
        assert address.country is None


# ===================
# LOCATION BLOCK TESTS
# ===================

class TestExtractLocations:
    """Tests for extract_locations()"""

    def test_single_block(self, loading_stop, reference_date):
        """One six-line block gives one stop."""
        locations = extract_locations(loading_stop, reference_date)

        assert len(locations) == 1
        stop = locations[0]
        assert stop.company_address.city == "Berlin"
        assert stop.company_address.postal_code == "12345"
        assert stop.time.datetime_from == "2024-06-01T08:00:00.000000Z"
        assert stop.time.datetime_to == "2024-06-01T10:00:00.000000Z"

    def test_year_context_from_caller(self, reference_date):
        """Stop dates without a year use the reference date."""
        block = ["L1", "L2", "01.06 08:00-10:00", "L4", "Acme GmbH , Hauptstr 1 , DE-12345 Berlin", "L6"]

        stop = extract_locations(block, reference_date)[0]

        assert stop.time.datetime_from == "2024-06-01T08:00:00.000000Z"
        assert stop.time.datetime_to == "2024-06-01T10:00:00.000000Z"
        assert stop.company_address.city == "Berlin"
        assert stop.company_address.postal_code == "12345"

    def test_blocks_keep_document_order(self, unloading_stops, reference_date):
        """Stops come out in the order they appear."""
        locations = extract_locations(unloading_stops, reference_date)

        assert len(locations) == 2
        assert locations[0].company_address.city == "Vilnius"
        assert locations[0].company_address.country == "LT"
        assert locations[1].company_address.company is None
        assert locations[1].time.to_dict() == {"datetime_from": "2024-06-04T00:00:00.000000Z"}

    def test_last_block_may_miss_one_line(self, loading_stop, reference_date):
        """Five-line trailing block is still a stop."""
        lines = loading_stop + loading_stop[:5]

        assert len(extract_locations(lines, reference_date)) == 2

    def test_short_trailing_block_skipped(self, loading_stop, reference_date):
        """Four or fewer trailing lines are dropped."""
        lines = loading_stop + loading_stop[:4]

        assert len(extract_locations(lines, reference_date)) == 1

    def test_empty_section(self):
        """No lines, no stops."""
        assert extract_locations([]) == []

    def test_misaligned_block_degrades(self, reference_date):
        """A stop with a missing line shifts later fields silently."""
        block = ["1", "01.06.2024 08:00", "Contact", "Acme GmbH , Hauptstr 1 , DE-12345 Berlin", "Ramp", "x"]

        stop = extract_locations(block, reference_date)[0]

        assert stop.time.datetime_from is None
        assert stop.company_address.company is None
