from __future__ import annotations

from rsa_ops.validator import clean_line, parse_alternatives, validate_alternatives


def test_numbering_is_stripped_and_first_three_taken() -> None:
    content = "1. Act now\n2. Shop today\n3. Get yours\n4. Extra line"
    result = validate_alternatives(content, 30)
    assert result.accepted
    assert result.alternatives == ["Act now", "Shop today", "Get yours"]
    assert result.found == 4
    assert result.reason is None


def test_two_usable_lines_are_rejected() -> None:
    result = validate_alternatives("Act now\n\nShop today\n", 30)
    assert not result.accepted
    assert result.alternatives == []
    assert result.found == 2
    assert "2 valid" in (result.reason or "")


def test_lines_over_bound_are_dropped() -> None:
    too_long = "x" * 31
    content = f"Act now\n{too_long}\nShop today\nGet yours"
    assert parse_alternatives(content, 30) == ["Act now", "Shop today", "Get yours"]


def test_line_exactly_at_bound_is_kept() -> None:
    exact = "y" * 30
    assert parse_alternatives(exact, 30) == [exact]


def test_bullets_and_markers() -> None:
    assert clean_line("  - Shop today ") == "Shop today"
    assert clean_line("* Get yours") == "Get yours"
    assert clean_line("2) Act now") == "Act now"
    assert clean_line("3: Act now") == "Act now"
    assert clean_line("24h delivery") == "24h delivery"


def test_copy_starting_with_digits_is_kept() -> None:
    assert clean_line("2-for-1 deals today") == "2-for-1 deals today"
    assert clean_line("3:00 pm flash sale") == "3:00 pm flash sale"
    assert clean_line("1.5x faster checkout") == "1.5x faster checkout"
    assert clean_line("-50% on all shoes") == "-50% on all shoes"


def test_bare_number_line_is_dropped() -> None:
    assert clean_line("1.") == ""
    assert parse_alternatives("1.\n2. Act now\n1.2. Shop today\n4 - Get yours", 30) == [
        "Act now",
        "Shop today",
        "Get yours",
    ]


def test_empty_content() -> None:
    assert parse_alternatives("", 90) == []
    assert parse_alternatives(None, 90) == []
    assert not validate_alternatives(None, 90).accepted
