"""Tests for phone number canonicalization (E.164)."""

from cohort.infrastructure.phone import canonical_phone, to_e164


def test_country_code_number_to_e164() -> None:
    assert to_e164("+39 312 345 6789") == "+393123456789"
    assert to_e164("+1 202 555 1234", default_region="IT") == "+12025551234"


def test_default_region_used_for_local_numbers() -> None:
    assert to_e164("202 555 1234", default_region="US") == "+12025551234"
    assert to_e164("202 555 1234") is None


def test_invalid_or_blank_returns_none() -> None:
    assert to_e164(None) is None
    assert to_e164("   ") is None
    assert to_e164("abc") is None
    assert to_e164("123", default_region="US") is None


def test_canonical_phone_falls_back_to_stripped_input() -> None:
    assert canonical_phone("  +12025551234  ") == "+12025551234"
    assert canonical_phone(" ext 42 ") == "ext 42"
    assert canonical_phone("  ") is None
    assert canonical_phone(None) is None
