"""Phone number canonicalization (E.164) used for storage and duplicate detection."""

import phonenumbers


def to_e164(raw: str | None, default_region: str | None = None) -> str | None:
    """Return the E.164 form of a phone number, or None if it cannot be parsed as valid.

    default_region (e.g. "US") applies only to numbers written without a
    leading +; numbers that carry a country code ignore it.
    """
    text = (raw or "").strip()
    if not text:
        return None
    try:
        number = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(number):
        return None
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)


def canonical_phone(raw: str | None, default_region: str | None = None) -> str | None:
    """E.164 when valid, otherwise the stripped input (None for blank input)."""
    text = (raw or "").strip() or None
    if text is None:
        return None
    return to_e164(text, default_region) or text
