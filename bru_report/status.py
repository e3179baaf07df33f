"""Pass/fail normalization shared by every part of the report."""

ICON_PASS = "✅"
ICON_FAIL = "❌"


def is_passing(value: object) -> bool:
    """Normalize a status value to pass/fail.

    Strings pass only when they equal ``"pass"`` ignoring case; any other value
    passes when it is truthy.
    """
    if isinstance(value, str):
        return value.lower() == "pass"
    return bool(value)


def status_indicator(value: object) -> str:
    """Return the icon for a status value."""
    return ICON_PASS if is_passing(value) else ICON_FAIL
