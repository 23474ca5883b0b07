import pytest

from envstore.core.masking import MASK, display_value, is_secret
from envstore.types.types import TypedValue


@pytest.mark.parametrize(
    ("key", "secret"),
    [
        ("IMAP_PASSWORD", True),
        ("db_password", True),
        ("CLIENT_SECRET", True),
        ("GITHUB_TOKEN", True),
        ("OPENAI_API_KEY", True),
        ("IMAP_HOST", False),
        ("IMAP_PORT", False),
    ],
)
def test_is_secret(key, secret):
    assert is_secret(key) is secret


def test_display_value_masks_secrets():
    assert display_value("IMAP_PASSWORD", TypedValue.string("hunter2")) == MASK


def test_display_value_renders_plain_values():
    assert display_value("IMAP_PORT", TypedValue.integer(993)) == "993"


def test_display_value_for_missing_key():
    assert display_value("IMAP_PASSWORD", None) == "Not found"


def test_custom_markers_and_mask():
    value = TypedValue.string("x")
    assert display_value("PIN_CODE", value, markers=("PIN",), mask="?") == "?"
    assert display_value("IMAP_PASSWORD", value, markers=("PIN",)) == "x"
