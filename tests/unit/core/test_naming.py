import pytest

from envstore.core.naming import derived_name


@pytest.mark.parametrize(
    ("key", "alias"),
    [
        ("IMAP_HOST", "imapHost"),
        ("IMAP_PASSWORD", "imapPassword"),
        ("PORT", "port"),
        ("DB_URL_2", "dbUrl2"),
        ("__LEADING__AND_DOUBLE_", "leadingAndDouble"),
        ("already_lower", "alreadyLower"),
        ("MiXeD_CaSe", "mixedCase"),
    ],
)
def test_derived_name(key, alias):
    assert derived_name(key) == alias


def test_only_underscores_has_no_alias():
    assert derived_name("___") == ""
