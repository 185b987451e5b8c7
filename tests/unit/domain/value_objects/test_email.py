import pytest

from credo.domain.value_objects.email import Email, mask_email


def test_email_is_normalized():
    assert Email("  Jane.Doe@Example.COM ").value == "jane.doe@example.com"


def test_equal_after_normalization():
    assert Email("USER@example.com") == Email("user@example.com")


@pytest.mark.parametrize("raw", ["", "   ", "no-at-sign", "a@b", "user@@example.com", "user@example"])
def test_invalid_emails_rejected(raw):
    with pytest.raises(ValueError):
        Email(raw)


def test_empty_email_reports_required():
    with pytest.raises(ValueError, match="email_required"):
        Email("")


def test_mask_for_logging_hides_local_part():
    assert Email("johnny@example.com").mask_for_logging() == "jo***@example.com"
    assert mask_email("not-an-email") == "***"
