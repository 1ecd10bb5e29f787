"""Email address checks shared by the API and the admin scripts."""

from email_validator import EmailNotValidError, validate_email


def check_email_address(value: str) -> str:
    """Return value unchanged if it is a syntactically valid email, else raise ValueError.

    The normalized form email-validator computes is discarded: emails are
    matched exactly, so the stored string is always the one given.
    """
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}") from e
    return value
