"""Shared exceptions for service layer operations."""


class EmailAlreadyExistsError(Exception):
    """Raised when an email is already registered to another user."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"Email already registered: {email}")


class InvalidCredentialsError(Exception):
    """
    Raised when signin credentials do not match a stored user.

    Deliberately does not say whether the email or the password was wrong.
    """

    def __init__(self) -> None:
        super().__init__("Credentials incorrect")
