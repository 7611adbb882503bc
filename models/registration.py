"""Validated input for the create-account form."""

from pydantic import BaseModel, field_validator


class RegistrationForm(BaseModel):
    """Username and email entered when creating an account."""

    username: str
    email: str

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Username cannot be empty")
        return value

    @field_validator("email")
    @classmethod
    def email_has_domain(cls, value: str) -> str:
        value = value.strip()
        local, _, domain = value.partition("@")
        if not local or not domain or "." not in domain:
            raise ValueError("Email address is invalid")
        return value.lower()

    @classmethod
    def first_error(cls, error) -> str:
        """Human-readable message for the first problem in a ValidationError."""
        details = error.errors()
        if not details:
            return str(error)
        message = details[0]["msg"]
        # pydantic prefixes messages raised from validators
        return message.removeprefix("Value error, ")
