"""User — identity plus display data, with a validating email mutator.

Invariants:
    - email, once assigned through set_email(), is never empty
    - A rejected set_email() leaves the user untouched
"""

from dataclasses import dataclass

from users_service.core.errors import ValidationError

EMPTY_EMAIL_MESSAGE = "email cannot be empty"


@dataclass
class User:
    id: int = 0
    name: str = ""
    email: str = ""

    def display_name(self) -> str:
        """Name followed by the angle-bracketed email, e.g. ``Ann <a@x.com>``."""
        return f"{self.name} <{self.email}>"

    def set_email(self, email: str) -> None:
        if not email:
            raise ValidationError(EMPTY_EMAIL_MESSAGE, field="email")
        self.email = email
