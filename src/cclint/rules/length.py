from dataclasses import dataclass

from cclint.core._types import Level
from cclint.core.message import Message
from cclint.core.rule import Rule
from cclint.core.violation import Violation


@dataclass(frozen=True, slots=True)
class DescriptionMaxLength(Rule):
    """Fires when the description exceeds ``length`` characters.

    An absent description is left to ``description-empty``.
    """

    NAME = "description-max-length"
    LEVEL = Level.ERROR
    SUMMARY = "Description must not exceed the configured length"

    length: int = 72

    def message(self, message: Message) -> str:
        return f"description is longer than {self.length} characters"

    def validate(self, message: Message) -> Violation | None:
        if message.description is not None and len(message.description) > self.length:
            return self.violation(message)
        return None


@dataclass(frozen=True, slots=True)
class BodyMaxLineLength(Rule):
    NAME = "body-max-line-length"
    LEVEL = Level.WARNING
    SUMMARY = "Body lines must not exceed the configured length"

    length: int = 100

    def message(self, message: Message) -> str:
        return f"body line is longer than {self.length} characters"

    def validate(self, message: Message) -> Violation | None:
        if message.body is None:
            return None
        if any(len(line) > self.length for line in message.body.splitlines()):
            return self.violation(message)
        return None
