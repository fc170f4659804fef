from dataclasses import dataclass

from cclint.core._types import Level
from cclint.core.message import Message
from cclint.core.rule import Rule
from cclint.core.violation import Violation


@dataclass(frozen=True, slots=True)
class TypeEmpty(Rule):
    NAME = "type-empty"
    LEVEL = Level.ERROR
    SUMMARY = "Header must start with a type"

    def message(self, message: Message) -> str:
        return "type is empty"

    def validate(self, message: Message) -> Violation | None:
        if message.type is None:
            return self.violation(message)
        return None


@dataclass(frozen=True, slots=True)
class ScopeEmpty(Rule):
    """Fires when the header has no ``(scope)``.

    Only an absent scope counts; deciding whether ``()`` is absent is left
    to the parser.
    """

    NAME = "scope-empty"
    LEVEL = Level.ERROR
    SUMMARY = "Header must carry a (scope)"

    def message(self, message: Message) -> str:
        return "scope is empty"

    def validate(self, message: Message) -> Violation | None:
        if message.scope is None:
            return self.violation(message)
        return None


@dataclass(frozen=True, slots=True)
class DescriptionEmpty(Rule):
    NAME = "description-empty"
    LEVEL = Level.ERROR
    SUMMARY = "Header must have a description after the colon"

    def message(self, message: Message) -> str:
        return "description is empty"

    def validate(self, message: Message) -> Violation | None:
        if message.description is None:
            return self.violation(message)
        return None


@dataclass(frozen=True, slots=True)
class BodyEmpty(Rule):
    NAME = "body-empty"
    LEVEL = Level.WARNING
    SUMMARY = "Message should have a body"

    def message(self, message: Message) -> str:
        return "body is empty"

    def validate(self, message: Message) -> Violation | None:
        if message.body is None:
            return self.violation(message)
        return None


@dataclass(frozen=True, slots=True)
class FootersEmpty(Rule):
    NAME = "footers-empty"
    LEVEL = Level.WARNING
    SUMMARY = "Message should end with footers"

    def message(self, message: Message) -> str:
        return "footers are empty"

    def validate(self, message: Message) -> Violation | None:
        if message.footers is None:
            return self.violation(message)
        return None
