from dataclasses import dataclass
from typing import ClassVar

from cclint.core._types import Level
from cclint.core.message import Message
from cclint.core.violation import Violation


@dataclass(frozen=True, slots=True)
class Rule:
    """Base class for a single commit message check.

    Subclasses set the class-level identity (``NAME``), default severity
    (``LEVEL``) and ``SUMMARY``, and implement :meth:`message` and
    :meth:`validate`.  Instances are immutable and may be shared freely.

    Example::

        @dataclass(frozen=True, slots=True)
        class ScopeEmpty(Rule):
            NAME = "scope-empty"
            LEVEL = Level.ERROR
            SUMMARY = "Scope must be present"

            def message(self, message: Message) -> str:
                return "scope is empty"

            def validate(self, message: Message) -> Violation | None:
                if message.scope is None:
                    return self.violation(message)
                return None
    """

    NAME: ClassVar[str] = ""
    LEVEL: ClassVar[Level] = Level.ERROR
    SUMMARY: ClassVar[str] = ""

    level: Level | None = None
    """Configured severity override. ``None`` means use :attr:`LEVEL`."""

    def effective_level(self) -> Level:
        """Return the configured level, falling back to the rule default."""
        return self.LEVEL if self.level is None else self.level

    def message(self, message: Message) -> str:
        """Describe why the rule fired for *message*."""
        raise NotImplementedError

    def validate(self, message: Message) -> Violation | None:
        """Return a violation if *message* breaks the rule, else ``None``."""
        raise NotImplementedError

    def violation(self, message: Message) -> Violation:
        """Build the violation this rule reports for *message*."""
        return Violation(level=self.effective_level(), message=self.message(message))

    def __str__(self) -> str:
        return f"[{self.NAME}] {self.SUMMARY}"
