from dataclasses import dataclass

from cclint.core._types import Level


@dataclass(frozen=True, slots=True)
class Violation:
    """A single finding produced by a rule whose check failed."""

    level: Level
    message: str


@dataclass(frozen=True, slots=True)
class Finding:
    """A violation labelled with the name of the rule that produced it."""

    rule: str
    violation: Violation

    @property
    def level(self) -> Level:
        return self.violation.level

    @property
    def message(self) -> str:
        return self.violation.message


class CommitLintError(Exception):
    """Raised in strict mode when a commit message has findings."""

    def __init__(self, findings: list[Finding]) -> None:
        self.findings = findings
        count = len(findings)
        errors = sum(1 for f in findings if f.level == Level.ERROR)
        super().__init__(f"Commit lint error: {errors} errors in {count} findings")
