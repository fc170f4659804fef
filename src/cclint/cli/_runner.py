from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cclint.cli._source import SourceError, read_source
from cclint.core._types import LEVEL_ORDER, Level
from cclint.core.linter import build_rules, lint

if TYPE_CHECKING:
    from cclint.core.config import LintConfig
    from cclint.core.violation import Finding


@dataclass
class CheckResult:
    source: str
    findings: list[Finding] = field(default_factory=list)
    error: str | None = None


@dataclass
class CheckReport:
    results: list[CheckResult] = field(default_factory=list)

    @property
    def all_findings(self) -> list[Finding]:
        ff: list[Finding] = []
        for r in self.results:
            ff.extend(r.findings)
        return ff

    @property
    def has_errors(self) -> bool:
        return any(r.error for r in self.results)

    def filtered(self, min_level: Level) -> list[Finding]:
        level = LEVEL_ORDER[min_level]
        return [f for f in self.all_findings if LEVEL_ORDER[f.level] >= level]


def run_check(
    sources: tuple[str, ...] = ("-",),
    *,
    config: LintConfig | None = None,
) -> CheckReport:
    """Lint every source and collect the results.

    A source that cannot be read is recorded with ``error`` set; the
    remaining sources are still checked.
    """
    rules = build_rules(config)
    report = CheckReport()
    for source in sources:
        result = CheckResult(source="<stdin>" if source == "-" else source)
        try:
            text = read_source(source)
        except SourceError as exc:
            result.error = str(exc)
        else:
            result.findings = lint(text, config=config, rules=rules)
        report.results.append(result)
    return report
