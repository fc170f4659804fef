import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeAlias

from cclint.core._types import LEVEL_ORDER
from cclint.core.config import LintConfig
from cclint.core.message import Message, parse
from cclint.core.rule import Rule
from cclint.core.violation import CommitLintError, Finding

logger = logging.getLogger("cclint")

FindingCallback: TypeAlias = Callable[[Finding], Any]


def build_rules(config: LintConfig | None = None) -> list[Rule]:
    """Instantiate every rule enabled by *config*, in name order."""
    from cclint.rules import RULES

    _config = config or LintConfig()
    rules: list[Rule] = []
    for name in _config.enabled_rules():
        rule_cls = RULES.get(name)
        if rule_cls is None:
            logger.warning("Unknown rule %r in config, skipping", name)
            continue
        rules.append(rule_cls(**_config.rules[name]))
    return rules


def lint(
    message: Message | str,
    *,
    config: LintConfig | None = None,
    rules: Iterable[Rule] | None = None,
    strict: bool = False,
    on_violation: FindingCallback | None = None,
) -> list[Finding]:
    """Run rules over a commit message and collect findings.

    Args:
        message: A parsed :class:`Message`, or raw commit text to parse.
        config: Enabled rules, their options and ``min_level``.
                Defaults to ``LintConfig()``.
        rules: Explicit rule instances. Built from *config* if None.
        strict: If True, raise CommitLintError when there is any finding.
        on_violation: Optional callback for each finding.

    Returns:
        Findings at or above ``config.min_level``, in rule order.

    Example::

        from cclint import lint

        for finding in lint("feat: add thing"):
            print(finding.rule, finding.message)

    """
    _config = config or LintConfig()
    if isinstance(message, str):
        message = parse(message)
    if rules is None:
        rules = build_rules(_config)

    min_order = LEVEL_ORDER[_config.min_level]
    findings: list[Finding] = []

    for rule in rules:
        try:
            violation = rule.validate(message)
        except Exception:
            logger.exception("Rule %s.validate() raised", type(rule).__name__)
            continue

        if violation is None or LEVEL_ORDER[violation.level] < min_order:
            continue

        finding = Finding(rule=rule.NAME, violation=violation)
        findings.append(finding)
        logger.debug("[%s] %s: %s", finding.rule, finding.level, finding.message)

        if on_violation is not None:
            on_violation(finding)

    if strict and findings:
        raise CommitLintError(findings)

    return findings
