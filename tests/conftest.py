from cclint.core.message import Footer, Message
from cclint.core.violation import Finding


def make_message(
    raw: str = "feat(scope): broadcast $destroy event on scope destruction",
    *,
    type: str | None = "feat",  # noqa: A002
    scope: str | None = "scope",
    description: str | None = "broadcast $destroy event on scope destruction",
    body: str | None = None,
    footers: tuple[Footer, ...] | None = None,
) -> Message:
    return Message(
        raw=raw,
        type=type,
        scope=scope,
        description=description,
        body=body,
        footers=footers,
    )


def assert_finding(findings: list[Finding], rule: str) -> Finding:
    matching = [f for f in findings if f.rule == rule]
    assert matching, f"Expected finding {rule}, got: {[f.rule for f in findings] or 'none'}"
    return matching[0]


def assert_no_findings(findings: list[Finding]) -> None:
    assert findings == [], f"Expected no findings, got: {[(f.rule, f.message) for f in findings]}"
