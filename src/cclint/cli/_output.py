from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from cclint import __version__
from cclint.core._types import LEVEL_ORDER, Level

if TYPE_CHECKING:
    from cclint.cli._runner import CheckReport
    from cclint.core.rule import Rule
    from cclint.core.violation import Finding

_LEVEL_COLORS: dict[Level, str] = {
    Level.ERROR: "\033[31m",  # red
    Level.WARNING: "\033[33m",  # yellow
    Level.INFO: "\033[36m",  # cyan
}
_GREEN = "\033[32m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

_LINE_WIDTH = 66


def _use_color(no_color_flag: bool) -> bool:
    if no_color_flag:
        return False
    return not os.environ.get("NO_COLOR", "")


def _c(text: str, code: str, *, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{_RESET}"


def format_text(
    report: CheckReport,
    *,
    min_level: Level = Level.INFO,
    no_color: bool = False,
) -> str:
    color = _use_color(no_color)
    min_order = LEVEL_ORDER[min_level]
    lines: list[str] = []
    w = lines.append

    w(f"cclint {__version__}")

    all_filtered: list[Finding] = []
    for result in report.results:
        result_findings = [f for f in result.findings if LEVEL_ORDER[f.level] >= min_order]
        all_filtered.extend(result_findings)

        header = f"── {result.source} "
        fill = "─" * max(0, _LINE_WIDTH - len(header))
        w("")
        w(_c(header + fill, _BOLD, color=color))

        if result.error:
            w(f"  {_c('ERROR', _LEVEL_COLORS[Level.ERROR], color=color)}: {result.error}")
        elif not result_findings:
            w(f"  {_c('OK', _GREEN, color=color)}")
        else:
            for f in result_findings:
                tag = _c(f"[{f.rule}]", _BOLD, color=color)
                level = _c(f.level, _LEVEL_COLORS.get(f.level, ""), color=color)
                w(f"  {tag} {level}: {f.message}")

    w("")
    w(_summary_line(all_filtered, color=color))
    return "\n".join(lines)


def _summary_line(findings: list[Finding], *, color: bool) -> str:
    total = len(findings)
    if total == 0:
        return _c("No violations found.", _GREEN, color=color)
    by_level: dict[Level, int] = dict.fromkeys(Level, 0)
    for f in findings:
        by_level[f.level] += 1
    parts = [
        _c(f"{by_level[lv]} {lv}", _LEVEL_COLORS.get(lv, ""), color=color)
        for lv in (Level.ERROR, Level.WARNING, Level.INFO)
        if by_level[lv]
    ]
    noun = "violation" if total == 1 else "violations"
    return f"{total} {noun} ({', '.join(parts)})"


def format_json(
    report: CheckReport,
    *,
    min_level: Level = Level.INFO,
) -> str:
    min_order = LEVEL_ORDER[min_level]

    records: list[dict[str, str]] = []
    by_level: dict[Level, int] = dict.fromkeys(Level, 0)
    for result in report.results:
        for f in result.findings:
            if LEVEL_ORDER[f.level] < min_order:
                continue
            by_level[f.level] += 1
            records.append(
                {
                    "source": result.source,
                    "rule": f.rule,
                    "level": str(f.level),
                    "message": f.message,
                }
            )

    data = {
        "version": __version__,
        "violations": records,
        "errors": [{"source": r.source, "error": r.error} for r in report.results if r.error],
        "summary": {
            "total": len(records),
            "error": by_level[Level.ERROR],
            "warning": by_level[Level.WARNING],
            "info": by_level[Level.INFO],
        },
    }
    return json.dumps(data, indent=2)


def format_rules_text(
    rules: list[type[Rule]],
    *,
    no_color: bool = False,
    total: int | None = None,
    enabled: frozenset[str] = frozenset(),
) -> str:
    color = _use_color(no_color)
    lines: list[str] = []
    w = lines.append

    name_w = max((len(r.NAME) for r in rules), default=0)
    level_w = max((len(str(r.LEVEL)) for r in rules), default=0)

    count = len(rules)
    header = f"cclint {__version__} - {count} rules"
    if total is not None and total != count:
        header += f" (filtered from {total})"
    w(header)
    w("")

    for r in rules:
        marker = "*" if r.NAME in enabled else " "
        name = _c(r.NAME.ljust(name_w), _BOLD, color=color)
        level = _c(str(r.LEVEL).ljust(level_w), _LEVEL_COLORS.get(r.LEVEL, ""), color=color)
        w(f"{marker} {name}  {level}  {r.SUMMARY}")

    if enabled:
        w("")
        w("* enabled by the active configuration")

    return "\n".join(lines)


def format_rules_json(
    rules: list[type[Rule]],
    *,
    enabled: frozenset[str] = frozenset(),
) -> str:
    data = {
        "version": __version__,
        "rules": [
            {
                "name": r.NAME,
                "level": str(r.LEVEL),
                "summary": r.SUMMARY,
                "enabled": r.NAME in enabled,
            }
            for r in rules
        ],
        "total": len(rules),
    }
    return json.dumps(data, indent=2)
