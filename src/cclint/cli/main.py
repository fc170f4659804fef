"""CLI entry point - Click commands for cclint."""

from __future__ import annotations

import dataclasses
import sys

import click

from cclint import __version__
from cclint.cli._output import (
    format_json,
    format_rules_json,
    format_rules_text,
    format_text,
)
from cclint.cli._runner import run_check
from cclint.core._types import Level
from cclint.core.config import BUILTIN_PROFILES, ConfigError, LintConfig, load_config
from cclint.rules import ALL_RULES

_LEVELS = [str(lv) for lv in Level]


def _resolve_config(config_path: str | None, profile: str | None) -> LintConfig:
    try:
        config = load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: invalid config: {exc}", err=True)
        sys.exit(2)

    if profile is not None:
        base = BUILTIN_PROFILES[profile]
        # --profile swaps the enabled rule set; per-rule options and
        # exclusions from the config file stay in force.
        config = dataclasses.replace(
            config,
            rules={
                name: {**options, **config.rules.get(name, {})}
                for name, options in base.rules.items()
            },
            exclude_rules=base.exclude_rules | config.exclude_rules,
        )
    return config


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", message="cclint %(version)s")
def cli() -> None:
    """cclint - conventional commit message linter."""


@cli.command()
@click.argument("sources", nargs=-1)
@click.option("--strict", is_flag=True, help="Exit 1 on any violation, not only errors.")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--exclude-rules", default="", help="Comma-separated rule names to exclude.")
@click.option(
    "--min-level",
    type=click.Choice(_LEVELS),
    default=None,
    help="Minimum level to report (overrides config file).",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to .cclint.toml or pyproject.toml config file.",
)
@click.option(
    "--profile",
    type=click.Choice(list(BUILTIN_PROFILES)),
    default=None,
    help="Rule set profile (overrides config file rules).",
)
def check(
    sources: tuple[str, ...],
    strict: bool,
    fmt: str,
    exclude_rules: str,
    min_level: str | None,
    no_color: bool,
    config_path: str | None,
    profile: str | None,
) -> None:
    """Check commit messages read from SOURCES (files, or - for stdin)."""
    config = _resolve_config(config_path, profile)

    excluded = {r.strip() for r in exclude_rules.split(",") if r.strip()}
    if excluded:
        config = dataclasses.replace(config, exclude_rules=config.exclude_rules | excluded)
    if min_level is not None:
        config = dataclasses.replace(config, min_level=Level(min_level))

    report = run_check(sources or ("-",), config=config)

    if fmt == "json":
        click.echo(format_json(report, min_level=config.min_level))
    else:
        click.echo(format_text(report, min_level=config.min_level, no_color=no_color))

    if report.has_errors:
        sys.exit(2)

    findings = report.filtered(config.min_level)
    if strict and findings:
        sys.exit(1)
    if any(f.level == Level.ERROR for f in findings):
        sys.exit(1)


@cli.command()
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format.",
)
@click.option("--no-color", is_flag=True, envvar="NO_COLOR", help="Disable ANSI colors.")
@click.option(
    "--level",
    "lv",
    default=None,
    type=click.Choice(_LEVELS),
    help="Filter by default level.",
)
@click.option(
    "--config",
    "config_path",
    default=None,
    type=click.Path(exists=False),
    help="Path to .cclint.toml or pyproject.toml config file.",
)
@click.option(
    "--profile",
    type=click.Choice(list(BUILTIN_PROFILES)),
    default=None,
    help="Mark rules enabled by this profile.",
)
def rules(
    fmt: str,
    no_color: bool,
    lv: str | None,
    config_path: str | None,
    profile: str | None,
) -> None:
    """List all rules, marking the ones the configuration enables."""
    config = _resolve_config(config_path, profile)
    enabled = frozenset(config.enabled_rules())

    filtered = list(ALL_RULES)
    if lv is not None:
        level = Level(lv)
        filtered = [r for r in filtered if r.LEVEL == level]

    total = len(ALL_RULES) if lv is not None else None

    if fmt == "json":
        click.echo(format_rules_json(filtered, enabled=enabled))
    else:
        click.echo(format_rules_text(filtered, no_color=no_color, total=total, enabled=enabled))
