from importlib.metadata import version

from cclint.core._types import Level
from cclint.core.config import BUILTIN_PROFILES, ConfigError, LintConfig, load_config
from cclint.core.linter import build_rules, lint
from cclint.core.message import Footer, Message, parse
from cclint.core.rule import Rule
from cclint.core.violation import CommitLintError, Finding, Violation

__version__ = version("cclint")


__all__ = [
    "BUILTIN_PROFILES",
    "CommitLintError",
    "ConfigError",
    "Finding",
    "Footer",
    "Level",
    "LintConfig",
    "Message",
    "Rule",
    "Violation",
    "__version__",
    "build_rules",
    "lint",
    "load_config",
    "parse",
]
