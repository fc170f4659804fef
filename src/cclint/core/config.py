from __future__ import annotations

import dataclasses
import fnmatch
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cclint.core._types import Level

if TYPE_CHECKING:
    from cclint.core.rule import Rule


class ConfigError(ValueError):
    """Raised when a config file contains an invalid value."""


def _is_glob(pattern: str) -> bool:
    return any(c in pattern for c in "*?[")


_DEFAULT_RULES: tuple[str, ...] = ("description-empty", "description-max-length", "type-empty")


@dataclass(frozen=True)
class LintConfig:
    """Configuration for a lint run.

    Can be loaded from ``.cclint.toml`` or ``pyproject.toml [tool.cclint]``
    via :func:`load_config`.

    Example ``pyproject.toml``::

        [tool.cclint]
        profile = "default"
        min_level = "warning"
        exclude_rules = ["body-*"]

        [tool.cclint.rules.scope-empty]
        level = "warning"

    """

    min_level: Level = Level.INFO
    """Minimum level to report. Findings below this are silently dropped."""

    rules: dict[str, dict[str, Any]] = field(
        default_factory=lambda: {name: {} for name in _DEFAULT_RULES}
    )
    """Enabled rules mapped to their options (``level``, ``length``, ...)."""

    exclude_rules: frozenset[str] = field(default_factory=frozenset)
    """Rule names to disable. Applied after ``rules``.

    Supports both exact names (``"body-empty"``) and glob patterns (``"body-*"``).
    """

    # Derived from exclude_rules; not part of equality or repr.
    _exact_exclude: frozenset[str] = field(
        default_factory=frozenset, init=False, compare=False, repr=False
    )
    _glob_exclude: tuple[re.Pattern[str], ...] = field(
        default=(), init=False, compare=False, repr=False
    )

    def __post_init__(self) -> None:
        exact_exc = frozenset(p for p in self.exclude_rules if not _is_glob(p))
        glob_exc = tuple(
            re.compile(fnmatch.translate(p)) for p in self.exclude_rules if _is_glob(p)
        )
        object.__setattr__(self, "_exact_exclude", exact_exc)
        object.__setattr__(self, "_glob_exclude", glob_exc)

    def allows(self, name: str) -> bool:
        """Return ``True`` if the rule called *name* is enabled and not excluded."""
        if name not in self.rules:
            return False
        if name in self._exact_exclude:
            return False
        return not any(p.match(name) for p in self._glob_exclude)

    def enabled_rules(self) -> list[str]:
        """Names of the rules that will run, sorted."""
        return sorted(name for name in self.rules if self.allows(name))


def _all_rule_names() -> list[str]:
    from cclint.rules import RULES

    return sorted(RULES)


# Named LintConfig instances for common use cases.
BUILTIN_PROFILES: dict[str, LintConfig] = {
    "default": LintConfig(),
    "strict": LintConfig(rules={name: {} for name in _all_rule_names()}),
    "minimal": LintConfig(rules={"description-empty": {}, "type-empty": {}}),
}


def load_config(path: Path | str | None = None) -> LintConfig:
    """Load :class:`LintConfig` from a TOML file.

    When ``path`` is ``None``, walks up from the current directory looking for
    ``.cclint.toml`` first, then ``pyproject.toml [tool.cclint]``.  A
    ``pyproject.toml`` without a ``[tool.cclint]`` section acts as a project
    root marker and stops the search.

    Args:
        path: Explicit path to a config file (``.cclint.toml``-style or
              ``pyproject.toml``).  If ``None``, auto-detects by walking up.

    Returns:
        :class:`LintConfig` populated from the file, with defaults for any
        missing keys.

    Raises:
        :class:`ConfigError`: If the file contains an unrecognised value
            (e.g. ``profile = "typo"`` or ``level = "fatal"``).

    """
    if path is not None:
        resolved = Path(path)
        data = _read_file(resolved) if resolved.exists() else {}
    else:
        data = _find_config()

    return _parse_config(data)


def _find_config() -> dict[str, Any]:
    """Walk up from CWD looking for a config file."""
    current = Path.cwd()
    while True:
        cclint_toml = current / ".cclint.toml"
        if cclint_toml.exists():
            return _read_file(cclint_toml)

        pyproject = current / "pyproject.toml"
        if pyproject.exists():
            return _read_file(pyproject)

        parent = current.parent
        if parent == current:  # reached filesystem root
            break
        current = parent

    return {}


def _read_file(path: Path) -> dict[str, Any]:
    """Read a TOML file and return the cclint-relevant section."""
    try:
        with path.open("rb") as f:
            raw: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    if path.name == "pyproject.toml":
        tool: dict[str, Any] = raw.get("tool", {})
        section: dict[str, Any] = tool.get("cclint", {})
        return section
    return raw


def _parse_config(data: dict[str, Any]) -> LintConfig:
    """Parse raw key/value dict into :class:`LintConfig`.

    If ``profile`` is present, the corresponding :data:`BUILTIN_PROFILES`
    entry is used as the base; explicit keys in *data* override it and a
    ``rules`` table is merged on top of the profile's rules.

    Raises:
        :class:`ConfigError`: On unrecognised levels, rules, options or profiles.

    """
    if (profile_name := data.get("profile")) is not None:
        base = BUILTIN_PROFILES.get(str(profile_name))
        if base is None:
            known = ", ".join(f'"{p}"' for p in BUILTIN_PROFILES)
            raise ConfigError(f"Unknown profile {profile_name!r}. Known profiles: {known}")
    else:
        base = LintConfig()

    kwargs: dict[str, Any] = {}
    if (v := data.get("min_level")) is not None:
        kwargs["min_level"] = _parse_level(v)

    if isinstance(rules := data.get("exclude_rules"), list):
        kwargs["exclude_rules"] = frozenset(str(r) for r in rules)

    merged = {name: dict(options) for name, options in base.rules.items()}
    if (table := data.get("rules")) is not None:
        if not isinstance(table, dict):
            raise ConfigError(f"'rules' must be a table, got {type(table).__name__}")
        for name, options in table.items():
            merged[name] = _parse_rule_options(name, options)
    kwargs["rules"] = merged

    return dataclasses.replace(base, **kwargs)


def _parse_level(value: object) -> Level:
    try:
        return Level(value)
    except ValueError as exc:
        known = ", ".join(f'"{lv}"' for lv in Level)
        raise ConfigError(f"Unknown level {value!r}. Known levels: {known}") from exc


def _parse_rule_options(name: str, options: object) -> dict[str, Any]:
    """Validate the option table for rule *name* against its fields."""
    from cclint.rules import RULES

    rule_cls: type[Rule] | None = RULES.get(name)
    if rule_cls is None:
        raise ConfigError(f"Unknown rule {name!r}")
    if not isinstance(options, dict):
        raise ConfigError(f"rules.{name} must be a table, got {type(options).__name__}")

    fields = {f.name: f for f in dataclasses.fields(rule_cls)}
    parsed: dict[str, Any] = {}
    for key, value in options.items():
        if key not in fields:
            known = ", ".join(sorted(fields))
            raise ConfigError(f"Unknown option {key!r} for rule {name!r}. Known options: {known}")
        if key == "level":
            parsed[key] = _parse_level(value)
        elif isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"rules.{name}.{key} must be an integer, got {value!r}")
        else:
            parsed[key] = value
    return parsed
