from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from cclint.core._types import Level
from cclint.core.config import (
    BUILTIN_PROFILES,
    ConfigError,
    LintConfig,
    _parse_config,
    load_config,
)
from cclint.rules import RULES

# LintConfig defaults


def test_config_defaults() -> None:
    cfg = LintConfig()
    assert cfg.min_level == Level.INFO
    assert cfg.rules == {
        "description-empty": {},
        "description-max-length": {},
        "type-empty": {},
    }
    assert cfg.exclude_rules == frozenset()


def test_default_rules_are_independent_copies() -> None:
    a = LintConfig()
    b = LintConfig()
    a.rules["scope-empty"] = {}
    assert "scope-empty" not in b.rules


def test_config_is_frozen() -> None:
    cfg = LintConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.min_level = Level.ERROR  # type: ignore[misc]


# LintConfig.allows() / enabled_rules()


def test_allows_enabled_rule() -> None:
    assert LintConfig().allows("type-empty") is True


def test_allows_blocks_rule_not_enabled() -> None:
    assert LintConfig().allows("scope-empty") is False


def test_allows_exclude_rules_exact() -> None:
    cfg = LintConfig(exclude_rules=frozenset({"type-empty"}))
    assert cfg.allows("type-empty") is False
    assert cfg.allows("description-empty") is True


def test_allows_exclude_rules_glob() -> None:
    cfg = LintConfig(exclude_rules=frozenset({"description-*"}))
    assert cfg.enabled_rules() == ["type-empty"]


def test_allows_exclude_rules_glob_question_mark() -> None:
    cfg = LintConfig(
        rules={"body-empty": {}, "type-empty": {}},
        exclude_rules=frozenset({"????-empty"}),
    )
    assert cfg.enabled_rules() == []


def test_enabled_rules_sorted() -> None:
    cfg = LintConfig(rules={"type-empty": {}, "body-empty": {}, "scope-empty": {}})
    assert cfg.enabled_rules() == ["body-empty", "scope-empty", "type-empty"]


# Built-in profiles


def test_builtin_profiles_exist() -> None:
    assert set(BUILTIN_PROFILES) == {"default", "strict", "minimal"}


def test_profile_default_equals_config_default() -> None:
    assert BUILTIN_PROFILES["default"] == LintConfig()


def test_profile_strict_enables_every_rule() -> None:
    assert BUILTIN_PROFILES["strict"].enabled_rules() == sorted(RULES)


def test_profile_minimal() -> None:
    assert BUILTIN_PROFILES["minimal"].enabled_rules() == ["description-empty", "type-empty"]


# _parse_config


def test_parse_config_empty() -> None:
    assert _parse_config({}) == LintConfig()


def test_parse_config_profile() -> None:
    cfg = _parse_config({"profile": "strict"})
    assert cfg.enabled_rules() == sorted(RULES)


def test_parse_config_min_level() -> None:
    assert _parse_config({"min_level": "warning"}).min_level == Level.WARNING


def test_parse_config_exclude_rules() -> None:
    cfg = _parse_config({"exclude_rules": ["body-*", "scope-empty"]})
    assert cfg.exclude_rules == frozenset({"body-*", "scope-empty"})


def test_parse_config_exclude_rules_non_list_ignored() -> None:
    assert _parse_config({"exclude_rules": "scope-empty"}).exclude_rules == frozenset()


def test_parse_config_rules_merged_on_profile() -> None:
    cfg = _parse_config(
        {
            "profile": "minimal",
            "rules": {"scope-empty": {"level": "warning"}},
        }
    )
    assert cfg.rules == {
        "description-empty": {},
        "type-empty": {},
        "scope-empty": {"level": Level.WARNING},
    }


def test_parse_config_rules_override_profile_options() -> None:
    cfg = _parse_config({"rules": {"description-max-length": {"length": 50}}})
    assert cfg.rules["description-max-length"] == {"length": 50}


def test_parse_config_does_not_mutate_profile() -> None:
    _parse_config({"profile": "default", "rules": {"type-empty": {"level": "info"}}})
    assert BUILTIN_PROFILES["default"].rules["type-empty"] == {}


def test_parse_config_invalid_profile_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="'typo'"):
        _parse_config({"profile": "typo"})


def test_parse_config_invalid_min_level_raises_config_error() -> None:
    with pytest.raises(ConfigError, match="'fatal'"):
        _parse_config({"min_level": "fatal"})


@pytest.mark.parametrize(
    ("rules", "match"),
    [
        pytest.param({"no-such-rule": {}}, "Unknown rule 'no-such-rule'", id="unknown-rule"),
        pytest.param({"scope-empty": {"level": "loud"}}, "Unknown level 'loud'", id="bad-level"),
        pytest.param({"scope-empty": {"length": 3}}, "Unknown option 'length'", id="bad-option"),
        pytest.param(
            {"description-max-length": {"length": "long"}}, "must be an integer", id="bad-type"
        ),
        pytest.param(
            {"description-max-length": {"length": True}}, "must be an integer", id="bool-length"
        ),
        pytest.param({"scope-empty": "error"}, "must be a table", id="not-a-table"),
    ],
)
def test_parse_config_invalid_rules_raise_config_error(rules: dict, match: str) -> None:
    with pytest.raises(ConfigError, match=match):
        _parse_config({"rules": rules})


def test_parse_config_rules_not_a_table() -> None:
    with pytest.raises(ConfigError, match="'rules' must be a table"):
        _parse_config({"rules": ["scope-empty"]})


def test_config_error_is_value_error() -> None:
    assert issubclass(ConfigError, ValueError)


# load_config: explicit path


def test_load_config_explicit_cclint_toml(tmp_path: Path) -> None:
    toml = tmp_path / ".cclint.toml"
    toml.write_bytes(
        b'profile = "minimal"\n'
        b'exclude_rules = ["type-empty"]\n'
        b"[rules.scope-empty]\n"
        b'level = "warning"\n'
    )
    cfg = load_config(toml)
    assert cfg.enabled_rules() == ["description-empty", "scope-empty"]
    assert cfg.rules["scope-empty"] == {"level": Level.WARNING}


def test_load_config_explicit_pyproject_toml(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_bytes(
        b'[tool.cclint]\nmin_level = "error"\n'
        b"[tool.cclint.rules.body-max-line-length]\nlength = 80\n"
    )
    cfg = load_config(pyproject)
    assert cfg.min_level == Level.ERROR
    assert cfg.rules["body-max-line-length"] == {"length": 80}


def test_load_config_pyproject_without_section_returns_defaults(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_bytes(b'[project]\nname = "demo"\n')
    assert load_config(pyproject) == LintConfig()


def test_load_config_nonexistent_path_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "nonexistent.toml") == LintConfig()


def test_load_config_invalid_value_in_file_raises_config_error(tmp_path: Path) -> None:
    toml = tmp_path / ".cclint.toml"
    toml.write_bytes(b'profile = "wrong"\n')
    with pytest.raises(ConfigError):
        load_config(toml)


def test_load_config_malformed_toml_raises_config_error(tmp_path: Path) -> None:
    toml = tmp_path / ".cclint.toml"
    toml.write_bytes(b"this is not valid toml ][[\n")
    with pytest.raises(ConfigError, match="Invalid TOML"):
        load_config(toml)


# load_config: auto-detection


def test_load_config_auto_detects_cclint_toml(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".cclint.toml").write_bytes(b'profile = "strict"\n')
    assert load_config().enabled_rules() == sorted(RULES)


def test_load_config_auto_detects_pyproject_toml(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pyproject.toml").write_bytes(b'[tool.cclint]\nmin_level = "warning"\n')
    assert load_config().min_level == Level.WARNING


def test_load_config_cclint_toml_takes_priority(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".cclint.toml").write_bytes(b'profile = "minimal"\n')
    (tmp_path / "pyproject.toml").write_bytes(b'[tool.cclint]\nprofile = "strict"\n')
    assert load_config().enabled_rules() == ["description-empty", "type-empty"]


def test_load_config_walks_up_to_parent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".cclint.toml").write_bytes(b'min_level = "error"\n')
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    monkeypatch.chdir(nested)
    assert load_config().min_level == Level.ERROR


def test_load_config_pyproject_stops_search(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / ".cclint.toml").write_bytes(b'min_level = "error"\n')
    project = tmp_path / "project"
    project.mkdir()
    (project / "pyproject.toml").write_bytes(b'[project]\nname = "demo"\n')
    monkeypatch.chdir(project)
    assert load_config() == LintConfig()
