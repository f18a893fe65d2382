"""Tests for config validation (error codes, messages, ordering)."""

from __future__ import annotations

from pathlib import Path

import pytest

from strata.config import suggest_key, validate_config_file
from strata.constants.validation import (
    ALL_CFG_CODES,
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
)
from strata.exceptions.validation import ValidationError, format_errors, sort_errors
from strata.validation import preflight_validate


def _write_config(tmp_path: Path, content: str) -> Path:
    cfg = tmp_path / "strata.yaml"
    cfg.write_text(content, encoding="utf-8")
    return cfg


def _codes(errors: list[ValidationError]) -> list[str]:
    return [error.code for error in errors]


def test_validation_error_format_with_field_and_hint() -> None:
    err = ValidationError(
        code="CFG004",
        path="/repo/strata.yaml",
        field="resolver",
        message="unknown key `resolver`",
        hint="did you mean `resolvers`?",
    )
    assert err.format() == "[CFG004] /repo/strata.yaml:resolver unknown key `resolver` (did you mean `resolvers`?)"


def test_validation_error_format_without_optional_fields() -> None:
    err = ValidationError(
        code="CFG003",
        path="/repo/strata.yaml",
        field="",
        message="config must be a YAML mapping, got list",
    )
    assert err.format() == "[CFG003] /repo/strata.yaml config must be a YAML mapping, got list"


def test_sort_errors_is_deterministic() -> None:
    errs = [
        ValidationError(code="CFG005", path="/b.yaml", field="x", message="m"),
        ValidationError(code="CFG004", path="/a.yaml", field="y", message="m"),
        ValidationError(code="CFG004", path="/a.yaml", field="x", message="m"),
    ]
    sorted_errs = sort_errors(errs)
    assert [e.code for e in sorted_errs] == ["CFG004", "CFG004", "CFG005"]
    assert [e.field for e in sorted_errs] == ["x", "y", "x"]


def test_format_errors_combines_sorted_lines() -> None:
    errs = [
        ValidationError(code="CFG005", path="/b.yaml", field="x", message="bad type"),
        ValidationError(code="CFG004", path="/a.yaml", field="y", message="unknown"),
    ]
    lines = format_errors(errs).strip().split("\n")
    assert len(lines) == 2
    assert lines[0].startswith("[CFG004]")
    assert lines[1].startswith("[CFG005]")


@pytest.mark.parametrize(
    ("unknown", "expected_in_hint"),
    [
        pytest.param("resolver", "resolvers", id="close-match"),
        pytest.param("authoritive", "authoritative", id="typo"),
        pytest.param("zzzzz_totally_wrong", "", id="no-match"),
    ],
)
def test_suggest_key(unknown: str, expected_in_hint: str) -> None:
    hint = suggest_key(unknown, ALLOWED_CONFIG_KEYS)
    if expected_in_hint:
        assert expected_in_hint in hint
    else:
        assert hint == ""


def test_all_codes_are_unique() -> None:
    assert len(set(ALL_CFG_CODES)) == len(ALL_CFG_CODES) == 10


def test_missing_default_config_returns_no_errors(tmp_path: Path) -> None:
    assert validate_config_file(tmp_path) == []


def test_missing_explicit_config_is_cfg001(tmp_path: Path) -> None:
    errors = validate_config_file(tmp_path, tmp_path / "nope.yaml", config_explicit=True)

    assert _codes(errors) == [CFG001]


def test_invalid_yaml_is_cfg002(tmp_path: Path) -> None:
    _write_config(tmp_path, "resolvers: [unclosed\n")

    assert _codes(validate_config_file(tmp_path)) == [CFG002]


def test_non_mapping_is_cfg003(tmp_path: Path) -> None:
    _write_config(tmp_path, "- a\n")

    errors = validate_config_file(tmp_path)

    assert _codes(errors) == [CFG003]
    assert "got list" in errors[0].message


def test_valid_config_has_no_errors(tmp_path: Path) -> None:
    (tmp_path / "lib").mkdir()
    (tmp_path / "vendor").mkdir()
    _write_config(
        tmp_path,
        """
cache: .cache/strata.json
authoritative: false
vendor_dir: vendor
resolvers:
  template: {path: template, extension: .php}
  router: {path: app, kind: router, suffix: .py}
modules:
  - {name: lib, path: lib, precedence: 2}
""",
    )

    assert validate_config_file(tmp_path) == []


@pytest.mark.parametrize(
    ("yaml_content", "code", "field"),
    [
        pytest.param("resolver: {}\n", CFG004, "resolver", id="unknown-top-level-key"),
        pytest.param("resolvers:\n  template: {pth: x}\n", CFG004, "resolvers.template.pth", id="unknown-resolver-key"),
        pytest.param("modules:\n  - {name: a, path: ., prio: 1}\n", CFG004, "modules[0].prio", id="unknown-module-key"),
        pytest.param("authoritative: yes please\n", CFG005, "authoritative", id="non-bool-authoritative"),
        pytest.param("cache: 12\n", CFG005, "cache", id="non-string-cache"),
        pytest.param("modules: lib\n", CFG005, "modules", id="modules-not-list"),
        pytest.param(
            "modules:\n  - {name: a, path: ., precedence: x}\n", CFG005, "modules[0].precedence", id="bad-prec"
        ),
        pytest.param("resolvers:\n  template: {extension: 3}\n", CFG005, "resolvers.template.extension", id="bad-ext"),
        pytest.param("resolvers:\n  pages: {kind: tree}\n", CFG006, "resolvers.pages.kind", id="bad-kind"),
        pytest.param("modules:\n  - {name: a, path: missing}\n", CFG007, "modules[0].path", id="missing-module-dir"),
        pytest.param("vendor_dir: vendor\n", CFG007, "vendor_dir", id="missing-vendor-dir"),
        pytest.param(
            "modules:\n  - {name: a, path: .}\n  - {name: a, path: .}\n", CFG008, "modules[1].name", id="duplicate"
        ),
        pytest.param("resolvers: [template]\n", CFG009, "resolvers", id="resolvers-not-mapping"),
        pytest.param("resolvers:\n  template: flat\n", CFG009, "resolvers.template", id="resolver-not-mapping"),
        pytest.param("modules:\n  - lib\n", CFG009, "modules[0]", id="module-not-mapping"),
    ],
)
def test_invalid_values_are_reported(tmp_path: Path, yaml_content: str, code: str, field: str) -> None:
    _write_config(tmp_path, yaml_content)

    errors = validate_config_file(tmp_path)

    assert [(error.code, error.field) for error in errors] == [(code, field)]


def test_errors_are_collected_not_short_circuited(tmp_path: Path) -> None:
    _write_config(tmp_path, "authoritative: 1\ncache: []\nfoo: bar\n")

    errors = validate_config_file(tmp_path)

    assert sorted(_codes(errors)) == [CFG004, CFG005, CFG005]


def test_preflight_reports_missing_root(tmp_path: Path) -> None:
    errors = preflight_validate(tmp_path / "missing")

    assert _codes(errors) == [CFG010]


def test_preflight_returns_sorted_errors(tmp_path: Path) -> None:
    _write_config(tmp_path, "zzz: 1\nauthoritative: 1\naaa: 2\n")

    errors = preflight_validate(tmp_path)

    assert errors == sort_errors(errors)
    assert _codes(errors) == [CFG004, CFG004, CFG005]


def test_preflight_marks_explicit_config(tmp_path: Path) -> None:
    assert _codes(preflight_validate(tmp_path, tmp_path / "custom.yaml")) == [CFG001]
