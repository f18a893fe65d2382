"""Config file validation for Strata projects."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from strata.constants.config import CONFIG_FILENAME
from strata.constants.resolving import VALID_RESOLVER_KINDS
from strata.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_MODULE_KEYS,
    ALLOWED_RESOLVER_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
)
from strata.exceptions.validation import ValidationError


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a strata.yaml file and return all validation errors.

    This is the collect-all entry point used by ``strata validate-config``
    and by the preflight check of every other command. It never raises; all
    problems are returned as :class:`ValidationError` instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "authoritative" in raw and not isinstance(raw["authoritative"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="authoritative",
                message="invalid type for `authoritative`",
                hint="expected true or false",
            )
        )

    if "cache" in raw and raw["cache"] is not None and not _is_non_empty_string(raw["cache"]):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="cache",
                message="invalid type for `cache`",
                hint="expected a file path relative to the root, or null for an in-memory cache",
            )
        )

    if "vendor_dir" in raw and raw["vendor_dir"] is not None:
        vendor_dir = raw["vendor_dir"]
        if not _is_non_empty_string(vendor_dir):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="vendor_dir",
                    message="invalid type for `vendor_dir`",
                    hint="expected a directory path relative to the root",
                )
            )
        elif not (root / vendor_dir).is_dir():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="vendor_dir",
                    message=f"vendor directory not found: {root / vendor_dir}",
                )
            )

    if "resolvers" in raw and raw["resolvers"] is not None:
        _validate_resolvers(raw["resolvers"], path_str, errors)

    if "modules" in raw and raw["modules"] is not None:
        _validate_modules(raw["modules"], root, path_str, errors)

    return errors


def suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""


def _validate_resolvers(resolvers: Any, path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``resolvers`` mapping of resolver type name to settings."""
    if not isinstance(resolvers, dict):
        errors.append(
            ValidationError(
                code=CFG009,
                path=path_str,
                field="resolvers",
                message="`resolvers` must be a mapping of type name to settings",
            )
        )
        return

    for name, settings in resolvers.items():
        field = f"resolvers.{name}"
        if settings is None:
            continue
        if not isinstance(settings, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue

        for key in sorted(settings, key=str):
            if key not in ALLOWED_RESOLVER_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field}.{key}",
                        message=f"unknown key `{key}` in `{field}`",
                        hint=suggest_key(str(key), ALLOWED_RESOLVER_KEYS),
                    )
                )

        for key in ("path", "suffix"):
            if key in settings and not _is_non_empty_string(settings[key]):
                errors.append(
                    ValidationError(
                        code=CFG005,
                        path=path_str,
                        field=f"{field}.{key}",
                        message=f"invalid type for `{key}`",
                        hint="expected a non-empty string",
                    )
                )

        if "extension" in settings and not isinstance(settings["extension"], str):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.extension",
                    message="invalid type for `extension`",
                    hint="expected a string such as `.php`",
                )
            )

        if "kind" in settings and settings["kind"] not in VALID_RESOLVER_KINDS:
            errors.append(
                ValidationError(
                    code=CFG006,
                    path=path_str,
                    field=f"{field}.kind",
                    message="invalid value for `kind`",
                    hint=f"expected one of: {', '.join(sorted(VALID_RESOLVER_KINDS))}; got: {settings['kind']!r}",
                )
            )


def _validate_modules(modules: Any, root: Path, path_str: str, errors: list[ValidationError]) -> None:
    """Validate the ``modules`` list of explicit module declarations."""
    if not isinstance(modules, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="modules",
                message="invalid type for `modules`",
                hint="expected a list of mappings with name, path and precedence",
            )
        )
        return

    seen: set[str] = set()
    for index, item in enumerate(modules):
        field = f"modules[{index}]"
        if not isinstance(item, dict):
            errors.append(
                ValidationError(
                    code=CFG009,
                    path=path_str,
                    field=field,
                    message=f"`{field}` must be a mapping",
                )
            )
            continue

        for key in sorted(item, key=str):
            if key not in ALLOWED_MODULE_KEYS:
                errors.append(
                    ValidationError(
                        code=CFG004,
                        path=path_str,
                        field=f"{field}.{key}",
                        message=f"unknown key `{key}` in `{field}`",
                        hint=suggest_key(str(key), ALLOWED_MODULE_KEYS),
                    )
                )

        name = item.get("name")
        if not _is_non_empty_string(name):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.name",
                    message="invalid type for `name`",
                    hint="expected a non-empty string",
                )
            )
        elif name in seen:
            errors.append(
                ValidationError(
                    code=CFG008,
                    path=path_str,
                    field=f"{field}.name",
                    message=f"duplicate module name `{name}`",
                    hint="module names must be unique",
                )
            )
        else:
            seen.add(name)

        module_path = item.get("path")
        if not _is_non_empty_string(module_path):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.path",
                    message="invalid type for `path`",
                    hint="expected a directory path relative to the root",
                )
            )
        elif not (root / module_path).is_dir():
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field}.path",
                    message=f"module directory not found: {root / module_path}",
                )
            )

        precedence = item.get("precedence", 0)
        if isinstance(precedence, bool) or not isinstance(precedence, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field=f"{field}.precedence",
                    message="invalid type for `precedence`",
                    hint="expected an integer",
                )
            )


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())
