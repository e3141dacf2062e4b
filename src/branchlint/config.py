"""Configuration management for branchlint."""

from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import toml

from branchlint.core.errors import ConfigError
from branchlint.messages import branch as msg
from branchlint.utils.formatting import format_message


@dataclass(frozen=True)
class Policy:
    """Branch naming policy.

    Every name held by the policy is lower-cased when the policy is built, so
    the evaluator only has to lower-case the branch itself.
    """

    prefixes: frozenset = frozenset()
    suggestions: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    banned: frozenset = frozenset()
    skip: frozenset = frozenset()
    disallowed: frozenset = frozenset()
    separator: str = "/"
    msg_branch_banned: str = msg.BRANCH_BANNED
    msg_branch_disallowed: str = msg.BRANCH_DISALLOWED
    msg_prefix_not_allowed: str = msg.PREFIX_NOT_ALLOWED
    msg_prefix_suggestion: str = msg.PREFIX_SUGGESTION
    msg_separator_required: str = msg.SEPARATOR_REQUIRED


DEFAULT_POLICY: Dict[str, Any] = {
    "prefixes": ["feature", "hotfix", "release"],
    "suggestions": {
        "features": "feature",
        "feat": "feature",
        "fix": "hotfix",
        "releases": "release",
    },
    "banned": ["wip"],
    "skip": [],
    "disallowed": ["master", "develop", "staging"],
    "separator": "/",
    "msg_branch_banned": msg.BRANCH_BANNED,
    "msg_branch_disallowed": msg.BRANCH_DISALLOWED,
    "msg_prefix_not_allowed": msg.PREFIX_NOT_ALLOWED,
    "msg_prefix_suggestion": msg.PREFIX_SUGGESTION,
    "msg_separator_required": msg.SEPARATOR_REQUIRED,
}

NAME_SET_KEYS = ("prefixes", "banned", "skip", "disallowed")
# Template key -> number of positional arguments it is formatted with
TEMPLATE_KEYS = {
    "msg_branch_banned": 1,
    "msg_branch_disallowed": 1,
    "msg_prefix_not_allowed": 1,
    "msg_prefix_suggestion": 2,
    "msg_separator_required": 2,
}

# Spelling used by the original JavaScript tool's option names
LEGACY_KEYS = {"seperator": "separator", "msg_seperator_required": "msg_separator_required"}

CONFIG_NAMES = [".branchlint.toml", "branchlint.toml", ".branchlintrc"]
CONFIG_SECTION = "branchlint"


def _normalize_names(key: str, value: Any) -> frozenset:
    if isinstance(value, str) or not isinstance(value, (list, tuple, set, frozenset)):
        raise ConfigError(f"'{key}' must be a list of branch names, got {value!r}")
    return frozenset(str(item).lower() for item in value)


def _normalize_suggestions(value: Any) -> Mapping[str, str]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"'suggestions' must be a table of prefix = suggestion, got {value!r}")
    return MappingProxyType({str(k).lower(): str(v).lower() for k, v in value.items()})


def _check_template(key: str, template: Any, arity: int) -> None:
    if not isinstance(template, str):
        raise ConfigError(f"'{key}' must be a string, got {template!r}")
    try:
        format_message(template, *(["x"] * arity))
    except (IndexError, KeyError, ValueError, TypeError) as e:
        raise ConfigError(
            f"'{key}' must use at most {arity} positional placeholder(s): {template!r}"
        ) from e


def build_policy(overrides: Optional[Mapping[str, Any]] = None) -> Policy:
    """Build a policy from the defaults and ``overrides``.

    The merge is shallow: an override replaces the default value of its key
    entirely, so ``{"banned": []}`` removes every default banned name.
    """

    options: Dict[str, Any] = dict(DEFAULT_POLICY)
    for key, value in (overrides or {}).items():
        key = LEGACY_KEYS.get(key, key)
        if key not in options:
            raise ConfigError(f"Unknown policy option: '{key}'")
        options[key] = value

    separator = options["separator"]
    if not isinstance(separator, str) or not separator:
        raise ConfigError(f"'separator' must be a non-empty string, got {separator!r}")

    for key, arity in TEMPLATE_KEYS.items():
        _check_template(key, options[key], arity)

    values: Dict[str, Any] = {key: _normalize_names(key, options[key]) for key in NAME_SET_KEYS}
    values["suggestions"] = _normalize_suggestions(options["suggestions"])
    values["separator"] = separator
    values.update({key: options[key] for key in TEMPLATE_KEYS})
    return Policy(**values)


def policy_as_dict(policy: Policy) -> Dict[str, Any]:
    """Return the policy as plain TOML-friendly values."""
    data: Dict[str, Any] = {}
    for f in fields(policy):
        value = getattr(policy, f.name)
        if isinstance(value, frozenset):
            value = sorted(value)
        elif isinstance(value, Mapping):
            value = dict(value)
        data[f.name] = value
    return data


def find_config_file() -> Optional[Path]:
    """Search for config file in current directory and parent directories."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        for name in CONFIG_NAMES:
            config_path = parent / name
            if config_path.exists():
                return config_path

    return None


def load_config(config_path: Optional[str] = None) -> Policy:
    """Load the policy from a TOML file or use defaults."""

    path: Optional[Path]
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
    else:
        path = find_config_file()

    if path is None:
        return build_policy()

    try:
        user_config = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        raise ConfigError(f"Error loading config file {path}: {e}") from e

    overrides = user_config.get(CONFIG_SECTION, user_config)
    if not isinstance(overrides, dict):
        raise ConfigError(f"[{CONFIG_SECTION}] in {path} must be a table")
    return build_policy(overrides)
