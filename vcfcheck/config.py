"""Rule configuration and message rendering.

The configuration aggregate is built once per run from built-in defaults,
optionally overlaid with values from a YAML file, and is read-only while a
file is validated. Every rule looks up its settings and renders its message
through it by dotted rule name (e.g. ``Header/DuplicatedHeader``).

Example:
    >>> config = Config.from_path("vcfcheck.yaml")
    >>> config.rule("Record/InsertionLength").params["max"]
    100
"""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml
from jinja2 import Environment, StrictUndefined, TemplateError, meta

from .constants import (
    DEFAULT_ALLOWED_BASES,
    DEFAULT_AMBIGUOUS_BASES,
    DEFAULT_FILE_FORMATS,
    DEFAULT_MAX_INDEL_LENGTH,
    DEFAULT_MISSING_BASES,
    Language,
    Level,
)
from .errors import ConfigurationError
from .messages import MESSAGES

log = logging.getLogger(__name__)

# Default level and parameters per rule; message comes from MESSAGES
RULE_DEFAULTS: dict[str, dict[str, Any]] = {
    "Global/DataBeforeHeader": {"level": Level.WARNING},
    "Global/BlankLine": {"level": Level.ERROR},
    "Global/EmptyVCF": {"level": Level.ERROR},
    "MetaInformation/FileFormat": {
        "level": Level.ERROR,
        "allowed": DEFAULT_FILE_FORMATS,
    },
    "MetaInformation/Version": {
        "level": Level.WARNING,
        "allowed": DEFAULT_FILE_FORMATS,
    },
    "Header/HeaderLine": {"level": Level.ERROR},
    "Header/DuplicatedHeader": {"level": Level.WARNING},
    "Header/HeaderColumn": {"level": Level.ERROR},
    "Record/AllowedReferenceBase": {
        "level": Level.WARNING,
        "allowed": DEFAULT_ALLOWED_BASES,
    },
    "Record/AllowedAlternateBase": {
        "level": Level.WARNING,
        "allowed": DEFAULT_ALLOWED_BASES,
    },
    "Record/AmbiguousReferenceBase": {
        "level": Level.WARNING,
        "disallowed": DEFAULT_AMBIGUOUS_BASES,
    },
    "Record/AmbiguousAlternateBase": {
        "level": Level.WARNING,
        "disallowed": DEFAULT_AMBIGUOUS_BASES,
    },
    "Record/MissingReferenceBase": {
        "level": Level.WARNING,
        "disallowed": DEFAULT_MISSING_BASES,
    },
    "Record/MissingAlternateBase": {
        "level": Level.WARNING,
        "disallowed": DEFAULT_MISSING_BASES,
    },
    "Record/IdenticalBases": {"level": Level.WARNING},
    "Record/MultipleAlternateAlleles": {"level": Level.WARNING},
    "Record/PositionFormat": {"level": Level.WARNING},
    "Record/UnsortedPosition": {"level": Level.WARNING},
    "Record/DiscontiguousChromosome": {"level": Level.WARNING},
    "Record/InsertionLength": {
        "level": Level.WARNING,
        "max": DEFAULT_MAX_INDEL_LENGTH,
    },
    "Record/DeletionLength": {
        "level": Level.WARNING,
        "max": DEFAULT_MAX_INDEL_LENGTH,
    },
    "Record/MismatchReferenceBase": {"level": Level.WARNING},
}

COMMON_KEYS = {"enabled", "level", "message"}
TOP_LEVEL_KEYS = {"language", "rules"}


class RuleConfig:
    """Settings of a single rule.

    Args:
        enabled: Whether the rule is evaluated at all
        level: Severity echoed into every finding of the rule
        message: Jinja2 message template
        **params: Rule-specific parameters (allowed, disallowed, max)
    """

    def __init__(
        self,
        enabled: bool = True,
        level: str = Level.WARNING,
        message: str = "",
        **params: Any,
    ):
        self.enabled = enabled
        self.level = level
        self.message = message
        self.params = params

    @property
    def active(self) -> bool:
        """True when the rule participates in validation."""
        return self.enabled and self.level != Level.NONE

    def __repr__(self) -> str:
        return (
            f"RuleConfig(enabled={self.enabled!r}, level={self.level!r}, "
            f"params={self.params!r})"
        )


def validate_language(language: str) -> None:
    """Validate message language.

    Args:
        language: Language code

    Raises:
        ConfigurationError: If language is not supported
    """
    if language not in Language.ALL:
        raise ConfigurationError(
            f"Invalid language '{language}'. "
            f"Valid options are: {sorted(Language.ALL)}"
        )


def _validate_string_list(name: str, key: str, value: Any) -> None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(
            f"Rule '{name}' field '{key}' must be a list of strings, got: {value!r}"
        )


def validate_rule_config(name: str, settings: Any) -> None:
    """Validate user settings for one rule.

    Args:
        name: Dotted rule name
        settings: Settings dictionary from the configuration file

    Raises:
        ConfigurationError: If the rule is unknown or a field is invalid
    """
    if name not in RULE_DEFAULTS:
        raise ConfigurationError(
            f"Unknown rule '{name}'. Valid rules are: {sorted(RULE_DEFAULTS)}"
        )

    if not isinstance(settings, dict):
        raise ConfigurationError(
            f"Rule '{name}' must be a dictionary, got: {type(settings).__name__}"
        )

    valid_keys = COMMON_KEYS | (set(RULE_DEFAULTS[name]) - {"level"})
    unknown = set(settings) - valid_keys
    if unknown:
        raise ConfigurationError(
            f"Rule '{name}' has unknown field(s): {sorted(unknown)}. "
            f"Valid fields are: {sorted(valid_keys)}"
        )

    if "enabled" in settings and not isinstance(settings["enabled"], bool):
        raise ConfigurationError(
            f"Rule '{name}' field 'enabled' must be a boolean, "
            f"got: {settings['enabled']!r}"
        )

    if "level" in settings:
        level = settings["level"]
        if not isinstance(level, str) or level.lower() not in Level.ALL:
            raise ConfigurationError(
                f"Rule '{name}' has invalid level {level!r}. "
                f"Valid options are: {sorted(Level.ALL)}"
            )

    if "message" in settings and not isinstance(settings["message"], str):
        raise ConfigurationError(
            f"Rule '{name}' field 'message' must be a string, "
            f"got: {type(settings['message']).__name__}"
        )

    for key in ("allowed", "disallowed"):
        if key in settings:
            _validate_string_list(name, key, settings[key])

    if "max" in settings:
        value = settings["max"]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(
                f"Rule '{name}' field 'max' must be a non-negative integer, "
                f"got: {value!r}"
            )


class Config:
    """Configuration aggregate for all rules.

    Args:
        rules: Per-rule overrides keyed by dotted rule name
        language: Language of the built-in message templates

    Raises:
        ConfigurationError: If an override or a message template is invalid
    """

    def __init__(self, rules: dict | None = None, language: str = Language.EN):
        validate_language(language)
        self.language = language

        settings = {}
        for name, defaults in RULE_DEFAULTS.items():
            settings[name] = {
                "enabled": True,
                "message": MESSAGES[language][name],
                **copy.deepcopy(defaults),
            }

        for name, overrides in (rules or {}).items():
            validate_rule_config(name, overrides)
            settings[name].update(copy.deepcopy(overrides))
            settings[name]["level"] = settings[name]["level"].lower()

        self.rules = {name: RuleConfig(**values) for name, values in settings.items()}

        self._env = Environment(undefined=StrictUndefined, autoescape=False)
        self._templates = {}
        for name, rule in self.rules.items():
            try:
                self._templates[name] = self._env.from_string(rule.message)
            except TemplateError as e:
                raise ConfigurationError(
                    f"Message template for rule '{name}' is invalid: {e}"
                ) from e

    @classmethod
    def from_dict(cls, data: dict | None) -> "Config":
        """Build configuration from a parsed configuration document.

        Args:
            data: Dictionary with optional 'language' and 'rules' keys

        Returns:
            Config instance

        Raises:
            ConfigurationError: If the document structure is invalid
        """
        if data is None:
            return cls()

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a dictionary, got: {type(data).__name__}"
            )

        unknown = set(data) - TOP_LEVEL_KEYS
        if unknown:
            raise ConfigurationError(
                f"Configuration has unknown field(s): {sorted(unknown)}. "
                f"Valid fields are: {sorted(TOP_LEVEL_KEYS)}"
            )

        rules = data.get("rules") or {}
        if not isinstance(rules, dict):
            raise ConfigurationError(
                f"Config field 'rules' must be a dictionary, "
                f"got: {type(rules).__name__}"
            )

        return cls(rules=rules, language=data.get("language", Language.EN))

    @classmethod
    def from_path(cls, config_path: str | Path) -> "Config":
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config instance

        Raises:
            ConfigurationError: If the file cannot be loaded or is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse configuration file {path}: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Failed to load configuration file {path}: {e}"
            ) from e

        log.info("Loaded configuration from: %s", path)
        return cls.from_dict(data)

    def rule(self, name: str) -> RuleConfig:
        """Return the settings of a rule.

        Raises:
            ConfigurationError: If the rule is unknown
        """
        try:
            return self.rules[name]
        except KeyError:
            raise ConfigurationError(f"No configuration for rule '{name}'") from None

    def template_variables(self, name: str) -> set[str]:
        """Return the variables referenced by a rule's message template."""
        return meta.find_undeclared_variables(self._env.parse(self.rule(name).message))

    def render(self, name: str, **context: Any) -> str:
        """Render a rule's message template.

        Args:
            name: Dotted rule name
            **context: Template variables

        Returns:
            Rendered message

        Raises:
            ConfigurationError: If the template is missing or fails to render
        """
        template = self._templates.get(name)
        if template is None:
            raise ConfigurationError(f"No message template for rule '{name}'")

        try:
            return template.render(**context)
        except TemplateError as e:
            raise ConfigurationError(
                f"Failed to render message for rule '{name}': {e}"
            ) from e
