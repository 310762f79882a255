"""Rule and validator base classes.

A rule is a pure check over the state of one category validator. It either
abstains (returns None) or returns a ``ValidationError`` finding carrying the
rule's code, name, configured level and rendered message.
"""

from typing import Any, NamedTuple

from ..config import Config, RuleConfig
from ..content import Content
from ..errors import ConfigurationError


class ValidationError(NamedTuple):
    """A single rule finding."""

    code: str
    name: str
    level: str
    message: str

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "name": self.name,
            "level": self.level,
            "message": self.message,
        }


class Rule:
    """Base class for all rules.

    Subclasses set ``code`` and ``name`` (constants of the rule, never read
    from configuration), list the template ``variables`` they supply, and
    implement ``check``.

    Args:
        config: Configuration aggregate

    Raises:
        ConfigurationError: If the rule's message template uses variables the
            rule does not supply
    """

    code = ""
    name = ""
    variables: tuple[str, ...] = ()

    def __init__(self, config: Config):
        self.config = config
        self.settings: RuleConfig = config.rule(self.name)

        undeclared = config.template_variables(self.name) - set(self.variables)
        if undeclared:
            raise ConfigurationError(
                f"Message template for rule '{self.name}' uses unknown "
                f"variable(s): {sorted(undeclared)}. "
                f"Available variables are: {sorted(self.variables)}"
            )

    @property
    def active(self) -> bool:
        return self.settings.active

    @property
    def params(self) -> dict[str, Any]:
        return self.settings.params

    def evaluate(self, state: Any) -> ValidationError | None:
        """Run the rule against a validator state unless it is inactive."""
        if not self.active:
            return None
        return self.check(state)

    def check(self, state: Any) -> ValidationError | None:
        raise NotImplementedError

    def error(self, **context: Any) -> ValidationError:
        """Build a finding with the message rendered from ``context``."""
        return ValidationError(
            code=self.code,
            name=self.name,
            level=self.settings.level,
            message=self.config.render(self.name, **context),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}, {self.name})"


class Validator:
    """Base class for the category validators.

    Rule instances are built once, in the order of ``line_rules`` (evaluated
    on every pushed line) and ``final_rules`` (evaluated on finalize).
    After ``finalize`` the validator ignores further input.
    """

    line_rules: tuple[type[Rule], ...] = ()
    final_rules: tuple[type[Rule], ...] = ()

    def __init__(self, config: Config):
        self.config = config
        self.finalized = False
        self.rules = [rule(config) for rule in self.line_rules]
        self.finalize_rules = [rule(config) for rule in self.final_rules]

    def evaluate(self, rules: list[Rule]) -> list[ValidationError]:
        """Evaluate rules in order against this validator's state."""
        errors = []
        for rule in rules:
            error = rule.evaluate(self)
            if error is not None:
                errors.append(error)
        return errors

    def push(self, content: Content) -> None:
        raise NotImplementedError

    def finalize(self) -> "Validator":
        if self.finalized:
            return self
        self.complete()
        self.finalized = True
        return self

    def complete(self) -> None:
        """Evaluate whole-category rules; called once by ``finalize``."""
        pass
