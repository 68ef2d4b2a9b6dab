"""
Declarative validation

A validator is a table of rules. Each rule names the field it reports on,
a predicate over the whole message and the message to report when the
predicate fails. Every rule is evaluated so that all violated fields are
reported together.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List
import logging

from django.core.exceptions import ValidationError as DjangoValidationError  # type: ignore

logger = logging.getLogger(__name__)


class ValidationFailed(Exception):
    """Raised when a message violates one or more rules."""

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__("Validation failed")


@dataclass(frozen=True)
class Rule:
    field: str
    check: Callable[[Any], bool]
    message: str


def passes(validator: Callable[[Any], None], value: Any) -> bool:
    """Adapt a Django validator (raises on failure) into a predicate."""
    try:
        validator(value)
    except DjangoValidationError:
        return False
    return True


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class RuleValidator:
    """Evaluates a rule table against a message."""

    def __init__(self, rules: Iterable[Rule]):
        self.rules = tuple(rules)

    def collect(self, message: Any) -> Dict[str, List[str]]:
        errors: Dict[str, List[str]] = {}
        for rule in self.rules:
            if not rule.check(message):
                errors.setdefault(rule.field, []).append(rule.message)
        return errors

    def __call__(self, message: Any) -> None:
        errors = self.collect(message)
        if errors:
            logger.info(
                f"{type(message).__name__} rejected: {', '.join(sorted(errors))}"
            )
            raise ValidationFailed(errors)
