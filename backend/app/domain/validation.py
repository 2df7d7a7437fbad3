"""Field rules for article payloads.

Rules are kept in a plain table: each field maps to an ordered list of
``(predicate, message)`` pairs. Every rule of every checked field runs, and
all failures are collected before anything is reported, so a client sees
the full list of problems in one response.
"""

from collections.abc import Callable
from typing import Any

from app.domain.exceptions import ArticleValidationError, FieldError

Rule = tuple[Callable[[Any], bool], str]

TITLE_MIN_LENGTH = 5
DESCRIPTION_MAX_LENGTH = 300


def _not_empty(value: Any) -> bool:
    return value is not None and value != ""


def _is_string(value: Any) -> bool:
    return isinstance(value, str)


def _is_boolean(value: Any) -> bool:
    # bool only: "true", 1 and 0 are rejected
    return isinstance(value, bool)


def _min_length(limit: int) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and len(value) >= limit


def _max_length(limit: int) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and len(value) <= limit


ARTICLE_RULES: dict[str, list[Rule]] = {
    "title": [
        (_not_empty, "title should not be empty"),
        (
            _min_length(TITLE_MIN_LENGTH),
            f"title must be longer than or equal to {TITLE_MIN_LENGTH} characters",
        ),
        (_is_string, "title must be a string"),
    ],
    "description": [
        (_is_string, "description must be a string"),
        (
            _max_length(DESCRIPTION_MAX_LENGTH),
            f"description must be shorter than or equal to {DESCRIPTION_MAX_LENGTH} characters",
        ),
    ],
    "body": [
        (_not_empty, "body should not be empty"),
        (_is_string, "body must be a string"),
    ],
    "published": [
        (_is_boolean, "published must be a boolean value"),
    ],
}

# Fields that must be supplied on create. The rest are skipped when absent or null.
REQUIRED_ON_CREATE = frozenset({"title", "body"})

# Fields a partial update may explicitly clear with null.
NULLABLE = frozenset({"description"})

CREATE_DEFAULTS: dict[str, Any] = {"published": False}


def _check(name: str, value: Any) -> list[FieldError]:
    return [
        FieldError(field=name, message=message)
        for predicate, message in ARTICLE_RULES[name]
        if not predicate(value)
    ]


def _require_object(payload: Any) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise ArticleValidationError(
            [FieldError(field="payload", message="request body must be a JSON object")]
        )
    return payload


def validate_create(payload: Any) -> dict[str, Any]:
    """Validate a create payload and return it whitelisted and defaulted.

    Raises:
        ArticleValidationError: listing every violated rule.
    """
    data = _require_object(payload)
    errors: list[FieldError] = []
    validated: dict[str, Any] = {}

    for name in ARTICLE_RULES:
        value = data.get(name)
        if value is None and name not in REQUIRED_ON_CREATE:
            continue
        errors.extend(_check(name, value))
        validated[name] = value

    if errors:
        raise ArticleValidationError(errors)

    for name, default in CREATE_DEFAULTS.items():
        validated.setdefault(name, default)
    return validated


def validate_update(payload: Any) -> dict[str, Any]:
    """Validate a partial update payload.

    Only keys present in the payload are checked and returned; unknown keys
    are dropped.

    Raises:
        ArticleValidationError: listing every violated rule.
    """
    data = _require_object(payload)
    errors: list[FieldError] = []
    validated: dict[str, Any] = {}

    for name in ARTICLE_RULES:
        if name not in data:
            continue
        value = data[name]
        if value is None and name in NULLABLE:
            validated[name] = None
            continue
        errors.extend(_check(name, value))
        validated[name] = value

    if errors:
        raise ArticleValidationError(errors)
    return validated
