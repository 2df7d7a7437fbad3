"""Domain-specific exceptions — framework-independent."""

from dataclasses import dataclass


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidIdentifierError(Exception):
    """Raised when an identifier cannot be parsed as an integer."""

    def __init__(self, entity_type: str, raw_id: object):
        self.entity_type = entity_type
        self.raw_id = raw_id
        super().__init__(f"{entity_type} id '{raw_id}' is not a valid integer")


@dataclass(frozen=True)
class FieldError:
    """A single violated rule on one input field."""

    field: str
    message: str


class ArticleValidationError(Exception):
    """Raised when an article payload breaks one or more field rules.

    Carries every failure, not just the first one found.
    """

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        super().__init__("; ".join(e.message for e in errors))

    def to_detail(self) -> list[dict[str, str]]:
        return [{"field": e.field, "message": e.message} for e in self.errors]
