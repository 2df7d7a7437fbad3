"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class Article:
    """Core domain entity representing a blog article.

    An article is a *draft* until ``published`` is set.
    """

    title: str
    body: str
    description: str | None = None
    published: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, **changes: Any) -> None:
        """Apply a partial update and refresh the updated_at timestamp.

        Only keys passed in ``changes`` are touched, so ``description=None``
        clears the description while omitting it leaves it alone.
        """
        for name in ("title", "description", "body", "published"):
            if name in changes:
                setattr(self, name, changes[name])
        self.updated_at = datetime.now(timezone.utc)
