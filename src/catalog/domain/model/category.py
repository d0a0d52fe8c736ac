"""Category entity — a named grouping products can point at."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Category:

    id: str
    name: str
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(category_id: str, name: str) -> Category:
        return Category(id=category_id, name=_clean_name(name))

    def rename(self, name: str) -> None:
        self.name = _clean_name(name)
        self.updated_at = _now()


def _clean_name(name: str) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Category name is required")
    return name.strip()
