"""Application services: Category use cases.

Categories are shared across users, so none of these handlers go
through the Ownership Guard.
"""

from __future__ import annotations

from catalog.application.dto import CategoryDTO, category_to_dto
from catalog.domain.exceptions import NotFoundError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository


class _CategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def _get(self, category_id: str) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category not found")
        return category


class CreateCategoryHandler(_CategoryHandler):

    def handle(self, name: str) -> CategoryDTO:
        category = Category.create(self._category_repo.next_id(), name)
        self._category_repo.save(category)
        return category_to_dto(category)


class ListCategoriesHandler(_CategoryHandler):

    def handle(self) -> list[CategoryDTO]:
        return [category_to_dto(c) for c in self._category_repo.list_all()]


class GetCategoryHandler(_CategoryHandler):

    def handle(self, category_id: str) -> CategoryDTO:
        return category_to_dto(self._get(category_id))


class UpdateCategoryHandler(_CategoryHandler):

    def handle(self, category_id: str, name: str | None) -> CategoryDTO:
        """Rename a category. A missing or empty name keeps the current one."""
        category = self._get(category_id)
        if name:
            category.rename(name)
            self._category_repo.save(category)
        return category_to_dto(category)


class DeleteCategoryHandler(_CategoryHandler):

    def handle(self, category_id: str) -> None:
        self._get(category_id)
        self._category_repo.delete(category_id)
