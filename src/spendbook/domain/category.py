"""Category domain service."""

from typing import Optional
from spendbook.database.base import Database
from spendbook.domain.entities import Category as CategoryEntity
from spendbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_not_found,
    duplicate_name,
)


class CategoryService:
    """Service for managing a user's categories."""

    def __init__(self, db: Database):
        self.db = db

    def create_category(self, user_id: str, name: str) -> int:
        """Create a category.

        Raises:
            ValidationError: If the name is blank
            ConflictError: If the user already has a category with that name
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name is required")
        if self.db.get_category_by_name(user_id, name) is not None:
            raise ConflictError(duplicate_name("Category", name))
        return self.db.create_category(user_id=user_id, name=name)

    def get_category_by_name(self, user_id: str, name: str) -> Optional[CategoryEntity]:
        return self.db.get_category_by_name(user_id, name.strip())

    def list_categories(self, user_id: str) -> list[CategoryEntity]:
        return self.db.list_categories(user_id)

    def rename_category(self, user_id: str, category_id: int, name: str) -> None:
        """Rename a category.

        Raises:
            NotFoundError: If the category does not exist for this user
            ValidationError: If the new name is blank
            ConflictError: If another of the user's categories has that name
        """
        if self.db.get_category_for_user(category_id, user_id) is None:
            raise NotFoundError(category_not_found(category_id))

        name = name.strip()
        if not name:
            raise ValidationError("Category name cannot be empty")
        existing = self.db.get_category_by_name(user_id, name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(duplicate_name("Category", name))
        self.db.update_category_name(category_id, name)

    def delete_category(self, user_id: str, category_id: int) -> None:
        """Delete a category. Its transactions become uncategorized.

        Raises:
            NotFoundError: If the category does not exist for this user
        """
        if self.db.get_category_for_user(category_id, user_id) is None:
            raise NotFoundError(category_not_found(category_id))
        self.db.delete_category(category_id)
