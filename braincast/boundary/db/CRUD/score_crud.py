"""
User score CRUD operations.

Dependencies: braincast.boundary.db.models
System role: Play history persistence operations
"""

from braincast.boundary.db.CRUD.base_crud import BaseCRUD
from braincast.boundary.db.models.score_model import UserScoreModel


class UserScoreCRUD(BaseCRUD[UserScoreModel]):
    """CRUD operations for UserScoreModel."""

    def __init__(self) -> None:
        """Initialize UserScoreCRUD with UserScoreModel."""
        super().__init__(UserScoreModel)


score_crud = UserScoreCRUD()
