"""
Resource services for the Glo Boards API

Each service wraps one resource path and shares the APIClient it is given.
"""
from .base_service import BaseService
from .board_service import BoardService
from .label_service import LabelService
from .column_service import ColumnService
from .card_service import CardService
from .comment_service import CommentService
from .user_service import UserService

__all__ = [
    'BaseService',
    'BoardService',
    'LabelService',
    'ColumnService',
    'CardService',
    'CommentService',
    'UserService',
]
