"""
Data models for the Glo Boards API client

Pydantic models for API entities, batch results and request options.
"""

from models.base import GloBaseModel, PartialUser
from models.board import Board, BoardMember, Color, Column, Label, NewColumn, NewLabel
from models.card import Card, Description, PartialLabel
from models.comment import Comment
from models.attachment import Attachment
from models.user import User
from models.batch import BatchError, BatchResult
from models.options import (
    SortOrder,
    GetAllBoardOptions,
    GetBoardOptions,
    GetCardOptions,
    GetCardsOptions,
    GetAttachmentOptions,
    GetCommentOptions,
    GetUserOptions,
    merge_options,
)

__all__ = [
    'GloBaseModel',
    'PartialUser',
    'Board',
    'BoardMember',
    'Color',
    'Column',
    'Label',
    'NewColumn',
    'NewLabel',
    'Card',
    'Description',
    'PartialLabel',
    'Comment',
    'Attachment',
    'User',
    'BatchError',
    'BatchResult',
    'SortOrder',
    'GetAllBoardOptions',
    'GetBoardOptions',
    'GetCardOptions',
    'GetCardsOptions',
    'GetAttachmentOptions',
    'GetCommentOptions',
    'GetUserOptions',
    'merge_options',
]
