"""
Request options for Glo GET endpoints

Each endpoint has its own options class and its own documented defaults.
Callers pass any subset of the fields (as a model or a plain dict);
merge_options() lays the supplied fields over the endpoint defaults one
field at a time. A value of None means "not supplied".
"""
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, TypeVar, Union
from pydantic import BaseModel

import constants


class SortOrder(str, Enum):
    """Sort direction for list endpoints."""
    ASC = "asc"
    DESC = "desc"


class GloOptions(BaseModel):
    """Base class for per-endpoint query options."""

    model_config = {
        "frozen": True,
        "use_enum_values": True,
        "extra": "ignore",
    }

    def to_params(self) -> List[Tuple[str, str]]:
        """
        Serialize options to ordered query parameters.

        Parameters follow field declaration order. `fields` is comma-joined
        in the order given and booleans are rendered as true/false.
        """
        params = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None:
                continue
            if name == 'fields':
                value = ','.join(value)
            elif isinstance(value, bool):
                value = 'true' if value else 'false'
            elif isinstance(value, Enum):
                value = value.value
            params.append((name, str(value)))
        return params


class GetAllBoardOptions(GloOptions):
    """Options for boards.get_all."""
    archived: Optional[bool] = None
    page: Optional[int] = None
    per_page: Optional[int] = None
    sort: Optional[SortOrder] = None
    fields: Optional[List[str]] = None


class GetBoardOptions(GloOptions):
    """Options for boards.get."""
    fields: Optional[List[str]] = None


class GetCardOptions(GloOptions):
    """Options for cards.get."""
    fields: Optional[List[str]] = None


class GetCardsOptions(GloOptions):
    """Options for cards.get_all and columns.get_cards."""
    page: Optional[int] = None
    per_page: Optional[int] = None
    archived: Optional[bool] = None
    sort: Optional[SortOrder] = None
    fields: Optional[List[str]] = None


class GetAttachmentOptions(GloOptions):
    """Options for cards.get_attachments."""
    page: Optional[int] = None
    per_page: Optional[int] = None
    sort: Optional[SortOrder] = None
    fields: Optional[List[str]] = None


class GetCommentOptions(GloOptions):
    """Options for comments.get."""
    page: Optional[int] = None
    per_page: Optional[int] = None
    sort: Optional[SortOrder] = None
    fields: Optional[List[str]] = None


class GetUserOptions(GloOptions):
    """Options for users.get_current_user."""
    fields: Optional[List[str]] = None


OptionsT = TypeVar('OptionsT', bound=GloOptions)

OptionsInput = Optional[Union[GloOptions, Dict[str, Any]]]


def merge_options(defaults: OptionsT, options: OptionsInput = None) -> OptionsT:
    """
    Merge caller options over endpoint defaults, field by field.

    Supplied values replace the default outright (a caller `fields` list is
    never appended to the default one); fields left as None keep the default.

    Args:
        defaults: Fully populated defaults for the endpoint
        options: Caller options as a model of the same class or a dict

    Returns:
        New options instance of the defaults' class
    """
    if options is None:
        return defaults
    if isinstance(options, BaseModel):
        options = options.model_dump(exclude_none=True)
    options = type(defaults).model_validate(options)
    return defaults.model_copy(update=options.model_dump(exclude_none=True))


# Per-endpoint defaults

DEFAULT_GET_ALL_BOARD_OPTIONS = GetAllBoardOptions(
    archived=constants.DEFAULT_ARCHIVED,
    page=constants.DEFAULT_PAGE,
    per_page=constants.DEFAULT_PER_PAGE,
    sort=constants.DEFAULT_SORT,
    fields=constants.BOARD_FIELDS,
)

DEFAULT_GET_BOARD_OPTIONS = GetBoardOptions(fields=constants.BOARD_FIELDS)

DEFAULT_GET_CARD_OPTIONS = GetCardOptions(fields=constants.CARD_FIELDS)

# cards.get requests card_id, the list endpoints do not
DEFAULT_GET_CARDS_OPTIONS = GetCardsOptions(
    page=constants.DEFAULT_PAGE,
    per_page=constants.DEFAULT_PER_PAGE,
    archived=constants.DEFAULT_ARCHIVED,
    sort=constants.DEFAULT_SORT,
    fields=constants.CARD_LIST_FIELDS,
)

DEFAULT_GET_ATTACHMENT_OPTIONS = GetAttachmentOptions(
    page=constants.DEFAULT_PAGE,
    per_page=constants.DEFAULT_PER_PAGE,
    sort=constants.DEFAULT_SORT,
    fields=constants.ATTACHMENT_FIELDS,
)

DEFAULT_GET_COMMENT_OPTIONS = GetCommentOptions(
    page=constants.DEFAULT_PAGE,
    per_page=constants.DEFAULT_PER_PAGE,
    sort=constants.DEFAULT_SORT,
    fields=constants.COMMENT_FIELDS,
)

DEFAULT_GET_USER_OPTIONS = GetUserOptions(fields=constants.USER_FIELDS)
