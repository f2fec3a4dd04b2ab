"""
Tests for request options and their per-endpoint defaults
"""
import pytest
from pydantic import ValidationError

import constants
from models.options import (
    DEFAULT_GET_ALL_BOARD_OPTIONS,
    DEFAULT_GET_ATTACHMENT_OPTIONS,
    DEFAULT_GET_BOARD_OPTIONS,
    DEFAULT_GET_CARD_OPTIONS,
    DEFAULT_GET_CARDS_OPTIONS,
    DEFAULT_GET_COMMENT_OPTIONS,
    DEFAULT_GET_USER_OPTIONS,
    GetAllBoardOptions,
    GetCardOptions,
    GetCardsOptions,
    SortOrder,
    merge_options,
)


class TestToParams:
    """Test query parameter serialization."""

    def test_board_list_defaults(self):
        assert DEFAULT_GET_ALL_BOARD_OPTIONS.to_params() == [
            ('archived', 'false'),
            ('page', '1'),
            ('per_page', '50'),
            ('sort', 'asc'),
            ('fields', 'name'),
        ]

    def test_fields_keep_given_order(self):
        options = GetCardOptions(fields=['column_id', 'name', 'board_id'])
        assert options.to_params() == [('fields', 'column_id,name,board_id')]

    def test_unset_values_are_skipped(self):
        assert GetCardsOptions(page=4).to_params() == [('page', '4')]

    def test_sort_enum_serializes_as_value(self):
        assert GetCardsOptions(sort=SortOrder.DESC).to_params() == [('sort', 'desc')]

    def test_invalid_sort_rejected(self):
        with pytest.raises(ValidationError):
            GetCardsOptions(sort='sideways')


class TestDefaults:
    """Test the documented per-endpoint defaults."""

    def test_single_and_list_card_fields_differ(self):
        assert DEFAULT_GET_CARD_OPTIONS.fields == ['name', 'board_id', 'card_id']
        assert DEFAULT_GET_CARDS_OPTIONS.fields == ['name', 'board_id', 'column_id']

    def test_other_endpoint_fields(self):
        assert DEFAULT_GET_BOARD_OPTIONS.fields == ['name']
        assert DEFAULT_GET_ATTACHMENT_OPTIONS.fields == ['filename', 'mime_type']
        assert DEFAULT_GET_COMMENT_OPTIONS.fields == ['text']
        assert DEFAULT_GET_USER_OPTIONS.fields == ['username']

    def test_paging_defaults(self):
        for defaults in (DEFAULT_GET_CARDS_OPTIONS, DEFAULT_GET_ATTACHMENT_OPTIONS, DEFAULT_GET_COMMENT_OPTIONS):
            assert defaults.page == constants.DEFAULT_PAGE == 1
            assert defaults.per_page == constants.DEFAULT_PER_PAGE == 50
            assert defaults.sort == 'asc'

    def test_defaults_are_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_GET_ALL_BOARD_OPTIONS.page = 2


class TestMergeOptions:
    """Test per-field merge of caller options over defaults."""

    def test_none_returns_defaults(self):
        assert merge_options(DEFAULT_GET_ALL_BOARD_OPTIONS, None) is DEFAULT_GET_ALL_BOARD_OPTIONS

    def test_partial_override(self):
        merged = merge_options(DEFAULT_GET_ALL_BOARD_OPTIONS, GetAllBoardOptions(per_page=10))

        assert merged.per_page == 10
        assert merged.page == 1
        assert merged.archived is False
        assert merged.sort == 'asc'
        assert merged.fields == ['name']

    def test_fields_replace_not_append(self):
        merged = merge_options(DEFAULT_GET_CARDS_OPTIONS, {'fields': ['labels']})
        assert merged.fields == ['labels']

    def test_empty_fields_list_is_kept(self):
        merged = merge_options(DEFAULT_GET_BOARD_OPTIONS, {'fields': []})
        assert merged.to_params() == [('fields', '')]

    def test_dict_options(self):
        merged = merge_options(DEFAULT_GET_CARDS_OPTIONS, {'archived': True, 'sort': 'desc'})

        assert isinstance(merged, GetCardsOptions)
        assert merged.archived is True
        assert merged.sort == 'desc'
        assert merged.page == 1

    def test_unrecognized_options_ignored(self):
        merged = merge_options(DEFAULT_GET_BOARD_OPTIONS, {'page': 3, 'fields': ['name', 'labels']})

        assert merged.to_params() == [('fields', 'name,labels')]

    def test_options_of_another_endpoint(self):
        merged = merge_options(DEFAULT_GET_CARD_OPTIONS, GetCardsOptions(page=2, fields=['name']))

        assert isinstance(merged, GetCardOptions)
        assert merged.to_params() == [('fields', 'name')]

    def test_defaults_untouched_by_merge(self):
        merge_options(DEFAULT_GET_ALL_BOARD_OPTIONS, {'page': 9, 'fields': ['columns']})

        assert DEFAULT_GET_ALL_BOARD_OPTIONS.page == 1
        assert DEFAULT_GET_ALL_BOARD_OPTIONS.fields == ['name']
