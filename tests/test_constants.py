"""
Tests for API constants

Validates the documented query defaults.
"""
from constants import (
    BOARD_FIELDS,
    CARD_FIELDS,
    CARD_LIST_FIELDS,
    COMMENT_FIELDS,
    DEFAULT_PAGE,
    DEFAULT_PER_PAGE,
    DEFAULT_SORT,
    GLO_API_BASE_URL,
    USER_FIELDS,
)


class TestApiConstants:
    """Test API location and defaults."""

    def test_base_url(self):
        assert GLO_API_BASE_URL == "https://gloapi.gitkraken.com/v1/glo"
        assert not GLO_API_BASE_URL.endswith("/")

    def test_paging_defaults(self):
        assert DEFAULT_PAGE == 1
        assert DEFAULT_PER_PAGE == 50
        assert DEFAULT_SORT == "asc"

    def test_field_defaults(self):
        assert BOARD_FIELDS == ["name"]
        assert CARD_FIELDS == ["name", "board_id", "card_id"]
        assert CARD_LIST_FIELDS == ["name", "board_id", "column_id"]
        assert COMMENT_FIELDS == ["text"]
        assert USER_FIELDS == ["username"]
