"""
Constants for the Glo Boards API client

Fixed API location and the documented per-endpoint query defaults.
See config.py for the values that can be overridden from the environment.
"""

# Glo API location
GLO_API_BASE_URL = "https://gloapi.gitkraken.com/v1/glo"

# Paging and ordering defaults shared by list endpoints
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 50
DEFAULT_SORT = "asc"
DEFAULT_ARCHIVED = False

# Default `fields` per endpoint
BOARD_FIELDS = ["name"]
CARD_FIELDS = ["name", "board_id", "card_id"]
CARD_LIST_FIELDS = ["name", "board_id", "column_id"]
ATTACHMENT_FIELDS = ["filename", "mime_type"]
COMMENT_FIELDS = ["text"]
USER_FIELDS = ["username"]

# Debug logging truncates response bodies beyond this many characters
LOG_TRUNCATE_LENGTH = 1200
