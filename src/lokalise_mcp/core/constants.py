"""Tunable constants shared across domains."""

from typing import Final

# Bulk translation update pacing
BULK_UPDATE_RATE_LIMIT_DELAY_MS: Final[int] = 200
BULK_UPDATE_MAX_RETRY_ATTEMPTS: Final[int] = 3
BULK_UPDATE_RETRY_DELAY_MS: Final[int] = 1000
BULK_UPDATE_MAX_ITEMS: Final[int] = 100

# Request limits enforced before calling the API
MAX_LIST_LIMIT: Final[int] = 5000
MAX_KEYS_PER_REQUEST: Final[int] = 1000
MAX_TEAM_LIST_LIMIT: Final[int] = 100

DEFAULT_PAGE_SIZE: Final[int] = 100

