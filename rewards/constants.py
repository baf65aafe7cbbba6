"""Constants and enums for the rewards system"""

from enum import Enum


class SortDirection(str, Enum):
    """Table sort directions"""
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class TransactionSourceType(str, Enum):
    """Where the initial transaction list is loaded from"""
    FIXTURE = "fixture"
    CSV = "csv"


class ManualAction(str, Enum):
    """Edits applied through the manual-entry form"""
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


# Points schedule
POINTS_LOWER_THRESHOLD = 50    # dollars at or below earn nothing
POINTS_UPPER_THRESHOLD = 100   # dollars above earn the upper rate
POINTS_UPPER_MULTIPLIER = 2

# Fetch cache
CACHE_KEY = "customer_transactions_cache"
DEFAULT_CACHE_TTL_SECONDS = 300  # 5 minutes

# Fetch retries
DEFAULT_FETCH_MAX_RETRIES = 3
DEFAULT_FETCH_BASE_DELAY = 0.5
DEFAULT_FETCH_MAX_DELAY = 4.0

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
