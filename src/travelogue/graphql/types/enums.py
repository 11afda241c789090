"""
Shared GraphQL enums
"""

from enum import Enum

import strawberry


@strawberry.enum
class SortOrder(Enum):
    """Sort order for queries (exposed in the schema, not yet accepted by any field)"""

    # Lowercase members keep the wire names `asc` / `desc`
    asc = "asc"
    desc = "desc"
