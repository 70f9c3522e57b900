"""Row visibility filter shared by the soft-delete repositories."""

from enum import Enum

import sqlalchemy as sa


class RecordScope(str, Enum):
    """Which rows a lookup may see."""

    ACTIVE_ONLY = "active_only"
    INCLUDE_DELETED = "include_deleted"
    DELETED_ONLY = "deleted_only"

    def clause(self, deleted_column) -> sa.ColumnElement[bool] | None:
        """Return the WHERE clause for this scope, or None when unrestricted."""
        if self is RecordScope.ACTIVE_ONLY:
            return deleted_column.is_(False)
        if self is RecordScope.DELETED_ONLY:
            return deleted_column.is_(True)
        return None
