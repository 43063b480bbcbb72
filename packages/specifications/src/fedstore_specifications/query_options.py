"""
Result-shaping options passed alongside a specification.

The specification defines *what* to filter; ``Sorting`` and
``Pagination`` define *how* results are returned. Stores that cannot
honour them (e.g. a full-scan key-value store) receive and ignore them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Sorting:
    """
    Field ordering.

    Attributes:
        order_by: Field names, prefixed with ``-`` for descending,
            e.g. ``("-created_at", "name")``.
    """

    order_by: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, *fields: str) -> Sorting:
        return cls(order_by=tuple(fields))

    def as_pairs(self) -> list[tuple[str, str]]:
        """Return ``[(field, "asc"|"desc"), ...]``."""
        return [
            (item[1:], "desc") if item.startswith("-") else (item, "asc")
            for item in self.order_by
        ]

    def to_dict(self) -> dict[str, Any]:
        return {"order_by": list(self.order_by)}


@dataclass(frozen=True)
class Pagination:
    """
    Offset pagination.

    Attributes:
        limit: Maximum number of results (``None`` = unbounded).
        offset: Number of results to skip.
    """

    limit: int | None = None
    offset: int = 0

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError("limit must be >= 0")
        if self.offset < 0:
            raise ValueError("offset must be >= 0")

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"offset": self.offset}
        if self.limit is not None:
            result["limit"] = self.limit
        return result
