"""Domain Types: the Model record and the paging value objects.

Invariants:
    - Model.id is caller-supplied, never generated
    - PageRequest is already normalized (see core/pagination.py)
    - Page.total_pages is ceil(total_items / size), 0 for an empty store
    - Model ids fit a signed 64-bit integer (MIN_MODEL_ID..MAX_MODEL_ID)

Design Decisions:
    - Frozen dataclasses: records pass between service and adapter unchanged
    - ModelId as NewType over int
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, NewType, TypeVar

T = TypeVar("T")
U = TypeVar("U")

ModelId = NewType("ModelId", int)

# Signed 64-bit range of the id column
MIN_MODEL_ID = -(2**63)
MAX_MODEL_ID = 2**63 - 1


@dataclass(frozen=True)
class Model:
    """The sole managed resource."""
    id: ModelId | None
    name: str | None


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    property: str
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index, page size, and optional ordering."""
    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """Bounded slice of results plus total-count metadata."""
    items: list[T]
    total_items: int
    page: int
    size: int
    sort: tuple[SortOrder, ...] = field(default=())

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 1
        return math.ceil(self.total_items / self.size)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            items=[fn(item) for item in self.items],
            total_items=self.total_items,
            page=self.page,
            size=self.size,
            sort=self.sort,
        )
