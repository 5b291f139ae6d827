"""Boundary Protocols: persistence contract between the service and the shell.

Invariants:
    - ModelService depends only on ModelRepository, never on SQLAlchemy
    - save() is an insert: callers verify absence first
    - list_page() owns page semantics; an out-of-range page is an empty
      item list with correct totals, never an error

Design Decisions:
    - Protocol: the in-memory test fake satisfies it
      without inheritance
    - Async methods because the SQLAlchemy adapter does IO
"""

from typing import Protocol

from model_service.core.domain_types import Model, ModelId, Page, PageRequest


class ModelRepository(Protocol):
    """Contract for Model persistence: implemented by infrastructure."""
    async def exists(self, model_id: ModelId) -> bool: ...
    async def find(self, model_id: ModelId) -> Model | None: ...
    async def save(self, model: Model) -> Model: ...
    async def delete_by_id(self, model_id: ModelId) -> None: ...
    async def delete_all(self) -> None: ...
    async def list_all(self) -> list[Model]: ...
    async def list_page(self, page_request: PageRequest) -> Page[Model]: ...
