"""Model Service: domain invariants around Model persistence.

Invariants:
    - Every precondition is checked before the repository is touched
    - create() checks for an existing record via find(), delete_by_id() via exists()
    - Repository faults propagate untouched (translated as UNEXPECTED at the boundary)
    - No locking: concurrent check-then-act races are resolved by the store

Design Decisions:
    - Depends on the ModelRepository Protocol only, injected per request
"""

import logging

from model_service.core.domain_types import Model, ModelId, Page, PageRequest
from model_service.core.errors import (
    ConflictError, InvalidArgumentError, ResourceNotFoundError,
)
from model_service.core.repository_protocols import ModelRepository

logger = logging.getLogger(__name__)

ID_REQUIRED = "id is required."
MODEL_NOT_FOUND = "No model with given id found."
MODEL_EXISTS = "Model with same id exists."


class ModelService:
    """Orchestrates repository calls behind the Model invariants."""

    def __init__(self, repository: ModelRepository):
        self._repository = repository

    async def create(self, model: Model | None) -> Model:
        if model is None or model.id is None:
            raise InvalidArgumentError(ID_REQUIRED)
        if await self._repository.find(model.id) is not None:
            raise ConflictError(MODEL_EXISTS)
        saved = await self._repository.save(model)
        logger.info(f"Model {saved.id} created", extra={"model_id": saved.id})
        return saved

    async def get_by_id(self, model_id: ModelId | None) -> Model:
        if model_id is None:
            raise InvalidArgumentError(ID_REQUIRED)
        model = await self._repository.find(model_id)
        if model is None:
            raise ResourceNotFoundError(MODEL_NOT_FOUND)
        return model

    async def delete_by_id(self, model_id: ModelId | None) -> None:
        if model_id is None:
            raise InvalidArgumentError(ID_REQUIRED)
        if not await self._repository.exists(model_id):
            raise ResourceNotFoundError(MODEL_NOT_FOUND)
        await self._repository.delete_by_id(model_id)
        logger.info(f"Model {model_id} deleted", extra={"model_id": model_id})

    async def delete_all(self) -> None:
        await self._repository.delete_all()
        logger.info("All models deleted")

    async def list_all(self) -> list[Model]:
        return await self._repository.list_all()

    async def list_page(self, page_request: PageRequest) -> Page[Model]:
        return await self._repository.list_page(page_request)
