"""Model Routes: CRUD-plus-pagination endpoints for the Model resource.

Invariants:
    - Payload shape validated by Pydantic before the service is invoked
    - Routes hold no business rules; ModelService raises typed errors
    - /model/page registered before /model/{id}
    - Path ids are bounded to the signed 64-bit range of the id column
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from model_service.core.domain_types import MAX_MODEL_ID, MIN_MODEL_ID, ModelId
from model_service.core.pagination import parse_page_request
from model_service.core.repository_protocols import ModelRepository
from model_service.infrastructure.database import get_db
from model_service.infrastructure.model_repository import SqlAlchemyModelRepository
from model_service.schemas.model import (
    DeletedResponse, ErrorResponse, MessageResponse, ModelCreate,
    ModelPageResponse, ModelResponse,
)
from model_service.services.model_service import ModelService

router = APIRouter(tags=["models"])

_BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Validation or request error"}}
_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Model not found"}}

ModelIdPath = Annotated[
    int, Path(ge=MIN_MODEL_ID, le=MAX_MODEL_ID, description="Model id"),
]


def get_model_repository(
    db: AsyncSession = Depends(get_db),
) -> ModelRepository:
    return SqlAlchemyModelRepository(db)


def get_model_service(
    repository: ModelRepository = Depends(get_model_repository),
) -> ModelService:
    return ModelService(repository)


@router.post(
    "/model", response_model=ModelResponse,
    status_code=status.HTTP_201_CREATED, responses=_BAD_REQUEST,
    summary="Create a model",
)
async def create_model(
    body: ModelCreate, service: ModelService = Depends(get_model_service),
):
    """Creates a new model with a caller-supplied id."""
    created = await service.create(body.to_domain())
    return ModelResponse.from_domain(created)


@router.get(
    "/model", response_model=list[ModelResponse], summary="List all models",
)
async def list_models(service: ModelService = Depends(get_model_service)):
    return [ModelResponse.from_domain(m) for m in await service.list_all()]


@router.get(
    "/model/page", response_model=ModelPageResponse, responses=_BAD_REQUEST,
    summary="List models with pagination",
)
async def list_models_page(
    page: str | None = Query(None, description="Zero-based page index"),
    size: str | None = Query(None, description="Page size (1-2000)"),
    sort: list[str] | None = Query(
        None, description="property[,asc|desc], repeatable",
    ),
    service: ModelService = Depends(get_model_service),
):
    page_request = parse_page_request(page, size, sort)
    return ModelPageResponse.from_domain(await service.list_page(page_request))


@router.get(
    "/model/{id}", response_model=ModelResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND}, summary="Get model by id",
)
async def get_model(
    id: ModelIdPath, service: ModelService = Depends(get_model_service),
):
    model = await service.get_by_id(ModelId(id))
    return ModelResponse.from_domain(model)


@router.delete(
    "/model/{id}", response_model=DeletedResponse,
    responses={**_BAD_REQUEST, **_NOT_FOUND}, summary="Delete model by id",
)
async def delete_model(
    id: ModelIdPath, service: ModelService = Depends(get_model_service),
):
    await service.delete_by_id(ModelId(id))
    return DeletedResponse(message="Model deleted.", id=id)


@router.delete(
    "/erase", response_model=MessageResponse, summary="Delete all models",
)
async def erase_models(service: ModelService = Depends(get_model_service)):
    await service.delete_all()
    return MessageResponse(message="All models deleted.")
