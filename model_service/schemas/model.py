"""Model Schemas: Pydantic request/response contracts for the /model endpoints.

Invariants:
    - ModelCreate reports "id is required" / "name is required" as field
      violations of type FIELD_REQUIRED_ERROR, in declaration order (id, name)
    - name must contain a non-whitespace character; it is stored as sent
    - id outside the signed 64-bit range is an unreadable payload, not a
      field violation
    - Page and error responses serialize with camelCase keys
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from model_service.core.domain_types import (
    MAX_MODEL_ID, MIN_MODEL_ID, Model, ModelId, Page,
)

FIELD_REQUIRED_ERROR = "value_required"


class ModelCreate(BaseModel):
    """Model creation payload."""
    id: int | None = Field(
        default=None, ge=MIN_MODEL_ID, le=MAX_MODEL_ID, validate_default=True,
    )
    name: str | None = Field(default=None, validate_default=True)

    @field_validator("id")
    @classmethod
    def id_required(cls, v: int | None) -> int:
        if v is None:
            raise PydanticCustomError(FIELD_REQUIRED_ERROR, "id is required")
        return v

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str | None) -> str:
        if v is None or not v.strip():
            raise PydanticCustomError(FIELD_REQUIRED_ERROR, "name is required")
        return v

    def to_domain(self) -> Model:
        return Model(id=ModelId(self.id), name=self.name)


class ModelResponse(BaseModel):
    id: int
    name: str

    @classmethod
    def from_domain(cls, model: Model) -> "ModelResponse":
        return cls(id=model.id, name=model.name)


class MessageResponse(BaseModel):
    message: str


class DeletedResponse(MessageResponse):
    id: int


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageMetadata(_CamelModel):
    size: int
    number: int
    total_elements: int
    total_pages: int


class ModelPageResponse(_CamelModel):
    content: list[ModelResponse]
    page: PageMetadata

    @classmethod
    def from_domain(cls, page: Page[Model]) -> "ModelPageResponse":
        responses = page.map(ModelResponse.from_domain)
        return cls(
            content=responses.items,
            page=PageMetadata(
                size=responses.size,
                number=responses.page,
                total_elements=responses.total_items,
                total_pages=responses.total_pages,
            ),
        )


class ErrorResponse(_CamelModel):
    """Error envelope, documented for OpenAPI."""
    status: int
    error: str
    code: str
    message: str
    path: str
    trace_id: str
