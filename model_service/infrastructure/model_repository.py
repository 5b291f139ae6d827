"""SQLAlchemy Model Repository: ModelRepository adapter over an AsyncSession.

Invariants:
    - Every mutation commits before returning
    - list_page() counts the whole table, then slices with offset/limit;
      a page past the end yields no items but correct totals
    - Unsorted listings use the store's natural order
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from model_service.core.domain_types import (
    Model, ModelId, Page, PageRequest, SortDirection,
)
from model_service.models.model import ModelRecord

_SORT_COLUMNS = {
    "id": ModelRecord.id,
    "name": ModelRecord.name,
}


class SqlAlchemyModelRepository:
    """Persists Model records in the `model` table."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def exists(self, model_id: ModelId) -> bool:
        result = await self._db.execute(
            select(ModelRecord.id).where(ModelRecord.id == model_id),
        )
        return result.scalar_one_or_none() is not None

    async def find(self, model_id: ModelId) -> Model | None:
        result = await self._db.execute(
            select(ModelRecord).where(ModelRecord.id == model_id),
        )
        record = result.scalar_one_or_none()
        return record.to_domain() if record else None

    async def save(self, model: Model) -> Model:
        record = ModelRecord.from_domain(model)
        self._db.add(record)
        await self._db.commit()
        return record.to_domain()

    async def delete_by_id(self, model_id: ModelId) -> None:
        await self._db.execute(
            delete(ModelRecord).where(ModelRecord.id == model_id),
        )
        await self._db.commit()

    async def delete_all(self) -> None:
        await self._db.execute(delete(ModelRecord))
        await self._db.commit()

    async def list_all(self) -> list[Model]:
        result = await self._db.execute(select(ModelRecord))
        return [record.to_domain() for record in result.scalars().all()]

    async def list_page(self, page_request: PageRequest) -> Page[Model]:
        total = await self._db.scalar(
            select(func.count()).select_from(ModelRecord),
        )
        query = select(ModelRecord)
        for order in page_request.sort:
            column = _SORT_COLUMNS[order.property]
            query = query.order_by(
                column.desc() if order.direction is SortDirection.DESC
                else column.asc(),
            )
        query = query.offset(page_request.offset).limit(page_request.size)
        result = await self._db.execute(query)
        return Page(
            items=[record.to_domain() for record in result.scalars().all()],
            total_items=total or 0,
            page=page_request.page,
            size=page_request.size,
            sort=page_request.sort,
        )
