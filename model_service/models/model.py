"""Model ORM: persistence row for the Model record.

Invariants:
    - id is the caller-supplied primary key (no autoincrement, no server default)
    - name is non-nullable text
"""

from sqlalchemy import BigInteger, Text
from sqlalchemy.orm import Mapped, mapped_column

from model_service.core.domain_types import Model, ModelId
from model_service.db.base import Base


class ModelRecord(Base):
    """Row in the `model` table."""
    __tablename__ = "model"

    id: Mapped[int] = mapped_column(
        BigInteger, primary_key=True, autoincrement=False,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)

    @classmethod
    def from_domain(cls, model: Model) -> "ModelRecord":
        return cls(id=model.id, name=model.name)

    def to_domain(self) -> Model:
        return Model(id=ModelId(self.id), name=self.name)
