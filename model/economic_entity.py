import uuid

from sqlmodel import SQLModel, Field


class EconomicEntity(SQLModel):
    """
    A tracked game resource and its value.

    Declared only; nothing stores or trades these yet.
    """

    id: uuid.UUID = Field(default_factory=uuid.uuid4)

    name: str = Field()
    value: int = Field(default=0)
