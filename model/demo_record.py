from typing import Optional

from sqlmodel import SQLModel, Field


class DemoRecord(SQLModel, table=True):
    __tablename__ = 'test'

    id: Optional[int] = Field(default=None, primary_key=True)

    name: str = Field(nullable=False)
