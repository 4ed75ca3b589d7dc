from sqlmodel import SQLModel, Field


class CharacterRecord(SQLModel, table=True):
    __tablename__ = 'character'

    game_name: str = Field(primary_key=True)
    name: str = Field(primary_key=True, nullable=False)

    # Character serialized with model_dump_json
    sheet: str = Field(nullable=False)
