from pydantic import BaseModel, Field


class PreviewIn(BaseModel):
    text: str = Field(max_length=10000)


class PreviewOut(BaseModel):
    text: str
    removed: int
