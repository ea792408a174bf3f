from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field, field_validator


class deleteResponse(BaseModel):
    message: str


# ----Grid-----
class CoordinateBase(BaseModel):
    row: int
    shelf: int
    zone: int


# ----Quality-----
class DateBase(BaseModel):
    day: int = Field(ge=1, le=31)
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=0)


class NormalQuality(BaseModel):
    kind: Literal["normal"] = "normal"


class FragileQuality(BaseModel):
    kind: Literal["fragile"] = "fragile"
    expiration_date: DateBase
    max_row: int = Field(ge=0)


class OversizedQuality(BaseModel):
    kind: Literal["oversized"] = "oversized"
    span: int = Field(ge=1)


QualityBase = Annotated[
    Union[NormalQuality, FragileQuality, OversizedQuality],
    Field(discriminator="kind"),
]


# ----Item-----
class ItemBase(BaseModel):
    id: int = Field(ge=0)
    name: str
    quantity: int = Field(ge=0)
    quality: QualityBase = Field(default_factory=NormalQuality)


class ItemCreate(ItemBase):
    @field_validator("name")
    @classmethod
    def _strip_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("field is required")
        return v


class PlacementResponse(BaseModel):
    item: ItemBase
    positions: List[CoordinateBase]


class GridRow(BaseModel):
    anchor: CoordinateBase
    item: ItemBase
