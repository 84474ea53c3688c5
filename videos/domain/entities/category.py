from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, constr

HslColor = constr(pattern=r"^\d{1,3} \d{1,3}% \d{1,3}%$")


class CategoryBase(BaseModel):
    name: constr(strip_whitespace=True, min_length=1, max_length=100)
    color: HslColor


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(BaseModel):
    name: Optional[constr(strip_whitespace=True, min_length=1, max_length=100)] = None
    color: Optional[HslColor] = None


class CategoryOut(CategoryBase):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


DEFAULT_CATEGORIES = (
    ("Music", "340 82% 52%"),
    ("Education", "200 98% 39%"),
    ("Entertainment", "262 83% 58%"),
)
