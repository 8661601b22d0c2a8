# app/schemas/page.py
import math
from typing import Generic, List, Tuple, TypeVar
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pymongo import ASCENDING, DESCENDING
from app.exceptions import InvalidPageRequestError

T = TypeVar("T")

# Wire name -> stored field name
SORTABLE_FIELDS = {
    "id": "_id",
    "organizationId": "organizationId",
    "departmentId": "departmentId",
    "name": "name",
    "birthdate": "birthdate",
    "position": "position",
}

DIRECTIONS = {"asc": ASCENDING, "desc": DESCENDING}


def parse_sort(values: List[str]) -> List[Tuple[str, int]]:
    """Parse ``sort`` query values of the form ``field[,field...][,asc|desc]``."""
    orders = []
    for value in values:
        tokens = [token.strip() for token in value.split(",") if token.strip()]
        if not tokens:
            continue
        direction = ASCENDING
        if len(tokens) > 1 and tokens[-1].lower() in DIRECTIONS:
            direction = DIRECTIONS[tokens.pop().lower()]
        for token in tokens:
            if token not in SORTABLE_FIELDS:
                raise InvalidPageRequestError(
                    f"Cannot sort by '{token}'. Sortable fields: {', '.join(SORTABLE_FIELDS)}"
                )
            orders.append((SORTABLE_FIELDS[token], direction))
    return orders


class PageRequest(BaseModel):
    page: int = Field(default=0, ge=0)
    size: int = Field(default=20, ge=1)
    sort: List[Tuple[str, int]] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page * self.size

    def sort_spec(self) -> List[Tuple[str, int]]:
        """Sort order for the query, always ending on ``_id`` so pages do not overlap."""
        spec = list(self.sort)
        if not any(field == "_id" for field, _ in spec):
            spec.append(("_id", ASCENDING))
        return spec


class Page(BaseModel, Generic[T]):
    content: List[T]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def build(cls, content: List[T], total_elements: int, page_request: PageRequest) -> "Page[T]":
        total_pages = math.ceil(total_elements / page_request.size)
        return cls(
            content=content,
            total_elements=total_elements,
            total_pages=total_pages,
            number=page_request.page,
            size=page_request.size,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=not content,
        )
