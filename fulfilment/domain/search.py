from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from .exceptions import InvalidSearchCriteriaError


class SearchCriteria(BaseModel):
    """Filters, sort and page for warehouse search."""
    location: Optional[str] = None
    min_capacity: Optional[int] = None
    max_capacity: Optional[int] = None
    sort_by: Literal["capacity", "createdAt"] = "createdAt"
    sort_order: Literal["asc", "desc"] = "asc"
    page: int = Field(default=0, ge=0)
    page_size: int = Field(default=10, gt=0)

    @property
    def offset(self) -> int:
        return self.page * self.page_size

    @classmethod
    def build(cls, **params) -> 'SearchCriteria':
        """Build criteria, skipping unset parameters and raising a domain error on bad input."""
        try:
            return cls(**{key: value for key, value in params.items() if value is not None})
        except ValidationError as e:
            raise InvalidSearchCriteriaError(f"Invalid search criteria: {e}") from e
