"""Base classes for response and request models."""

from collections.abc import Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

ListResponseT = TypeVar("ListResponseT", bound="ListResponse")


class GitHubModel(BaseModel):
    """Response model. Unknown fields are kept so new API fields never break parsing."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class ListResponse(GitHubModel):
    """Wrapper-style page: ``{"total_count": N, "<items_field>": [...]}``.

    Subclasses declare the item list field and name it in ``items_field``.
    """

    items_field: ClassVar[str] = "items"

    total_count: int = 0

    @property
    def items(self) -> list[Any]:
        return list(getattr(self, self.items_field, None) or [])

    @classmethod
    def combine(cls: type[ListResponseT], pages: Sequence[ListResponseT]) -> ListResponseT:
        """Fold pages into one response.

        total_count is the largest total_count reported by any page (0 for no
        pages); items are concatenated in page order.
        """
        total_count = max((page.total_count for page in pages), default=0)
        items = [item for page in pages for item in page.items]
        return cls(**{"total_count": total_count, cls.items_field: items})


def _query_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat().replace("+00:00", "Z")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, (list, tuple, set)):
        return ",".join(str(_query_value(item)) for item in value)
    return value


class RequestModel(BaseModel):
    """Request body or filter object sent to GitHub."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON body holding only the fields the caller set.

        A field set explicitly to None is sent as JSON null, which is how
        GitHub clears values such as an issue's milestone.
        """
        return self.model_dump(mode="json", exclude_unset=True, by_alias=True)

    def to_params(self) -> dict[str, Any]:
        """Query string parameters with unset (None) fields dropped."""
        params: dict[str, Any] = {}
        for name, field_info in type(self).model_fields.items():
            value = getattr(self, name)
            if value is None:
                continue
            key = field_info.serialization_alias or field_info.alias or name
            params[key] = _query_value(value)
        return params
