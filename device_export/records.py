"""
Record model and the parser that turns an API response body into records.

The API returns a JSON array of objects shaped like
``{"id": "1", "name": "Apple iPhone 12", "data": {"price": 899}}``. Only
``name`` and ``data`` are kept; ``data`` becomes the record's attributes.
"""

from types import MappingProxyType
from typing import Any, List, Mapping, Optional

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import ParseFailed

logger = structlog.get_logger(__name__)


class _Missing:
    """Marker for an attribute key that is not present at all."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: Optional[str] = None
    attributes: Mapping[str, Any] = Field(default_factory=dict, alias="data", validate_default=True)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_none(cls, value: Any) -> Optional[str]:
        # Only real strings can be matched against a brand
        return value if isinstance(value, str) else None

    @field_validator("attributes", mode="before")
    @classmethod
    def _null_attributes(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("attributes", mode="after")
    @classmethod
    def _read_only_attributes(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @property
    def price(self) -> Any:
        """The ``price`` attribute, or ``MISSING`` when the key is absent."""
        return self.attributes.get("price", MISSING)


_records_adapter = TypeAdapter(List[Record])


def parse_records(body: str) -> List[Record]:
    """Parse a JSON array of objects into records, preserving order.

    Raises:
        ParseFailed: the body is not JSON, not an array, or holds an element
            that is not an object (or whose ``data`` is not an object).
    """
    try:
        records = _records_adapter.validate_json(body)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "<root>"
        logger.error("parse_failed", location=location, error=first["msg"], error_count=e.error_count())
        raise ParseFailed(f"{location}: {first['msg']}") from e

    logger.info("records_parsed", count=len(records))
    return records
