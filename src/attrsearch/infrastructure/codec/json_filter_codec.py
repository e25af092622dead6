"""JSON filter codec - pydantic model of the portable filter shape.

Encoded form is a JSON array of camelCase objects:
``{attributeId, dataType, minValue?, maxValue?, minDate?, maxDate?,
selectedValues?, textValue?, booleanValue?}``. Unknown keys and keys
irrelevant to ``dataType`` are dropped before validation.
"""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_serializer, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from attrsearch.domain.exceptions import FilterDecodeError
from attrsearch.domain.value_objects import DataType, SearchFilter

_COMMON_FIELDS = ("attribute_id", "data_type")

_RELEVANT_FIELDS: dict[DataType, tuple[str, ...]] = {
    DataType.NUMBER: ("min_value", "max_value"),
    DataType.DATE: ("min_date", "max_date"),
    DataType.TEXT: ("text_value",),
    DataType.SINGLE_SELECT: ("selected_values",),
    DataType.MULTI_SELECT: ("selected_values",),
    DataType.BOOLEAN: ("boolean_value",),
}


class SearchFilterModel(BaseModel):
    """Wire model of one filter."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    attribute_id: UUID
    data_type: DataType
    min_value: Decimal | None = None
    max_value: Decimal | None = None
    min_date: date | None = None
    max_date: date | None = None
    selected_values: list[str] | None = None
    text_value: str | None = None
    boolean_value: bool | None = None

    @model_validator(mode="before")
    @classmethod
    def _drop_irrelevant(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        raw_type = data.get("dataType", data.get("data_type"))
        try:
            data_type = DataType(raw_type)
        except ValueError:
            return data
        keep = set()
        for name in (*_COMMON_FIELDS, *_RELEVANT_FIELDS[data_type]):
            keep.update((name, to_camel(name)))
        return {k: v for k, v in data.items() if k in keep}

    @field_serializer("min_value", "max_value", when_used="json-unless-none")
    def _bound_as_number(self, value: Decimal) -> int | float:
        # Emitted as JSON numbers; 15-digit bounds survive the float repr.
        if value == value.to_integral_value():
            return int(value)
        return float(value)

    @classmethod
    def from_domain(cls, search_filter: SearchFilter) -> "SearchFilterModel":
        return cls.model_validate({
            "attribute_id": search_filter.attribute_id,
            "data_type": search_filter.data_type,
            "min_value": search_filter.min_value,
            "max_value": search_filter.max_value,
            "min_date": search_filter.min_date,
            "max_date": search_filter.max_date,
            "selected_values": (
                list(search_filter.selected_values)
                if search_filter.selected_values is not None
                else None
            ),
            "text_value": search_filter.text_value,
            "boolean_value": search_filter.boolean_value,
        })

    def to_domain(self) -> SearchFilter:
        return SearchFilter(
            attribute_id=self.attribute_id,
            data_type=self.data_type,
            min_value=self.min_value,
            max_value=self.max_value,
            min_date=self.min_date,
            max_date=self.max_date,
            selected_values=(
                tuple(self.selected_values) if self.selected_values is not None else None
            ),
            text_value=self.text_value,
            boolean_value=self.boolean_value,
        )


_FILTER_LIST = TypeAdapter(list[SearchFilterModel])


class JsonFilterCodec:
    """Encodes filter lists to JSON text and back."""

    def encode(self, filters: Sequence[SearchFilter]) -> str:
        models = [SearchFilterModel.from_domain(f) for f in filters]
        return _FILTER_LIST.dump_json(models, by_alias=True, exclude_none=True).decode()

    def decode(self, encoded: str) -> list[SearchFilter]:
        """Decode; FilterDecodeError on malformed JSON or invalid filter shape."""
        try:
            models = _FILTER_LIST.validate_json(encoded)
        except PydanticValidationError as e:
            raise FilterDecodeError(f"Stored filters could not be decoded: {e}") from e
        return [m.to_domain() for m in models]
