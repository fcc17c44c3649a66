from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Heights share the wire encoder's signed 64-bit integer range.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class CreateCoasterRequest(BaseModel):
    """Body accepted by ``POST /coasters``. Unknown keys, ``id`` included, are dropped.

    Strict: numeric strings, floats and booleans are not coerced into ``height``.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = ""
    manufacturer: str = ""
    in_park: str = Field(default="", alias="inPark")
    height: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)

    @field_validator("name", "manufacturer", "in_park", mode="before")
    @classmethod
    def _null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("height", mode="before")
    @classmethod
    def _null_height_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class CoasterRecord(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = ""
    manufacturer: str = ""
    id: str
    in_park: str = Field(default="", alias="inPark")
    height: int = Field(default=0, ge=INT64_MIN, le=INT64_MAX)

    @classmethod
    def from_request(cls, coaster_id: str, request: CreateCoasterRequest) -> CoasterRecord:
        return cls(
            id=coaster_id,
            name=request.name,
            manufacturer=request.manufacturer,
            in_park=request.in_park,
            height=request.height,
        )

    def to_wire(self) -> dict[str, Any]:
        """Wire shape: camelCase keys, empty strings and zero height left out."""
        return self.model_dump(by_alias=True, exclude_defaults=True)
