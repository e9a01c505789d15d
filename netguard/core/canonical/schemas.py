"""Pydantic admission request/response schemas."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class AdmissionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    uid: str = Field(default="", examples=["705ab4f5-6393-11e8-b7cc-42010a800002"])
    kind: str = Field(..., examples=["AddressGroup"])
    operation: Literal["CREATE", "UPDATE", "DELETE"]
    object: dict[str, Any] | None = Field(default=None)
    old_object: dict[str, Any] | None = Field(default=None, alias="oldObject")

    @model_validator(mode="before")
    @classmethod
    def _compat_kind_object(cls, data: Any) -> Any:
        """Accept ``kind`` given as ``{"kind": "..."}`` like admission review envelopes."""
        if isinstance(data, dict) and isinstance(data.get("kind"), dict):
            data = dict(data)
            data["kind"] = data["kind"].get("kind", "")
        return data


class FieldErrorSchema(BaseModel):
    field: str
    type: str
    value: Any = None
    message: str = ""
    error: str = ""


class AdmissionResponse(BaseModel):
    uid: str = ""
    allowed: bool
    message: str = ""
    errors: list[FieldErrorSchema] = Field(default_factory=list)


__all__ = ["AdmissionRequest", "AdmissionResponse", "FieldErrorSchema"]
