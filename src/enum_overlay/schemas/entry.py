"""
Enum Entry — The record a lookup table associates with one raw code.

Every entry ties together the stored raw code, the symbolic key used in
code, and the display name shown to people.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator


class EnumEntry(BaseModel):
    """
    One entry of an enum lookup table.
    
    Entries are immutable and compare by value, so two tables that agree on
    an entry produce equal objects.
    """
    
    id: Any = Field(
        ...,
        description="Raw code stored in the model field"
    )
    
    key: str = Field(
        ...,
        description="Symbolic key used to refer to the entry in code"
    )
    
    name: str = Field(
        ...,
        description="Display name for the entry"
    )
    
    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {"id": 1, "key": "male", "name": "Male"},
            ]
        },
    }
    
    @field_validator("key")
    @classmethod
    def key_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("key cannot be empty")
        return v
    
    @field_validator("id")
    @classmethod
    def id_not_symbolic(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("id cannot be None")
        if isinstance(v, str):
            raise ValueError("id must be a raw code, not a string key")
        return v
