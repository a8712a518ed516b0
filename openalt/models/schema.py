"""
Shared pydantic base for catalog records.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """
    Immutable value record.

    Serializes with camelCase aliases and accepts either spelling on input,
    so records can be built from ORM rows, snake_case dicts or JSON payloads.
    """

    class Config:
        frozen = True
        from_attributes = True
        populate_by_name = True
        alias_generator = to_camel
