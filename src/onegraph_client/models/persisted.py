"""
Persisted operations document.
"""

from typing import Optional

from pydantic import BaseModel, Field


class PersistedQuery(BaseModel):
    id: str
    query: str = ""
    description: Optional[str] = None
    allowed_operation_names: list[str] = Field(default_factory=list, alias="allowedOperationNames")
    tags: list[str] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
