"""
App and schema metadata models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class App(BaseModel):
    id: str
    name: Optional[str] = None


class ServiceInfo(BaseModel):
    friendly_service_name: Optional[str] = Field(default=None, alias="friendlyServiceName")
    service: str
    slug: Optional[str] = None

    model_config = {"populate_by_name": True}


class AppSchema(BaseModel):
    """The app's GraphQL schema record (enabled services etc.), not the schema itself."""
    id: str
    app_id: Optional[str] = Field(default=None, alias="appId")
    services: list[ServiceInfo] = Field(default_factory=list)
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    updated_at: Optional[str] = Field(default=None, alias="updatedAt")

    model_config = {"populate_by_name": True}


class CreateSchemaInput(BaseModel):
    app_id: str = Field(alias="appId")
    enabled_services: list[str] = Field(default_factory=list, alias="enabledServices")
    set_as_default_for_app: bool = Field(default=False, alias="setAsDefaultForApp")
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    salesforce_schema_id: Optional[str] = Field(default=None, alias="salesforceSchemaId")

    model_config = {"populate_by_name": True}

    def to_variables(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
