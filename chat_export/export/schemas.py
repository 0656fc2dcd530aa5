"""
Pydantic schemas for JSON export bodies.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema whose fields are written in camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageView(CamelModel):
    """Exported projection of a chat message."""
    content: str
    username: str
    when: datetime = Field(..., description="Message time, ISO-8601")


class ClientError(CamelModel):
    """Error envelope returned for every failed export."""
    message: str


MessageViewList = TypeAdapter(List[MessageView])


class HealthResponse(BaseModel):
    """Health probe response."""
    status: str
    version: str
