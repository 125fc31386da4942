"""
Pydantic Data Models
"""
from typing import Literal

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Chat completion request"""
    message: str = Field(..., min_length=1, description="Message to send to the completion provider")


class ChatResponse(BaseModel):
    """Chat completion response"""
    reply: str = Field(..., description="Response from the completion provider")


class UploadRequest(BaseModel):
    """Text file upload request"""
    bucket_name: str = Field(..., description="Storage bucket name")
    file_name: str = Field(..., description="Object name to create")
    content: str = Field(..., description="File content")


class UploadResponse(BaseModel):
    """Text file upload result"""
    success: bool = Field(..., description="Upload success status")
    message: str = Field(..., description="Upload result message")


class ServiceFlags(BaseModel):
    completion: bool
    storage: bool


class EffectiveConfig(BaseModel):
    port: str
    storage_endpoint: str


class HealthStatus(BaseModel):
    """Health check payload"""
    status: Literal["healthy"] = "healthy"
    services: ServiceFlags
    config: EffectiveConfig
