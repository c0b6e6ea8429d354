from typing import Dict

from pydantic import BaseModel, Field

from weather_proxy.definitions.data_sources import HealthStatus


class HealthResponse(BaseModel):
    status: HealthStatus = Field(..., description="Service health status")
    apiKeyConfigured: bool = Field(..., description="Whether the provider key is set")
    message: str = Field(..., description="Human readable status")
    timestamp: str = Field(..., description="Current timestamp")
    environment: str = Field(..., description="Deployment environment")
    version: str = Field(..., description="API version")


class ServiceInfoResponse(BaseModel):
    message: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")
    status: str = Field(..., description="Running state")
    endpoints: Dict[str, str] = Field(..., description="Example calls per endpoint")
    documentation: str = Field(..., description="Where to find API docs")
