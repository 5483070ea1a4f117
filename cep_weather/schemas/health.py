from typing import List

from pydantic import BaseModel, Field


class UpstreamInfo(BaseModel):
    name: str
    host: str
    connect_timeout_s: float = Field(gt=0)
    read_timeout_s: float = Field(gt=0)


class HealthResponse(BaseModel):
    status: str
    uptime_s: float = Field(ge=0)
    version: str
    env: str
    upstreams: List[UpstreamInfo]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "status": "ok",
                    "uptime_s": 12.34,
                    "version": "0.1.0",
                    "env": "development",
                    "upstreams": [
                        {"name": "viacep", "host": "viacep.com.br", "connect_timeout_s": 5.0, "read_timeout_s": 10.0},
                        {"name": "weatherapi", "host": "api.weatherapi.com", "connect_timeout_s": 5.0, "read_timeout_s": 10.0},
                    ],
                }
            ]
        }
    }
