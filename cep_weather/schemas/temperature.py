from pydantic import BaseModel


class TemperatureResponse(BaseModel):
    temp_C: float
    temp_K: float
    temp_F: float

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"temp_C": 25.0, "temp_K": 298.15, "temp_F": 77.0}
            ]
        }
    }
