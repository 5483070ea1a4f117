"""Typed views of the upstream payloads.

Only the fields this service reads are declared; everything else is ignored.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt


class ViaCepAddress(BaseModel):
    """ViaCEP ``/ws/{cep}/json/`` body."""

    model_config = ConfigDict(extra="ignore")

    # null values read as absent
    cep: Optional[str] = ""
    localidade: Optional[str] = ""
    uf: Optional[str] = ""
    # ViaCEP answers unknown, well-formed codes with 200 and {"erro": true}
    erro: Optional[bool] = False

    @property
    def locality(self) -> str:
        return "" if self.erro else (self.localidade or "")


class WeatherApiLocation(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = ""
    region: Optional[str] = ""
    country: Optional[str] = ""


class WeatherApiCurrent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # strict: booleans and numeric strings are not temperatures
    temp_c: Union[StrictInt, StrictFloat]


class WeatherApiCurrentResponse(BaseModel):
    """WeatherAPI ``/v1/current.json`` body.

    ``current.temp_c`` is required: a reply without it fails validation
    rather than reading as 0 degrees.
    """

    model_config = ConfigDict(extra="ignore")

    location: Optional[WeatherApiLocation] = None
    current: WeatherApiCurrent
