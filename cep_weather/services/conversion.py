from ..schemas.temperature import TemperatureResponse

KELVIN_OFFSET = 273.15


def to_kelvin(celsius: float) -> float:
    return celsius + KELVIN_OFFSET


def to_fahrenheit(celsius: float) -> float:
    return (celsius * 9 / 5) + 32


def from_celsius(celsius: float) -> TemperatureResponse:
    return TemperatureResponse(
        temp_C=celsius,
        temp_K=to_kelvin(celsius),
        temp_F=to_fahrenheit(celsius),
    )
