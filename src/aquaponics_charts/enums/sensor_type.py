from enum import Enum
from typing import Optional


class SensorType(str, Enum):
    """Sensor types installed in the tanks."""
    TEMPERATURE = "TEMPERATURE"
    PH = "PH"
    OXYGEN = "OXYGEN"

    @property
    def settings_key(self) -> str:
        """Key used for this sensor in the user settings blob."""
        return self.value.lower()


_ALIASES = {
    "TEMPERATURE": SensorType.TEMPERATURE,
    "TEMPERATURA": SensorType.TEMPERATURE,
    "PH": SensorType.PH,
    "OXYGEN": SensorType.OXYGEN,
    "OXIGENO": SensorType.OXYGEN,
    "OXIGENO_DISUELTO": SensorType.OXYGEN,
}


def normalize_sensor_type(raw: Optional[str]) -> Optional[SensorType]:
    """Map a free-form sensor type name (English or Spanish) to a SensorType."""
    if raw is None:
        return None
    key = raw.strip().upper().replace(" ", "_")
    if not key:
        return None
    return _ALIASES.get(key)
