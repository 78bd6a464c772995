# device_model.py

from dataclasses import dataclass
from enum import Enum


class DeviceCategory(Enum):
    """Nur für das Icon in der Alexa App, hat sonst keine Wirkung."""

    LIGHT = "LIGHT"
    EXTERIOR_BLIND = "EXTERIOR_BLIND"
    THERMOSTAT = "THERMOSTAT"
    OTHER = "OTHER"


class DeviceCapability(Enum):
    """Was man mit dem Gerät machen kann."""

    # An / Aus
    POWER_STATE = "POWER_STATE"
    # Prozentwert (Dimmer, Rollladen)
    PERCENTAGE = "PERCENTAGE"
    # Zieltemperatur
    THERMOSTAT = "THERMOSTAT"


class DevicePowerState(Enum):
    ON = "ON"
    OFF = "OFF"


class DeviceType(Enum):
    LIGHT_SWITCH = "LIGHT_SWITCH"
    DIMMER = "DIMMER"
    ROLLER_SHUTTER = "ROLLER_SHUTTER"
    HEATING = "HEATING"
    ALARM = "ALARM"

    @property
    def category(self):
        return _CATEGORIES[self]

    @property
    def capabilities(self):
        return _CAPABILITIES[self]


_CATEGORIES = {
    DeviceType.LIGHT_SWITCH: DeviceCategory.LIGHT,
    DeviceType.DIMMER: DeviceCategory.LIGHT,
    DeviceType.ROLLER_SHUTTER: DeviceCategory.EXTERIOR_BLIND,
    DeviceType.HEATING: DeviceCategory.THERMOSTAT,
    DeviceType.ALARM: DeviceCategory.OTHER,
}

# Reihenfolge ist wichtig, sie bestimmt die Reihenfolge in der Discovery
_CAPABILITIES = {
    DeviceType.LIGHT_SWITCH: (DeviceCapability.POWER_STATE,),
    DeviceType.DIMMER: (DeviceCapability.POWER_STATE, DeviceCapability.PERCENTAGE),
    DeviceType.ROLLER_SHUTTER: (DeviceCapability.POWER_STATE, DeviceCapability.PERCENTAGE),
    DeviceType.HEATING: (DeviceCapability.THERMOSTAT,),
    DeviceType.ALARM: (),
}


@dataclass(frozen=True)
class Device:
    """
    Ein Gerät aus der Backend-API, z.B. ein Lichtschalter, Dimmer oder Rollladen.
    Alexa nennt das "Endpoint".
    """

    id: str
    name: str
    type: DeviceType

    @property
    def category(self):
        return self.type.category

    @property
    def capabilities(self):
        return self.type.capabilities

    @classmethod
    def from_dict(cls, record):
        """Baut ein Device aus dem JSON der Backend-API ({"id", "name", "type"})."""
        return cls(
            id=record["id"],
            name=record["name"],
            type=DeviceType(record["type"]),
        )

    def to_dict(self):
        return {"id": self.id, "name": self.name, "type": self.type.value}
