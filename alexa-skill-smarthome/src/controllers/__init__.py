# controllers/__init__.py

from device_model import DeviceCapability

from .alexa_controller import AlexaController, Capability
from .alexa_interface import AlexaInterface
from .power_controller import PowerController
from .percentage_controller import PercentageController
from .thermostat_controller import ThermostatController

# Welche Capability eines Geräts welchem Alexa-Interface entspricht
CAPABILITY_CONTROLLERS = {
    DeviceCapability.POWER_STATE: PowerController,
    DeviceCapability.PERCENTAGE: PercentageController,
    DeviceCapability.THERMOSTAT: ThermostatController
}

__all__ = [
    'AlexaController',
    'Capability',
    'AlexaInterface',
    'PowerController',
    'PercentageController',
    'ThermostatController',
    'CAPABILITY_CONTROLLERS'
]
