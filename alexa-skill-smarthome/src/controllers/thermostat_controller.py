# controllers/thermostat_controller.py

import logging
import math
from .alexa_controller import AlexaController, Capability

logger = logging.getLogger(__name__)

THERMOSTAT_CONTROLLER_CAPABILITY = Capability(
    interface="Alexa.ThermostatController",
    supported=("targetSetpoint",)
)

SCALE_CELSIUS = "CELSIUS"


def round_half_up(value):
    """21.5 -> 22, -0.5 -> 0. Das Backend kennt nur ganze Grad."""
    return int(math.floor(value + 0.5))


class ThermostatController(AlexaController):
    namespace = "Alexa.ThermostatController"

    @staticmethod
    def get_capability():
        return THERMOSTAT_CONTROLLER_CAPABILITY

    @staticmethod
    def get_properties(directive):
        # Alexa bekommt den ungerundeten Wert zurück
        return [{
            "namespace": ThermostatController.namespace,
            "name": "targetSetpoint",
            "value": {
                "value": float(directive.target_setpoint),
                "scale": SCALE_CELSIUS
            }
        }]

    @staticmethod
    def handle_directive(directive, rest_api):
        endpoint_id = directive.directive.endpoint.endpoint_id
        target_temperature = round_half_up(directive.target_setpoint)
        logger.info(f"ThermostatController: {endpoint_id} -> {target_temperature} {SCALE_CELSIUS}")

        return rest_api.set_device_target_temperature(endpoint_id, target_temperature)
