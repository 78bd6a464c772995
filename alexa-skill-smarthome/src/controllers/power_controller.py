# controllers/power_controller.py

import logging
from .alexa_controller import AlexaController, Capability

# Logger konfigurieren
logger = logging.getLogger(__name__)

POWER_CONTROLLER_CAPABILITY = Capability(
    interface="Alexa.PowerController",
    supported=("powerState",)
)


class PowerController(AlexaController):
    namespace = "Alexa.PowerController"

    @staticmethod
    def get_capability():
        return POWER_CONTROLLER_CAPABILITY

    @staticmethod
    def get_properties(directive):
        # "ON" oder "OFF"
        return [{
            "namespace": PowerController.namespace,
            "name": "powerState",
            "value": directive.power_state.value
        }]

    @staticmethod
    def handle_directive(directive, rest_api):
        endpoint_id = directive.directive.endpoint.endpoint_id
        logger.info(f"PowerController: Handling '{directive.directive.header.name}' "
                    f"-> {directive.power_state.value} for {endpoint_id}")

        return rest_api.set_device_power_state(endpoint_id, directive.power_state)
