# controllers/percentage_controller.py

import logging
from .alexa_controller import AlexaController, Capability

logger = logging.getLogger(__name__)

PERCENTAGE_CONTROLLER_CAPABILITY = Capability(
    interface="Alexa.PercentageController",
    supported=("percentage",)
)


class PercentageController(AlexaController):
    """Dimmer und Rollläden: "Alexa, Küchenlicht auf 60 Prozent!"."""

    namespace = "Alexa.PercentageController"

    @staticmethod
    def get_capability():
        return PERCENTAGE_CONTROLLER_CAPABILITY

    @staticmethod
    def get_properties(directive):
        # Der Wert geht als String an Alexa zurück, z.B. "66"
        return [{
            "namespace": PercentageController.namespace,
            "name": "percentage",
            "value": str(directive.percentage)
        }]

    @staticmethod
    def handle_directive(directive, rest_api):
        endpoint_id = directive.directive.endpoint.endpoint_id
        logger.info(f"PercentageController: {endpoint_id} -> {directive.percentage}%")

        # 0-100 wird hier nicht geprüft, das macht das Backend
        return rest_api.set_device_percentage(endpoint_id, directive.percentage)
