# alexa_handler.py

import json
import logging

from alexa_auth import handle_accept_grant
from alexa_device import AlexaDevice
from alexa_response import AlexaResponse, create_error_response
from controllers import PercentageController, PowerController, ThermostatController
from directive import (
    NAMESPACE_DISCOVERY,
    AuthorizationDirective,
    DiscoveryDirective,
    PercentageControlDirective,
    PowerControlDirective,
    ThermostatControlDirective,
    UnknownDirective,
    parse_directive,
)
from rest_api import Err
from stamps import SystemClock, UuidMessageIds, format_time_of_sample

logger = logging.getLogger(__name__)

# Welcher Controller welche Steuer-Direktive ausführt
DIRECTIVE_CONTROLLERS = {
    PowerControlDirective: PowerController,
    PercentageControlDirective: PercentageController,
    ThermostatControlDirective: ThermostatController
}


class AlexaHandler:
    """
    Übersetzt eine Direktive in (höchstens) einen Backend-Aufruf und die
    Antwort an Alexa. Hat keinen Zustand zwischen zwei Aufrufen.

    message_ids und clock werden beim Erzeugen festgelegt; für Unit Tests
    gibt es FixedMessageIds und FixedClock.
    """

    def __init__(self, rest_api, message_ids=None, clock=None, single_base_capability=False):
        self.rest_api = rest_api
        self.message_ids = message_ids or UuidMessageIds()
        self.clock = clock or SystemClock()
        self.single_base_capability = single_base_capability

    def handle_request_json(self, request_json):
        """JSON-String rein, JSON-String raus (formatiert, gut für Logs und Tests)."""
        request = json.loads(request_json)
        response = self.handle_request(request)
        return json.dumps(response, indent=2)

    def handle_request(self, request):
        return self.dispatch(parse_directive(request)).get()

    def dispatch(self, directive):
        """Liefert immer eine AlexaResponse; Fehler landen in der ErrorResponse."""
        if isinstance(directive, AuthorizationDirective):
            # Erster Aufruf, wenn der Nutzer den Skill aktiviert
            return handle_accept_grant(directive.directive, self._message_id())

        if isinstance(directive, DiscoveryDirective):
            return self._discover()

        controller = DIRECTIVE_CONTROLLERS.get(type(directive))
        if controller is not None:
            return self._control(controller, directive)

        if isinstance(directive, UnknownDirective):
            header = directive.directive.header
            logger.warning(f"Unbekannte Direktive: {header.namespace} / {header.name}")
            return self._error_response()

        raise TypeError(f"Not a directive: {directive!r}")

    def _discover(self):
        """Holt alle Geräte vom Backend und baut die Discovery-Antwort."""
        result = self.rest_api.find_all_devices()

        # Bei Fehlern keine halbe Geräteliste, sondern gleich raus
        if isinstance(result, Err):
            logger.error(f"Discovery fehlgeschlagen: {result.reason}")
            return self._error_response()

        devices = result.value
        logger.info("Devices from API: %s", json.dumps([device.to_dict() for device in devices]))

        endpoints = [
            AlexaDevice(device, self.single_base_capability).get_discovery_payload()
            for device in devices
        ]

        adr = AlexaResponse(
            namespace=NAMESPACE_DISCOVERY,
            name="Discover.Response",
            message_id=self._message_id()
        )
        adr.set_payload_endpoints(endpoints)
        return adr

    def _control(self, controller, directive):
        """Power, Percentage und Thermostat laufen alle gleich ab."""
        result = controller.handle_directive(directive, self.rest_api)

        if isinstance(result, Err):
            logger.error(f"{controller.namespace} fehlgeschlagen: {result.reason}")
            return self._error_response()

        header = directive.directive.header
        endpoint = directive.directive.endpoint

        adr = AlexaResponse(
            correlation_token=header.correlation_token,
            message_id=self._message_id(),
            endpoint_id=endpoint.endpoint_id,
            token=endpoint.scope.token,
            scope_type=endpoint.scope.type
        )

        time_of_sample = format_time_of_sample(self.clock.now())
        for prop in controller.get_properties(directive):
            adr.add_context_property(time_of_sample=time_of_sample, **prop)

        return adr

    def _error_response(self):
        return create_error_response(self._message_id())

    def _message_id(self):
        return self.message_ids.new_message_id()
