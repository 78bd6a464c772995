# directive.py
#
# Jede Anfrage von Alexa ist eine "Directive": "Mach dies, mach das."
# Hier wird das JSON in genau eine von wenigen Varianten übersetzt, damit
# der AlexaHandler nicht überall Strings vergleichen muss.

import math
from dataclasses import dataclass, field
from typing import Optional

from device_model import DevicePowerState

NAMESPACE_AUTHORIZATION = "Alexa.Authorization"
NAMESPACE_DISCOVERY = "Alexa.Discovery"
NAMESPACE_POWER_CONTROLLER = "Alexa.PowerController"
NAMESPACE_PERCENTAGE_CONTROLLER = "Alexa.PercentageController"
NAMESPACE_THERMOSTAT_CONTROLLER = "Alexa.ThermostatController"


class MalformedDirectiveError(ValueError):
    """Ein Pflichtfeld fehlt. Das ist ein Fehler auf Seiten von Alexa, nicht von uns."""


@dataclass(frozen=True)
class Scope:
    type: str
    token: Optional[str]


@dataclass(frozen=True)
class Header:
    namespace: str
    name: Optional[str]
    payload_version: Optional[str]
    message_id: Optional[str]
    correlation_token: Optional[str] = None


@dataclass(frozen=True)
class Endpoint:
    endpoint_id: Optional[str]
    scope: Optional[Scope]
    cookie: dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class TargetSetpoint:
    value: Optional[float]
    scale: Optional[str]


@dataclass(frozen=True)
class Payload:
    scope: Optional[Scope] = None
    percentage: Optional[int] = None
    target_setpoint: Optional[TargetSetpoint] = None


@dataclass(frozen=True)
class Directive:
    header: Header
    endpoint: Optional[Endpoint]
    payload: Payload


# --- Varianten -------------------------------------------------------------

@dataclass(frozen=True)
class AuthorizationDirective:
    directive: Directive


@dataclass(frozen=True)
class DiscoveryDirective:
    directive: Directive


@dataclass(frozen=True)
class PowerControlDirective:
    directive: Directive
    power_state: DevicePowerState


@dataclass(frozen=True)
class PercentageControlDirective:
    directive: Directive
    percentage: int


@dataclass(frozen=True)
class ThermostatControlDirective:
    directive: Directive
    target_setpoint: float


@dataclass(frozen=True)
class UnknownDirective:
    directive: Directive


# --- JSON -> Objekte -------------------------------------------------------

def _parse_scope(scope):
    if not scope:
        return None
    return Scope(type=scope.get("type", "BearerToken"), token=scope.get("token"))


def _parse_header(header):
    if not isinstance(header, dict) or not header.get("namespace"):
        raise MalformedDirectiveError("directive.header.namespace fehlt")
    return Header(
        namespace=header["namespace"],
        name=header.get("name"),
        payload_version=header.get("payloadVersion"),
        message_id=header.get("messageId"),
        correlation_token=header.get("correlationToken")
    )


def _parse_endpoint(endpoint):
    if not endpoint:
        return None
    return Endpoint(
        endpoint_id=endpoint.get("endpointId"),
        scope=_parse_scope(endpoint.get("scope")),
        cookie=endpoint.get("cookie") or {}
    )


def _parse_payload(payload):
    payload = payload or {}
    target = payload.get("targetSetpoint")
    return Payload(
        scope=_parse_scope(payload.get("scope")),
        percentage=payload.get("percentage"),
        target_setpoint=TargetSetpoint(target.get("value"), target.get("scale")) if target else None
    )


def read_directive(request):
    """Liest {"directive": {...}} ohne Routing-Logik ein."""
    directive = request.get("directive") if isinstance(request, dict) else None
    if not isinstance(directive, dict):
        raise MalformedDirectiveError("directive fehlt")

    return Directive(
        header=_parse_header(directive.get("header")),
        endpoint=_parse_endpoint(directive.get("endpoint")),
        payload=_parse_payload(directive.get("payload"))
    )


def _require_endpoint(directive):
    endpoint = directive.endpoint
    if endpoint is None or not endpoint.endpoint_id:
        raise MalformedDirectiveError(f"{directive.header.namespace}: endpoint.endpointId fehlt")
    if endpoint.scope is None or endpoint.scope.token is None:
        raise MalformedDirectiveError(f"{directive.header.namespace}: endpoint.scope.token fehlt")


def _parse_percentage(percentage):
    """Nur ganze Zahlen; 66.0 ist ok, 66.9 oder true nicht."""
    if isinstance(percentage, bool):
        raise MalformedDirectiveError(f"payload.percentage ungültig: {percentage!r}")
    if isinstance(percentage, float) and not percentage.is_integer():
        raise MalformedDirectiveError(f"payload.percentage ungültig: {percentage!r}")
    try:
        return int(percentage)
    except (TypeError, ValueError) as e:
        raise MalformedDirectiveError(f"payload.percentage ungültig: {percentage!r}") from e


def _parse_target_value(raw_value):
    # json.loads lässt NaN und Infinity durch
    if isinstance(raw_value, bool):
        raise MalformedDirectiveError(f"payload.targetSetpoint.value ungültig: {raw_value!r}")
    try:
        value = float(raw_value)
    except (TypeError, ValueError) as e:
        raise MalformedDirectiveError(f"payload.targetSetpoint.value ungültig: {raw_value!r}") from e
    if not math.isfinite(value):
        raise MalformedDirectiveError(f"payload.targetSetpoint.value ungültig: {raw_value!r}")
    return value


def parse_directive(request):
    """
    Übersetzt das Request-dict in genau eine Variante. Entschieden wird nur
    über den Namespace; fehlen Pflichtfelder, gibt es MalformedDirectiveError.
    """
    directive = read_directive(request)
    namespace = directive.header.namespace

    if namespace == NAMESPACE_AUTHORIZATION:
        return AuthorizationDirective(directive)

    if namespace == NAMESPACE_DISCOVERY:
        return DiscoveryDirective(directive)

    if namespace == NAMESPACE_POWER_CONTROLLER:
        _require_endpoint(directive)
        # Alles außer "TurnOn" schaltet aus
        power_state = DevicePowerState.ON if directive.header.name == "TurnOn" else DevicePowerState.OFF
        return PowerControlDirective(directive, power_state)

    if namespace == NAMESPACE_PERCENTAGE_CONTROLLER:
        _require_endpoint(directive)
        percentage = directive.payload.percentage
        if percentage is None:
            raise MalformedDirectiveError("payload.percentage fehlt")
        return PercentageControlDirective(directive, _parse_percentage(percentage))

    if namespace == NAMESPACE_THERMOSTAT_CONTROLLER:
        _require_endpoint(directive)
        target = directive.payload.target_setpoint
        if target is None or target.value is None:
            raise MalformedDirectiveError("payload.targetSetpoint.value fehlt")
        return ThermostatControlDirective(directive, _parse_target_value(target.value))

    return UnknownDirective(directive)
