# test_directive.py

import json

import pytest

from device_model import DevicePowerState
from directive import (
    AuthorizationDirective,
    DiscoveryDirective,
    MalformedDirectiveError,
    PercentageControlDirective,
    PowerControlDirective,
    Scope,
    ThermostatControlDirective,
    UnknownDirective,
    parse_directive,
    read_directive,
)


def make_request(namespace, name="Name", endpoint=None, payload=None):
    directive = {
        "header": {
            "namespace": namespace,
            "name": name,
            "payloadVersion": "3",
            "messageId": "<message id>",
            "correlationToken": "token-123"
        },
        "payload": payload if payload is not None else {}
    }
    if endpoint is not None:
        directive["endpoint"] = endpoint
    return {"directive": directive}


ENDPOINT = {
    "scope": {"type": "BearerToken", "token": "SampleValueOfBearerToken"},
    "endpointId": "my_device",
    "cookie": {}
}


def test_read_discovery_request():
    """Die Discovery hat kein endpoint, aber einen scope im payload."""
    request = {
        "directive": {
            "header": {
                "namespace": "Alexa.Discovery",
                "name": "Discover",
                "payloadVersion": "3",
                "messageId": "<message id>"
            },
            "payload": {
                "scope": {"type": "BearerToken", "token": "access-token-from-skill"}
            }
        }
    }

    directive = read_directive(request)

    assert directive.header.namespace == "Alexa.Discovery"
    assert directive.header.name == "Discover"
    assert directive.header.payload_version == "3"
    assert directive.header.message_id == "<message id>"
    assert directive.header.correlation_token is None
    assert directive.endpoint is None
    assert directive.payload.scope == Scope(type="BearerToken", token="access-token-from-skill")


@pytest.mark.parametrize("namespace, variant", [
    ("Alexa.Authorization", AuthorizationDirective),
    ("Alexa.Discovery", DiscoveryDirective),
    ("Alexa.SceneController", UnknownDirective),
    ("alexa.discovery", UnknownDirective),
])
def test_routing_by_namespace(namespace, variant):
    assert isinstance(parse_directive(make_request(namespace)), variant)


def test_power_control():
    parsed = parse_directive(make_request("Alexa.PowerController", "TurnOn", ENDPOINT))

    assert isinstance(parsed, PowerControlDirective)
    assert parsed.power_state is DevicePowerState.ON
    assert parsed.directive.endpoint.endpoint_id == "my_device"
    assert parsed.directive.endpoint.scope.token == "SampleValueOfBearerToken"
    assert parsed.directive.header.correlation_token == "token-123"


def test_power_control_turn_off():
    parsed = parse_directive(make_request("Alexa.PowerController", "TurnOff", ENDPOINT))
    assert parsed.power_state is DevicePowerState.OFF


def test_percentage_control():
    parsed = parse_directive(make_request("Alexa.PercentageController", "SetPercentage",
                                          ENDPOINT, {"percentage": 66}))

    assert isinstance(parsed, PercentageControlDirective)
    assert parsed.percentage == 66


def test_thermostat_control():
    parsed = parse_directive(make_request("Alexa.ThermostatController", "SetTargetTemperature",
                                          ENDPOINT, {"targetSetpoint": {"value": 21.5, "scale": "CELSIUS"}}))

    assert isinstance(parsed, ThermostatControlDirective)
    assert parsed.target_setpoint == 21.5
    assert parsed.directive.payload.target_setpoint.scale == "CELSIUS"


def test_unknown_directive_needs_no_endpoint():
    parsed = parse_directive(make_request("Alexa.ColorController", "SetColor"))
    assert isinstance(parsed, UnknownDirective)
    assert parsed.directive.endpoint is None


@pytest.mark.parametrize("request_", [
    {},
    {"directive": None},
    {"directive": {"payload": {}}},
    {"directive": {"header": {"name": "TurnOn"}, "payload": {}}},
    "not a dict",
])
def test_missing_directive_or_namespace(request_):
    with pytest.raises(MalformedDirectiveError):
        parse_directive(request_)


@pytest.mark.parametrize("endpoint", [
    None,
    {"scope": {"type": "BearerToken", "token": "t"}},
    {"endpointId": "my_device"},
    {"endpointId": "my_device", "scope": {"type": "BearerToken"}},
])
def test_controller_without_endpoint_is_malformed(endpoint):
    with pytest.raises(MalformedDirectiveError):
        parse_directive(make_request("Alexa.PowerController", "TurnOn", endpoint))


@pytest.mark.parametrize("payload", [
    {},
    {"percentage": None},
    {"percentage": "viel"},
    {"percentage": 66.9},
    {"percentage": True},
    {"percentage": float("nan")},
])
def test_percentage_missing_or_invalid(payload):
    with pytest.raises(MalformedDirectiveError):
        parse_directive(make_request("Alexa.PercentageController", "SetPercentage", ENDPOINT, payload))


@pytest.mark.parametrize("payload", [
    {},
    {"targetSetpoint": {}},
    {"targetSetpoint": {"value": None, "scale": "CELSIUS"}},
    {"targetSetpoint": {"value": "warm", "scale": "CELSIUS"}},
    {"targetSetpoint": {"value": float("nan"), "scale": "CELSIUS"}},
    {"targetSetpoint": {"value": float("inf"), "scale": "CELSIUS"}},
    {"targetSetpoint": {"value": True, "scale": "CELSIUS"}},
])
def test_thermostat_missing_or_invalid(payload):
    with pytest.raises(MalformedDirectiveError):
        parse_directive(make_request("Alexa.ThermostatController", "SetTargetTemperature",
                                     ENDPOINT, payload))


def test_percentage_as_whole_float_is_accepted():
    parsed = parse_directive(make_request("Alexa.PercentageController", "SetPercentage",
                                          ENDPOINT, {"percentage": 66.0}))
    assert parsed.percentage == 66
    assert isinstance(parsed.percentage, int)


@pytest.mark.parametrize("raw", ["NaN", "Infinity", "-Infinity"])
def test_thermostat_non_finite_json_value(raw):
    # json.loads akzeptiert NaN/Infinity als Zahl
    request = json.loads(
        '{"directive": {"header": {"namespace": "Alexa.ThermostatController", "name": "SetTargetTemperature"},'
        ' "endpoint": {"endpointId": "my_heating", "scope": {"type": "BearerToken", "token": "t"}},'
        ' "payload": {"targetSetpoint": {"value": %s, "scale": "CELSIUS"}}}}' % raw
    )
    with pytest.raises(MalformedDirectiveError):
        parse_directive(request)
