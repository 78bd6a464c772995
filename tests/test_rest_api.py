# test_rest_api.py

import json
import ssl
import urllib.error
from unittest.mock import MagicMock, patch

import pytest

from device_model import Device, DevicePowerState, DeviceType
from rest_api import Err, HttpRestApi, Ok, create_ssl_context

BASE_URL = "https://myserver.com:50000/"


def fake_response(body=b"", code=200, reason="OK"):
    response = MagicMock()
    response.read.return_value = body
    response.getcode.return_value = code
    response.reason = reason
    response.__enter__.return_value = response
    return response


@pytest.fixture
def api():
    return HttpRestApi(BASE_URL, "geheim", timeout=5)


@pytest.fixture
def urlopen():
    with patch("urllib.request.urlopen") as mocked:
        mocked.return_value = fake_response()
        yield mocked


def sent_request(urlopen):
    return urlopen.call_args[0][0]


def test_find_all_devices(api, urlopen):
    urlopen.return_value = fake_response(json.dumps([
        {"id": "power_plug", "name": "Switchable device", "type": "LIGHT_SWITCH"},
        {"id": "heating", "name": "Heating", "type": "HEATING"},
    ]).encode("utf-8"))

    result = api.find_all_devices()

    assert result == Ok([
        Device("power_plug", "Switchable device", DeviceType.LIGHT_SWITCH),
        Device("heating", "Heating", DeviceType.HEATING),
    ])
    req = sent_request(urlopen)
    assert req.full_url == "https://myserver.com:50000/devices"
    assert req.get_method() == "GET"
    assert req.get_header("Auth_code") == "geheim"
    assert urlopen.call_args[1]["timeout"] == 5


@pytest.mark.parametrize("call, url", [
    (lambda api: api.set_device_power_state("kitchen", DevicePowerState.ON),
     "https://myserver.com:50000/device/kitchen/set/power-state/value/ON"),
    (lambda api: api.set_device_power_state("kitchen", DevicePowerState.OFF),
     "https://myserver.com:50000/device/kitchen/set/power-state/value/OFF"),
    (lambda api: api.set_device_percentage("dimmer", 66),
     "https://myserver.com:50000/device/dimmer/set/percentage/value/66"),
    (lambda api: api.set_device_target_temperature("heating", 25),
     "https://myserver.com:50000/device/heating/set/target-temperature/value/25"),
    (lambda api: api.set_device_percentage("living room/left", 10),
     "https://myserver.com:50000/device/living%20room%2Fleft/set/percentage/value/10"),
])
def test_set_calls(api, urlopen, call, url):
    assert call(api) == Ok()
    assert sent_request(urlopen).full_url == url
    assert sent_request(urlopen).get_header("Auth_code") == "geheim"


def test_http_error_is_err(api, urlopen):
    urlopen.side_effect = urllib.error.HTTPError(
        "https://myserver.com:50000/devices", 500, "Internal Server Error", {}, None)

    result = api.find_all_devices()

    assert isinstance(result, Err)
    assert "500" in result.reason


def test_unreachable_backend_is_err(api, urlopen):
    urlopen.side_effect = urllib.error.URLError("Connection refused")

    result = api.set_device_power_state("kitchen", DevicePowerState.ON)

    assert isinstance(result, Err)
    assert "not reachable" in result.reason


def test_timeout_is_err(api, urlopen):
    urlopen.side_effect = TimeoutError("timed out")
    assert isinstance(api.set_device_target_temperature("heating", 20), Err)


@pytest.mark.parametrize("body", [
    b"kein json",
    b'[{"id": "x", "name": "X", "type": "TOASTER"}]',
    b'[{"id": "x"}]',
    b'{"id": "x"}',
])
def test_invalid_device_list_is_err(api, urlopen, body):
    urlopen.return_value = fake_response(body)
    assert isinstance(api.find_all_devices(), Err)


def test_ssl_context_without_certificate_trusts_everything():
    context = create_ssl_context()
    assert context.verify_mode == ssl.CERT_NONE
    assert context.check_hostname is False


def test_ssl_context_with_certificate():
    with patch("ssl.create_default_context") as create:
        create_ssl_context("/etc/backend.pem")
    create.assert_called_once_with(cafile="/etc/backend.pem")
