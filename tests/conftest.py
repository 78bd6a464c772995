import pytest
from unittest.mock import Mock

from alexa_handler import AlexaHandler
from rest_api import Ok, RestApi
from stamps import FixedClock, FixedMessageIds


@pytest.fixture
def rest_api():
    """Backend-Mock, alle Aufrufe sind erst einmal erfolgreich."""
    api = Mock(spec=RestApi)
    api.find_all_devices.return_value = Ok([])
    api.set_device_power_state.return_value = Ok()
    api.set_device_percentage.return_value = Ok()
    api.set_device_target_temperature.return_value = Ok()
    return api


@pytest.fixture
def handler(rest_api):
    """Liefert feste messageIds und Zeitstempel, damit man das JSON 1:1 vergleichen kann."""
    return AlexaHandler(rest_api, message_ids=FixedMessageIds(), clock=FixedClock())
