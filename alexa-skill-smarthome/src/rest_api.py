# rest_api.py

import json
import logging
import ssl
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from device_model import Device

logger = logging.getLogger(__name__)

EXECUTE_CALL_MESSAGE = "Execute call: "
CALL_RESULT_MESSAGE = "Call result: "

# Name des Headers, über den sich die Lambda beim Backend ausweist
AUTH_CODE_HEADER = "AUTH_CODE"


class BackendError(Exception):
    """Das Backend hat geantwortet, aber nicht erfolgreich (Status != 2xx, kaputtes JSON)."""


class BackendUnavailableError(BackendError):
    """Das Backend war gar nicht erreichbar (Timeout, DNS, TLS, ...)."""


@dataclass(frozen=True)
class Ok:
    value: Any = None


@dataclass(frozen=True)
class Err:
    reason: str


class RestApi(ABC):
    """
    Die Backend-API, die die Geräte kennt und schaltet.

    Alle Methoden liefern Ok(...) oder Err(reason), Exceptions kommen hier
    nicht heraus.
    """

    @abstractmethod
    def find_all_devices(self):
        """Ok(list[Device]) für die Discovery."""
        pass

    @abstractmethod
    def set_device_power_state(self, device_id, power_state):
        pass

    @abstractmethod
    def set_device_percentage(self, device_id, percentage):
        pass

    @abstractmethod
    def set_device_target_temperature(self, device_id, target_temperature):
        pass


def create_ssl_context(ca_cert_file=None):
    """
    Das Backend nutzt ein selbst-signiertes Zertifikat. Wenn wir es als Datei
    haben, vertrauen wir genau diesem, sonst wird nicht geprüft.
    """
    if ca_cert_file:
        return ssl.create_default_context(cafile=ca_cert_file)

    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


class HttpRestApi(RestApi):

    def __init__(self, base_url, auth_code, timeout=10, ssl_context=None):
        self.base_url = base_url.rstrip("/")
        self.auth_code = auth_code
        self.timeout = timeout
        self.ssl_context = ssl_context

    def _url(self, *segments):
        path = "/".join(urllib.parse.quote(str(s), safe="") for s in segments)
        return f"{self.base_url}/{path}"

    def _get(self, url):
        """Führt einen GET aus und liefert den Body. Wirft BackendError."""
        req = urllib.request.Request(url, method="GET")
        req.add_header(AUTH_CODE_HEADER, self.auth_code)
        req.add_header("Accept", "application/json")

        logger.info(EXECUTE_CALL_MESSAGE + url)

        try:
            with urllib.request.urlopen(req, timeout=self.timeout, context=self.ssl_context) as response:
                body = response.read()
                logger.info(f"{CALL_RESULT_MESSAGE}{response.getcode()} - {response.reason}")
                return body
        except urllib.error.HTTPError as e:
            logger.info(f"{CALL_RESULT_MESSAGE}{e.code} - {e.reason}")
            raise BackendError(f"HTTP {e.code} for {url}") from e
        except (urllib.error.URLError, OSError) as e:
            raise BackendUnavailableError(f"Backend not reachable: {e}") from e

    def _fetch_devices(self):
        body = self._get(self._url("devices"))
        try:
            records = json.loads(body.decode("utf-8"))
            return [Device.from_dict(record) for record in records]
        except (ValueError, KeyError, TypeError) as e:
            raise BackendError(f"Invalid device list: {e}") from e

    def find_all_devices(self):
        try:
            return Ok(self._fetch_devices())
        except BackendError as e:
            logger.error(f"find_all_devices fehlgeschlagen: {e}")
            return Err(str(e))

    def _set(self, device_id, setting, value):
        try:
            self._get(self._url("device", device_id, "set", setting, "value", value))
            return Ok()
        except BackendError as e:
            logger.error(f"Setzen von {setting} für {device_id} fehlgeschlagen: {e}")
            return Err(str(e))

    def set_device_power_state(self, device_id, power_state):
        return self._set(device_id, "power-state", power_state.value)

    def set_device_percentage(self, device_id, percentage):
        return self._set(device_id, "percentage", int(percentage))

    def set_device_target_temperature(self, device_id, target_temperature):
        return self._set(device_id, "target-temperature", int(target_temperature))
