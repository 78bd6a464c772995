# config.py

import logging
import os
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT = 10


class ConfigurationError(Exception):
    """Die Lambda ist falsch konfiguriert (Umgebungsvariablen / SSM)."""


@dataclass(frozen=True)
class Config:
    # z.B. "https://myserver.com:50000/"
    api_url: str
    # Geht als Header an das Backend
    auth_code: str
    ca_cert_file: Optional[str] = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    log_level: str = "INFO"
    single_base_capability: bool = False


def _is_true(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def get_auth_code_from_ssm(parameter_name, ssm=None):
    """Holt den Auth Code als SecureString aus dem Parameter Store."""
    if ssm is None:
        ssm = boto3.client("ssm")
    try:
        res = ssm.get_parameter(Name=parameter_name, WithDecryption=True)
        return res["Parameter"]["Value"]
    except (BotoCoreError, ClientError) as e:
        raise ConfigurationError(f"SSM Parameter {parameter_name} nicht lesbar: {e}") from e


def load_config(environ=None, ssm=None):
    """Liest die Konfiguration einmal beim Start der Lambda."""
    if environ is None:
        environ = os.environ

    api_url = environ.get("API_URL")
    if not api_url:
        raise ConfigurationError("API_URL ist nicht gesetzt")

    auth_code = environ.get("AUTH_CODE")
    if not auth_code:
        parameter_name = environ.get("AUTH_CODE_PARAMETER")
        if not parameter_name:
            raise ConfigurationError("Weder AUTH_CODE noch AUTH_CODE_PARAMETER gesetzt")
        logger.info(f"Lade Auth Code aus SSM: {parameter_name}")
        auth_code = get_auth_code_from_ssm(parameter_name, ssm)

    try:
        request_timeout = float(environ.get("REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT))
    except ValueError as e:
        raise ConfigurationError(f"REQUEST_TIMEOUT ungültig: {environ.get('REQUEST_TIMEOUT')}") from e

    return Config(
        api_url=api_url,
        auth_code=auth_code,
        ca_cert_file=environ.get("CA_CERT_FILE") or None,
        request_timeout=request_timeout,
        log_level=environ.get("LOG_LEVEL", "INFO").upper(),
        single_base_capability=_is_true(environ.get("SINGLE_BASE_CAPABILITY", "false"))
    )
