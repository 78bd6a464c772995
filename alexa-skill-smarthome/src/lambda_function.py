# lambda_function.py
import logging
import json
import os
import time

from alexa_handler import AlexaHandler
from config import load_config
from rest_api import HttpRestApi, create_ssl_context

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

DEPLOY_DATE = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())

# Wird beim ersten Aufruf gebaut und bei Warm-Starts wiederverwendet
_handler = None


def create_handler(config):
    rest_api = HttpRestApi(
        base_url=config.api_url,
        auth_code=config.auth_code,
        timeout=config.request_timeout,
        ssl_context=create_ssl_context(config.ca_cert_file)
    )
    return AlexaHandler(rest_api, single_base_capability=config.single_base_capability)


def get_handler():
    global _handler
    if _handler is None:
        config = load_config()
        logger.setLevel(config.log_level)
        _handler = create_handler(config)
    return _handler


def lambda_handler(request, context):
    logger.info(f"--- LAMBDA START: {DEPLOY_DATE} ---")

    # Logge den kompletten Request, damit wir sehen, was Alexa genau will
    logger.info("Request: %s", json.dumps(request))

    if "directive" not in request:
        logger.warning("Kein 'directive' im Request, ignoriere.")
        return {}

    directive = request["directive"] if isinstance(request["directive"], dict) else {}
    header = directive.get("header") or {}
    logger.info(f"Namespace: {header.get('namespace')} | Name: {header.get('name')}")

    try:
        response = get_handler().handle_request(request)
    except Exception:
        # Kaputte Direktiven oder Konfiguration: Lambda soll laut scheitern
        logger.exception("Request konnte nicht verarbeitet werden")
        raise

    logger.info("Response: %s", json.dumps(response))
    return response
