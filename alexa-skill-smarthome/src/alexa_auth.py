# alexa_auth.py

import logging

from alexa_response import AlexaResponse
from directive import NAMESPACE_AUTHORIZATION

logger = logging.getLogger(__name__)


def handle_accept_grant(directive, message_id):
    """
    Verarbeitet den Alexa.Authorization / AcceptGrant Request.

    Wir akzeptieren immer. Die Antwort auf AcceptGrant ist immer ein leeres Payload.
    """
    logger.info(f"AcceptGrant akzeptiert (messageId {directive.header.message_id})")

    return AlexaResponse(
        namespace=NAMESPACE_AUTHORIZATION,
        name="AcceptGrant.Response",
        message_id=message_id,
        payload={}
    )
