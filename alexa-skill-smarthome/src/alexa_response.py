# alexa_response.py

import uuid

PAYLOAD_VERSION = "3"

NAMESPACE_ALEXA = "Alexa"
NAME_RESPONSE = "Response"
NAME_ERROR_RESPONSE = "ErrorResponse"

# Alexa will wissen, wie "alt" ein gemeldeter Wert sein kann
UNCERTAINTY_IN_MILLISECONDS = 200

ERROR_TYPE_INVALID_DIRECTIVE = "INVALID_DIRECTIVE"
ERROR_MESSAGE_INVALID_DIRECTIVE = "Request is invalid."


class AlexaResponse:
    """
    Baut die Antwort (das "Event") an Alexa zusammen.

    Aufbau:
        {"context": {"properties": [...]},            # optional
         "event": {"header": {...},
                   "endpoint": {...},                # optional
                   "payload": {...}}}                # optional
    """

    def __init__(self, namespace=NAMESPACE_ALEXA, name=NAME_RESPONSE, message_id=None,
                 correlation_token=None, endpoint_id=None, token=None,
                 scope_type="BearerToken", payload=None):
        self.namespace = namespace
        self.name = name
        self.message_id = message_id or str(uuid.uuid4())
        self.correlation_token = correlation_token
        self.endpoint_id = endpoint_id
        self.token = token
        self.scope_type = scope_type
        self.payload = payload
        self.context_properties = []

    def add_context_property(self, namespace, name, value, time_of_sample,
                             uncertainty_in_milliseconds=UNCERTAINTY_IN_MILLISECONDS):
        self.context_properties.append({
            "namespace": namespace,
            "name": name,
            "timeOfSample": time_of_sample,
            "uncertaintyInMilliseconds": uncertainty_in_milliseconds,
            "value": value
        })

    def set_payload(self, payload):
        self.payload = payload

    def set_payload_endpoints(self, endpoints):
        if self.payload is None:
            self.payload = {}
        self.payload["endpoints"] = endpoints

    def get_header(self):
        header = {
            "namespace": self.namespace,
            "name": self.name,
            "payloadVersion": PAYLOAD_VERSION,
            "messageId": self.message_id
        }
        if self.correlation_token is not None:
            header["correlationToken"] = self.correlation_token
        return header

    def get(self):
        """Liefert die Antwort als dict, genau so wie Alexa sie als JSON erwartet."""
        event = {"header": self.get_header()}

        if self.endpoint_id is not None:
            event["endpoint"] = {
                "endpointId": self.endpoint_id,
                "scope": {"type": self.scope_type, "token": self.token}
            }

        if self.payload is not None:
            event["payload"] = self.payload

        response = {}
        # context steht bei Alexa immer vor dem event
        if self.context_properties:
            response["context"] = {"properties": list(self.context_properties)}
        response["event"] = event
        return response

    @classmethod
    def from_dict(cls, response):
        """Das Gegenstück zu get(): liest eine Antwort wieder ein."""
        event = response["event"]
        header = event["header"]
        endpoint = event.get("endpoint") or {}
        scope = endpoint.get("scope") or {}

        adr = cls(
            namespace=header["namespace"],
            name=header["name"],
            message_id=header["messageId"],
            correlation_token=header.get("correlationToken"),
            endpoint_id=endpoint.get("endpointId"),
            token=scope.get("token"),
            scope_type=scope.get("type", "BearerToken"),
            payload=event.get("payload")
        )

        for prop in response.get("context", {}).get("properties", []):
            adr.add_context_property(
                namespace=prop["namespace"],
                name=prop["name"],
                value=prop["value"],
                time_of_sample=prop["timeOfSample"],
                uncertainty_in_milliseconds=prop["uncertaintyInMilliseconds"]
            )
        return adr

    def __eq__(self, other):
        if not isinstance(other, AlexaResponse):
            return NotImplemented
        return self.get() == other.get()

    def __repr__(self):
        return f"AlexaResponse({self.get()!r})"


def create_error_response(message_id):
    """
    Einheitliche Fehlerantwort. Alexa bekommt absichtlich keine Details,
    die stehen nur im Log.
    """
    return AlexaResponse(
        name=NAME_ERROR_RESPONSE,
        message_id=message_id,
        payload={
            "type": ERROR_TYPE_INVALID_DIRECTIVE,
            "message": ERROR_MESSAGE_INVALID_DIRECTIVE
        }
    )
