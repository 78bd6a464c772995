# controllers/alexa_interface.py

from .alexa_controller import AlexaController, Capability

ALEXA_CAPABILITY = Capability(interface="Alexa")


class AlexaInterface(AlexaController):
    """Das Basis-Interface, das jedes Smart Home Gerät braucht."""

    namespace = "Alexa"

    @staticmethod
    def get_capability():
        return ALEXA_CAPABILITY
