# controllers/alexa_controller.py

from abc import ABC, abstractmethod
from dataclasses import dataclass

from rest_api import Ok

INTERFACE_TYPE = "AlexaInterface"
INTERFACE_VERSION = "3"


@dataclass(frozen=True)
class Capability:
    """
    Eine Capability für die Discovery. Die Instanzen werden einmal pro Prozess
    gebaut und für alle Geräte wiederverwendet, deshalb unveränderlich.
    """

    interface: str
    supported: tuple = ()
    type: str = INTERFACE_TYPE
    version: str = INTERFACE_VERSION

    def to_dict(self):
        capability = {
            "type": self.type,
            "interface": self.interface,
            "version": self.version
        }
        if self.supported:
            capability["properties"] = {
                "supported": [{"name": name} for name in self.supported]
            }
        return capability


class AlexaController(ABC):
    @property
    @abstractmethod
    def namespace(self):
        pass

    @staticmethod
    @abstractmethod
    def get_capability():
        """Gibt die (geteilte) Capability für die Discovery zurück."""
        pass

    @staticmethod
    def get_properties(directive):
        """Properties für den context der Antwort, ohne timeOfSample."""
        return []

    @staticmethod
    def handle_directive(directive, rest_api):
        """Führt die Direktive am Backend aus, liefert Ok/Err. Ohne Backend-Aufruf: Ok()."""
        return Ok()
