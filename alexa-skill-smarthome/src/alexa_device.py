# alexa_device.py

from controllers import AlexaInterface, CAPABILITY_CONTROLLERS

# Muss bei Alexa gesetzt und darf nicht leer sein
MANUFACTURER_NAME = "Smart Home"
DEVICE_DESCRIPTION = "-"


class AlexaDevice:
    """Ein Gerät aus dem Backend, so wie Alexa es in der Discovery sehen will."""

    def __init__(self, device, single_base_capability=False):
        self.device = device
        self.endpoint_id = device.id
        self.friendly_name = device.name
        self.description = DEVICE_DESCRIPTION
        self.manufacturer_name = MANUFACTURER_NAME

        # Kategorien (Alexa erwartet eine Liste)
        self.display_categories = [device.category.name]

        # Mehrere Capabilities gleichen Typs gibt es pro Gerät nicht
        self.controllers = [CAPABILITY_CONTROLLERS[cap] for cap in device.capabilities]
        self.single_base_capability = single_base_capability

    def get_discovery_capabilities(self):
        """Erstellt die Liste aller Capabilities für die Discovery."""
        base = AlexaInterface.get_capability()

        if self.single_base_capability:
            caps = [base]
            caps.extend(ctrl.get_capability() for ctrl in self.controllers)
        else:
            # Altes Verhalten: das Basis-Interface steht vor JEDER Capability,
            # ein Dimmer hat es also zweimal. Alexa stört das nicht.
            caps = []
            for ctrl in self.controllers:
                caps.append(base)
                caps.append(ctrl.get_capability())

        return [cap.to_dict() for cap in caps]

    def get_discovery_payload(self):
        """Erzeugt das vollständige Objekt für einen Endpunkt im Discovery-Payload."""
        return {
            "endpointId": self.endpoint_id,
            "friendlyName": self.friendly_name,
            "description": self.description,
            "manufacturerName": self.manufacturer_name,
            "capabilities": self.get_discovery_capabilities(),
            "displayCategories": self.display_categories
        }
