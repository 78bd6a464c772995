import sys
import os

# Pfade sofort setzen, nicht erst in einer Fixture!
BASE_DIR = os.path.abspath(os.path.dirname(__file__))
paths = [
    os.path.join(BASE_DIR, 'alexa-skill-smarthome', 'src')
]

for p in paths:
    if p not in sys.path:
        sys.path.insert(0, p)
