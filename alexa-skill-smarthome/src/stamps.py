# stamps.py

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone

# Werte für Unit Tests, damit man das JSON 1:1 vergleichen kann
UNIT_TEST_MESSAGE_ID = "MESSAGE_ID"
UNIT_TEST_TIMESTAMP = 1577885820000  # 2020-01-01T13:37:00.000Z


class MessageIdGenerator(ABC):
    @abstractmethod
    def new_message_id(self):
        pass


class UuidMessageIds(MessageIdGenerator):
    """Jede Nachricht braucht eine eindeutige UUID."""

    def new_message_id(self):
        return str(uuid.uuid4())


class FixedMessageIds(MessageIdGenerator):
    def __init__(self, message_id=UNIT_TEST_MESSAGE_ID):
        self.message_id = message_id

    def new_message_id(self):
        return self.message_id


class Clock(ABC):
    @abstractmethod
    def now(self):
        """Aktuelle Zeit als timezone-aware datetime (UTC)."""
        pass


class SystemClock(Clock):
    def now(self):
        return datetime.now(timezone.utc)


class FixedClock(Clock):
    def __init__(self, epoch_millis=UNIT_TEST_TIMESTAMP):
        self.epoch_millis = epoch_millis

    def now(self):
        seconds, millis = divmod(self.epoch_millis, 1000)
        return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=millis)


def format_time_of_sample(moment):
    """Alexa erwartet z.B. 2020-01-01T13:37:00.000Z (immer UTC, Millisekunden)."""
    # Echte Millisekunden (.%f gekürzt), nicht die Sekunden doppelt
    moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'
