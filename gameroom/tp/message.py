import logging

LOGGER = logging.getLogger(__name__)

TEXT = "TEXT"
ERROR = "error"

NO_PREVIOUS_ID = "-1"
FIELD_COUNT = 8
SHORT_KEY_LENGTH = 6


class Message:
    """A chat message thread stored under the message namespace.

    Serialized as ``name,content,type,id,previous_id,sender,p1,p2``.
    """

    def __init__(self, name, message_content="Chat Created",
                 message_type=TEXT, id=0, previous_id=None, sender="P1",
                 participant1="", participant2=""):
        self.name = name
        self.message_content = message_content
        self.message_type = message_type
        self.id = id
        self.previous_id = previous_id
        self.sender = sender
        self.participant1 = participant1
        self.participant2 = participant2

    @property
    def participant1_short(self):
        return self.participant1[0:SHORT_KEY_LENGTH]

    @property
    def participant2_short(self):
        return self.participant2[0:SHORT_KEY_LENGTH]

    def to_string(self):
        previous_id = NO_PREVIOUS_ID if self.previous_id is None \
            else str(self.previous_id)
        return ",".join([
            self.name,
            self.message_content,
            self.message_type,
            str(self.id),
            previous_id,
            self.sender,
            self.participant1,
            self.participant2,
        ])

    @classmethod
    def from_string(cls, message_string):
        items = message_string.split(",")
        if len(items) != FIELD_COUNT:
            return None
        try:
            id = int(items[3])
        except ValueError:
            return None
        if id < 0:
            return None
        message_type = TEXT if items[2] == TEXT else ERROR
        return cls(
            name=items[0],
            message_content=items[1],
            message_type=message_type,
            id=id,
            previous_id=_parse_previous_id(items[4]),
            sender=items[5],
            participant1=items[6],
            participant2=items[7],
        )

    def add_message(self, message_content, sender):
        self.message_content = message_content
        self.sender = sender
        self.previous_id = self.id
        self.id += 1

    def display(self):
        LOGGER.info(
            "\n    name: %s\n    message: %s\n    message type: %s"
            "\n    id: %s\n    previous id: %s\n    sender: %s"
            "\n    participant 1: %s\n    participant 2: %s",
            self.name,
            self.message_content,
            self.message_type,
            self.id,
            self.previous_id,
            self.sender,
            self.participant1_short,
            self.participant2_short,
        )

    def __eq__(self, other):
        if not isinstance(other, Message):
            return NotImplemented
        return self.to_string() == other.to_string()

    def __repr__(self):
        return f"Message({self.to_string()!r})"


def _parse_previous_id(value):
    try:
        previous_id = int(value)
    except ValueError:
        return None
    return previous_id if previous_id >= 0 else None


def serialize_messages(messages):
    """Sorted ``|``-joined serialization of a name -> Message dict."""
    return "|".join(sorted(m.to_string() for m in messages.values()))


def deserialize_messages(messages_string):
    """Inverse of serialize_messages, or None if any entry is malformed."""
    messages = {}
    for message_string in messages_string.split("|"):
        message = Message.from_string(message_string)
        if message is None:
            return None
        messages[message.name] = message
    return messages
