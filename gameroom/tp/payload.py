from sawtooth_sdk.processor.exceptions import InvalidTransaction

ACTIONS = ("create", "add", "delete")

# Separators used by the message state encoding
RESERVED = (",", "|")


class MessagePayload:
    """A ``name,action,content`` payload, UTF-8 encoded."""

    def __init__(self, payload_data):
        try:
            payload_string = payload_data.decode("utf-8")
        except UnicodeDecodeError:
            raise InvalidTransaction("Invalid payload serialization") from None

        items = payload_string.split(",")
        if len(items) != 3:
            raise InvalidTransaction("Payload must have exactly 2 commas")

        name, action, message_content = items

        if not name:
            raise InvalidTransaction("Name is required")

        if not action:
            raise InvalidTransaction("Action is required")

        if "|" in name or "|" in message_content:
            raise InvalidTransaction("Name and message cannot contain |")

        if action not in ACTIONS:
            raise InvalidTransaction(f"Invalid action: {action}")

        self.name = name
        self.action = action
        self.message_content = message_content

    @staticmethod
    def encode(name, action, message_content=""):
        return f"{name},{action},{message_content}".encode("utf-8")
