import logging

from sawtooth_sdk.processor.exceptions import InvalidTransaction

from gameroom.addressing import calculate_game_address
from gameroom.tp.message import deserialize_messages, serialize_messages

LOGGER = logging.getLogger(__name__)


class MessageState:
    """Message storage for a single transaction.

    Names hashing to the same address share one state entry, so every
    read-modify-write goes through the whole collection at that address.
    Entries already read in this transaction are kept in ``_address_cache``.
    """

    TIMEOUT = 3

    def __init__(self, context):
        self._context = context
        self._address_cache = {}

    def get_message(self, name):
        return self._load_messages(name).get(name)

    def set_message(self, name, message):
        messages = self._load_messages(name)
        messages[name] = message
        self._store_messages(name, messages)

    def delete_message(self, name):
        messages = self._load_messages(name)
        messages.pop(name, None)
        if messages:
            self._store_messages(name, messages)
        else:
            self._delete_messages(name)

    def _store_messages(self, name, messages):
        address = calculate_game_address(name)
        state_string = serialize_messages(messages)
        self._address_cache[address] = state_string
        self._context.set_state(
            {address: state_string.encode()}, timeout=self.TIMEOUT)

    def _delete_messages(self, name):
        address = calculate_game_address(name)
        if address in self._address_cache:
            self._address_cache[address] = None
        self._context.delete_state([address], timeout=self.TIMEOUT)

    def _load_messages(self, name):
        address = calculate_game_address(name)

        if address in self._address_cache:
            state_string = self._address_cache[address]
            if state_string is None:
                return {}
            return self._deserialize(state_string)

        state_entries = self._context.get_state([address], timeout=self.TIMEOUT)
        if not state_entries or not state_entries[0].data:
            self._address_cache[address] = None
            return {}

        try:
            state_string = state_entries[0].data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidTransaction(
                f"Invalid serialization of message state: {e}") from e

        self._address_cache[address] = state_string
        return self._deserialize(state_string)

    @staticmethod
    def _deserialize(state_string):
        messages = deserialize_messages(state_string)
        if messages is None:
            raise InvalidTransaction("Invalid serialization of message state")
        return messages
