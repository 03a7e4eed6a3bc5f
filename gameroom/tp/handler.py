import logging

from sawtooth_sdk.processor.exceptions import InvalidTransaction
from sawtooth_sdk.processor.handler import TransactionHandler

from gameroom.addressing import MESSAGE_PREFIX
from gameroom.config import MESSAGE_FAMILY_NAME, MESSAGE_FAMILY_VERSION
from gameroom.tp.message import Message
from gameroom.tp.payload import MessagePayload
from gameroom.tp.state import MessageState

LOGGER = logging.getLogger(__name__)


class MessageTransactionHandler(TransactionHandler):
    @property
    def family_name(self):
        return MESSAGE_FAMILY_NAME

    @property
    def family_versions(self):
        return [MESSAGE_FAMILY_VERSION]

    @property
    def namespaces(self):
        return [MESSAGE_PREFIX]

    def apply(self, transaction, context):
        signer = transaction.header.signer_public_key

        payload = MessagePayload(transaction.payload)
        state = MessageState(context)

        LOGGER.info(
            "Payload: %s %s %s",
            payload.name, payload.action, payload.message_content)

        message = state.get_message(payload.name)

        if payload.action == "delete":
            if message is None:
                raise InvalidTransaction(
                    "Invalid action: message does not exist")
            state.delete_message(payload.name)

        elif payload.action == "create":
            if message is not None:
                raise InvalidTransaction(
                    "Invalid action: Message already exists")
            state.set_message(payload.name, Message(payload.name))
            LOGGER.info("Created message: %s", payload.name)

        elif payload.action == "add":
            if message is None:
                raise InvalidTransaction(
                    "Invalid action: Add requires an existing message")

            if not message.participant1:
                message.participant1 = signer
            elif not message.participant2:
                message.participant2 = signer

            message.add_message(payload.message_content, signer)
            message.display()
            state.set_message(payload.name, message)

        else:
            raise InvalidTransaction(
                f"Invalid action: '{payload.action}'")
