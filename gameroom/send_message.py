import logging
import sys

from gameroom import config
from gameroom.addressing import calculate_game_address
from gameroom.exceptions import GameroomError
from gameroom.rest import submit_to_validator
from gameroom.signing import signer_for_user
from gameroom.transactions import (
    create_batch_list,
    create_family_transaction,
    make_message_payload,
)

LOGGER = logging.getLogger(__name__)


def send_message(signer, name, action, content="", rest_api=None):
    """Submit a message family transaction straight to a Sawtooth validator."""
    payload_bytes = make_message_payload(name, action, content)
    address = calculate_game_address(name)
    transaction = create_family_transaction(
        payload_bytes, [address], [address], signer)
    return submit_to_validator(
        create_batch_list([transaction], signer), rest_api)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 3:
        print("usage: gameroom-send-message USER NAME ACTION [CONTENT] [URL]",
              file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO)

    user_name, name, action = args[:3]
    content = args[3] if len(args) > 3 else ""
    rest_api = args[4] if len(args) > 4 else config.SAWTOOTH_REST_API

    try:
        signer = signer_for_user(config.get_user(user_name))
        result = send_message(signer, name, action, content, rest_api)
    except GameroomError as e:
        LOGGER.error("%s", e)
        return 1

    LOGGER.info("Submitted: %s", result.get("link"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
