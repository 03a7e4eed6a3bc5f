import logging
import sys

from gameroom import config
from gameroom.addressing import calculate_game_address
from gameroom.exceptions import GameroomError
from gameroom.rest import read_state
from gameroom.tp.message import deserialize_messages

LOGGER = logging.getLogger(__name__)


def read_message(name, rest_api=None):
    """The Message stored for ``name``, or None."""
    data = read_state(calculate_game_address(name), rest_api)
    if data is None:
        return None
    messages = deserialize_messages(data.decode())
    if messages is None:
        raise GameroomError(f"Invalid message state for {name}")
    return messages.get(name)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    if not args:
        print("usage: gameroom-read-state NAME [URL]", file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO)

    name = args[0]
    rest_api = args[1] if len(args) > 1 else config.SAWTOOTH_REST_API

    try:
        message = read_message(name, rest_api)
    except GameroomError as e:
        LOGGER.error("%s", e)
        return 1

    if message is None:
        print("No message named", name)
        return 1
    print("Value:", message.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
