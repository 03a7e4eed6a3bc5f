import logging
import sys

from gameroom import config
from gameroom.exceptions import GameroomError
from gameroom.rest import submit_batch
from gameroom.signing import signer_for_user
from gameroom.transactions import create_game

LOGGER = logging.getLogger(__name__)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 3:
        print("usage: gameroom-create-game USER GAME_NAME CIRCUIT_ID [URL]",
              file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO)

    user_name, game_name, circuit_id = args[:3]
    url = args[3] if len(args) > 3 else config.GAMEROOM_URL

    try:
        signer = signer_for_user(config.get_user(user_name))
        batch_list = create_game(signer, game_name)
        body = submit_batch(batch_list, circuit_id, base_url=url)
    except GameroomError as e:
        LOGGER.error("%s", e)
        return 1

    LOGGER.info("Created game %s in %s: %s",
                game_name, circuit_id, body.decode(errors="replace"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
