import logging
import sys

from sawtooth_sdk.processor.core import TransactionProcessor

from gameroom.config import VALIDATOR_URL
from gameroom.tp.handler import MessageTransactionHandler

LOGGER = logging.getLogger(__name__)


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    url = args[0] if args else VALIDATOR_URL

    logging.basicConfig(level=logging.INFO)
    LOGGER.info("Connecting message processor to %s", url)

    processor = TransactionProcessor(url=url)
    handler = MessageTransactionHandler()
    processor.add_handler(handler)
    try:
        processor.start()
    except KeyboardInterrupt:
        pass
    finally:
        processor.stop()


if __name__ == "__main__":
    main()
