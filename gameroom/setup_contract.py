import logging
import sys

from gameroom import config
from gameroom.exceptions import ContractSetupError, GameroomError
from gameroom.rest import submit_scabbard_batch
from gameroom.signing import new_signer
from gameroom.transactions import (
    create_batch_list,
    create_contract_registry_txn,
    create_namespace_registry_txn,
    namespace_permissions_txn,
    upload_contract_txn,
)

LOGGER = logging.getLogger(__name__)


def load_contract(contract_path):
    try:
        with open(contract_path, "rb") as f:
            return f.read()
    except OSError as e:
        raise ContractSetupError(f"Failed to load contract: {e}") from e


def setup_message(private_key, scabbard_admin_keys, splinterd_url, circuit_id,
                  service_id, contract_path=config.MESSAGE_CONTRACT_PATH):
    """Register and upload the message contract on a new circuit.

    Only the node holding the first scabbard admin key submits; every other
    node returns False without doing anything.
    """
    signer = new_signer(private_key)
    public_key = signer.get_public_key().as_hex()

    if not scabbard_admin_keys or scabbard_admin_keys[0] != public_key:
        LOGGER.debug("Not the contract submitter for circuit %s", circuit_id)
        return False

    transactions = [
        create_contract_registry_txn(list(scabbard_admin_keys), signer),
        upload_contract_txn(load_contract(contract_path), signer),
        create_namespace_registry_txn(list(scabbard_admin_keys), signer),
        namespace_permissions_txn(signer),
    ]
    batch_list = create_batch_list(transactions, signer)

    submit_scabbard_batch(batch_list, circuit_id, service_id, splinterd_url)
    LOGGER.info("Message contract submitted to %s::%s", circuit_id, service_id)
    return True


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    if len(args) < 4:
        print("usage: gameroom-setup-contract USER CIRCUIT_ID SERVICE_ID "
              "ADMIN_KEY[,ADMIN_KEY...] [CONTRACT_PATH] [SPLINTERD_URL]",
              file=sys.stderr)
        return 1

    logging.basicConfig(level=logging.INFO)

    user_name, circuit_id, service_id, admin_keys = args[:4]
    contract_path = args[4] if len(args) > 4 else config.MESSAGE_CONTRACT_PATH
    splinterd_url = args[5] if len(args) > 5 else config.SPLINTERD_URL

    try:
        user = config.get_user(user_name)
        submitted = setup_message(
            user["privateKey"], admin_keys.split(","), splinterd_url,
            circuit_id, service_id, contract_path)
    except GameroomError as e:
        LOGGER.error("%s", e)
        return 1

    if not submitted:
        LOGGER.info("%s is not the first admin key, nothing submitted",
                    user_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
