"""Transaction and batch construction for the gameroom message contract.

Contract transactions are wrapped in a Sabre ``SabrePayload`` and sent under
the Sabre family; the same envelope without the Sabre wrapping is available
for validators that run :mod:`gameroom.tp` directly.
"""

import hashlib
import logging

from sawtooth_sdk.protobuf.batch_pb2 import Batch, BatchHeader, BatchList
from sawtooth_sdk.protobuf.transaction_pb2 import Transaction, TransactionHeader
from sawtooth_sdk.processor.exceptions import InvalidTransaction

from gameroom.addressing import (
    MESSAGE_PREFIX,
    SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    calculate_namespace_registry_address,
    compute_contract_address,
    compute_contract_registry_address,
)
from gameroom.config import (
    MESSAGE_FAMILY_NAME,
    MESSAGE_FAMILY_VERSION,
    MESSAGE_NAME,
    MESSAGE_VERSION,
    SABRE_FAMILY_NAME,
    SABRE_FAMILY_VERSION,
)
from gameroom.exceptions import InvalidPayloadError
from gameroom.protobuf.sabre_pb2 import (
    CreateContractAction,
    CreateContractRegistryAction,
    CreateNamespaceRegistryAction,
    CreateNamespaceRegistryPermissionAction,
    ExecuteContractAction,
    SabrePayload,
)
from gameroom.tp.payload import MessagePayload

LOGGER = logging.getLogger(__name__)


def prepare_inputs(contract_addresses, name=MESSAGE_NAME,
                   version=MESSAGE_VERSION, prefix=MESSAGE_PREFIX):
    return [
        compute_contract_registry_address(name),
        compute_contract_address(name, version),
        calculate_namespace_registry_address(prefix),
    ] + list(contract_addresses)


def _sign_transaction(payload_bytes, inputs, outputs, signer,
                      family_name, family_version):
    public_key = signer.get_public_key().as_hex()

    header = TransactionHeader(
        family_name=family_name,
        family_version=family_version,
        inputs=inputs,
        outputs=outputs,
        signer_public_key=public_key,
        batcher_public_key=public_key,
        dependencies=[],
        payload_sha512=hashlib.sha512(payload_bytes).hexdigest(),
    ).SerializeToString()

    signature = signer.sign(header)
    LOGGER.debug("Signed %s transaction %s", family_name, signature)

    return Transaction(
        header=header,
        header_signature=signature,
        payload=payload_bytes,
    )


def _sabre_transaction(sabre_payload, addresses, signer):
    return _sign_transaction(
        sabre_payload.SerializeToString(), addresses, addresses, signer,
        SABRE_FAMILY_NAME, SABRE_FAMILY_VERSION)


def create_transaction(payload_bytes, inputs, outputs, signer,
                       name=MESSAGE_NAME, version=MESSAGE_VERSION):
    """Execute the named Sabre contract with ``payload_bytes``."""
    execute_contract = ExecuteContractAction(
        name=name,
        version=version,
        inputs=inputs,
        outputs=outputs,
        payload=payload_bytes,
    )
    sabre_payload = SabrePayload(
        action=SabrePayload.EXECUTE_CONTRACT,
        execute_contract=execute_contract,
    ).SerializeToString()

    return _sign_transaction(
        sabre_payload,
        prepare_inputs(inputs, name, version),
        list(outputs),
        signer,
        SABRE_FAMILY_NAME,
        SABRE_FAMILY_VERSION,
    )


def create_family_transaction(payload_bytes, inputs, outputs, signer,
                              family_name=MESSAGE_FAMILY_NAME,
                              family_version=MESSAGE_FAMILY_VERSION):
    return _sign_transaction(
        payload_bytes, list(inputs), list(outputs), signer,
        family_name, family_version)


def create_batch(transactions, signer):
    transaction_ids = [txn.header_signature for txn in transactions]

    header = BatchHeader(
        signer_public_key=signer.get_public_key().as_hex(),
        transaction_ids=transaction_ids,
    ).SerializeToString()

    return Batch(
        header=header,
        header_signature=signer.sign(header),
        transactions=transactions,
    )


def create_batch_list(transactions, signer):
    """Encoded BatchList holding a single batch of ``transactions``."""
    batch = create_batch(transactions, signer)
    LOGGER.debug("Created batch %s", batch.header_signature)
    return BatchList(batches=[batch]).SerializeToString()


# ======================================
# MESSAGE CONTRACT PAYLOADS
# ======================================
def make_message_payload(name, action, content=""):
    payload_bytes = MessagePayload.encode(name, action, content)
    try:
        MessagePayload(payload_bytes)
    except InvalidTransaction as e:
        raise InvalidPayloadError(str(e)) from e
    return payload_bytes


def create_game(signer, name, content=""):
    payload_bytes = make_message_payload(name, "create", content)
    # The contract needs the whole message namespace
    addresses = [MESSAGE_PREFIX]
    transaction = create_transaction(
        payload_bytes, addresses, addresses, signer)
    return create_batch_list([transaction], signer)


# ======================================
# SABRE CONTRACT SETUP
# ======================================
def create_contract_registry_txn(owners, signer, name=MESSAGE_NAME):
    payload = SabrePayload(
        action=SabrePayload.CREATE_CONTRACT_REGISTRY,
        create_contract_registry=CreateContractRegistryAction(
            name=name, owners=owners),
    )
    addresses = [
        compute_contract_registry_address(name),
        SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    ]
    return _sabre_transaction(payload, addresses, signer)


def upload_contract_txn(contract, signer, name=MESSAGE_NAME,
                        version=MESSAGE_VERSION):
    action_addresses = [MESSAGE_PREFIX]
    payload = SabrePayload(
        action=SabrePayload.CREATE_CONTRACT,
        create_contract=CreateContractAction(
            name=name,
            version=version,
            inputs=action_addresses,
            outputs=action_addresses,
            contract=contract,
        ),
    )
    addresses = [
        compute_contract_registry_address(name),
        compute_contract_address(name, version),
    ]
    return _sabre_transaction(payload, addresses, signer)


def create_namespace_registry_txn(owners, signer, namespace=MESSAGE_PREFIX):
    payload = SabrePayload(
        action=SabrePayload.CREATE_NAMESPACE_REGISTRY,
        create_namespace_registry=CreateNamespaceRegistryAction(
            namespace=namespace, owners=owners),
    )
    addresses = [
        calculate_namespace_registry_address(namespace),
        SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    ]
    return _sabre_transaction(payload, addresses, signer)


def namespace_permissions_txn(signer, namespace=MESSAGE_PREFIX,
                              contract_name=MESSAGE_NAME):
    payload = SabrePayload(
        action=SabrePayload.CREATE_NAMESPACE_REGISTRY_PERMISSION,
        create_namespace_registry_permission=(
            CreateNamespaceRegistryPermissionAction(
                namespace=namespace,
                contract_name=contract_name,
                read=True,
                write=True,
            )),
    )
    addresses = [
        calculate_namespace_registry_address(namespace),
        SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    ]
    return _sabre_transaction(payload, addresses, signer)


def get_message_contract_address():
    return compute_contract_address(MESSAGE_NAME, MESSAGE_VERSION)
