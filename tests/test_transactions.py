import hashlib

import pytest

from sawtooth_sdk.protobuf.batch_pb2 import BatchHeader, BatchList
from sawtooth_sdk.protobuf.transaction_pb2 import TransactionHeader

from gameroom import transactions
from gameroom.addressing import (
    MESSAGE_PREFIX,
    SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    calculate_game_address,
    calculate_namespace_registry_address,
    compute_contract_address,
    compute_contract_registry_address,
)
from gameroom.exceptions import InvalidPayloadError
from gameroom.protobuf.sabre_pb2 import SabrePayload
from gameroom.signing import verify


def _header(txn):
    header = TransactionHeader()
    header.ParseFromString(txn.header)
    return header


def _sabre(txn):
    payload = SabrePayload()
    payload.ParseFromString(txn.payload)
    return payload


def test_prepare_inputs():
    inputs = transactions.prepare_inputs(["f8daf5"])
    assert inputs == [
        compute_contract_registry_address("sawtooth_message"),
        compute_contract_address("sawtooth_message", "1.0"),
        calculate_namespace_registry_address("f8daf5"),
        "f8daf5",
    ]


def test_create_transaction_header(alice):
    address = calculate_game_address("first")
    txn = transactions.create_transaction(
        b"first,create,", [address], [address], alice)
    header = _header(txn)
    public_key = alice.get_public_key().as_hex()

    assert header.family_name == "sabre"
    assert header.family_version == "0.5"
    assert list(header.inputs) == transactions.prepare_inputs([address])
    assert list(header.outputs) == [address]
    assert header.signer_public_key == public_key
    assert header.batcher_public_key == public_key
    assert list(header.dependencies) == []
    assert header.payload_sha512 == hashlib.sha512(txn.payload).hexdigest()
    assert verify(txn.header_signature, txn.header, public_key)


def test_create_transaction_payload(alice):
    txn = transactions.create_transaction(
        b"first,create,", ["f8daf5"], ["f8daf5"], alice)
    payload = _sabre(txn)

    assert payload.action == SabrePayload.EXECUTE_CONTRACT
    execute = payload.execute_contract
    assert execute.name == "sawtooth_message"
    assert execute.version == "1.0"
    assert list(execute.inputs) == ["f8daf5"]
    assert list(execute.outputs) == ["f8daf5"]
    assert execute.payload == b"first,create,"


def test_create_family_transaction(bob):
    address = calculate_game_address("first")
    txn = transactions.create_family_transaction(
        b"first,add,hi", [address], [address], bob)
    header = _header(txn)

    assert header.family_name == "message"
    assert header.family_version == "1.0"
    assert list(header.inputs) == [address]
    assert txn.payload == b"first,add,hi"
    assert header.payload_sha512 == hashlib.sha512(b"first,add,hi").hexdigest()


def test_create_batch_list(alice):
    txns = [
        transactions.create_transaction(
            transactions.make_message_payload(name, "create"),
            [MESSAGE_PREFIX], [MESSAGE_PREFIX], alice)
        for name in ("first", "second")
    ]
    batch_list = BatchList()
    batch_list.ParseFromString(transactions.create_batch_list(txns, alice))

    assert len(batch_list.batches) == 1
    batch = batch_list.batches[0]
    header = BatchHeader()
    header.ParseFromString(batch.header)
    public_key = alice.get_public_key().as_hex()

    assert list(header.transaction_ids) == [t.header_signature for t in txns]
    assert header.signer_public_key == public_key
    assert verify(batch.header_signature, batch.header, public_key)
    assert [t.header_signature for t in batch.transactions] == \
        list(header.transaction_ids)


def test_create_game(bob):
    batch_list = BatchList()
    batch_list.ParseFromString(transactions.create_game(bob, "first"))
    txn, = batch_list.batches[0].transactions

    execute = _sabre(txn).execute_contract
    assert execute.payload == b"first,create,"
    assert list(execute.inputs) == [MESSAGE_PREFIX]
    assert list(_header(txn).outputs) == [MESSAGE_PREFIX]


@pytest.mark.parametrize("name,action,content", [
    ("", "create", ""),
    ("first", "", ""),
    ("first", "move", ""),
    ("fir|st", "create", ""),
    ("first", "add", "hello, friend"),
])
def test_make_message_payload_rejects(name, action, content):
    with pytest.raises(InvalidPayloadError):
        transactions.make_message_payload(name, action, content)


def test_contract_setup_transactions(alice):
    owners = [alice.get_public_key().as_hex()]

    registry = transactions.create_contract_registry_txn(owners, alice)
    payload = _sabre(registry)
    assert payload.action == SabrePayload.CREATE_CONTRACT_REGISTRY
    assert payload.create_contract_registry.name == "sawtooth_message"
    assert list(payload.create_contract_registry.owners) == owners
    assert list(_header(registry).inputs) == [
        compute_contract_registry_address("sawtooth_message"),
        SABRE_ADMINISTRATORS_SETTING_ADDRESS,
    ]

    upload = transactions.upload_contract_txn(b"\0asm", alice)
    payload = _sabre(upload)
    assert payload.action == SabrePayload.CREATE_CONTRACT
    assert payload.create_contract.contract == b"\0asm"
    assert list(payload.create_contract.inputs) == [MESSAGE_PREFIX]
    assert list(_header(upload).outputs) == [
        compute_contract_registry_address("sawtooth_message"),
        transactions.get_message_contract_address(),
    ]

    namespace = transactions.create_namespace_registry_txn(owners, alice)
    payload = _sabre(namespace)
    assert payload.action == SabrePayload.CREATE_NAMESPACE_REGISTRY
    assert payload.create_namespace_registry.namespace == MESSAGE_PREFIX
    assert SABRE_ADMINISTRATORS_SETTING_ADDRESS in _header(namespace).inputs

    permission = transactions.namespace_permissions_txn(alice)
    payload = _sabre(permission).create_namespace_registry_permission
    assert payload.contract_name == "sawtooth_message"
    assert payload.read and payload.write
    assert _header(permission).family_name == "sabre"
    assert SABRE_ADMINISTRATORS_SETTING_ADDRESS in _header(permission).outputs


def test_registry_changes_read_swa_administrators(alice):
    owners = [alice.get_public_key().as_hex()]
    administrators = (
        "000000a87cb5eafdcca6a814e4add97c4b517d3c530c2f44b31d18"
        "e3b0c44298fc1c14")

    registry = transactions.create_contract_registry_txn(owners, alice)

    assert administrators in _header(registry).inputs
    assert administrators in _header(registry).outputs


def test_sabre_action_numbers():
    assert SabrePayload.EXECUTE_CONTRACT == 3
    assert SabrePayload.CREATE_NAMESPACE_REGISTRY_PERMISSION == 10
    assert SabrePayload.CREATE_SMART_PERMISSION == 12
    assert SabrePayload.DELETE_SMART_PERMISSION == 14
