"""Sabre transaction payload messages.

Mirrors ``protos/payload.proto`` of Sawtooth Sabre. Only the actions used by
the gameroom harness carry a message definition; the ``Action`` enum is
complete so that encoded payloads match the Sabre wire format.
"""

from google.protobuf import descriptor_pb2
from google.protobuf import descriptor_pool
from google.protobuf import message_factory

_F = descriptor_pb2.FieldDescriptorProto

_PACKAGE = "sabre"

_ACTIONS = [
    "ACTION_UNSET",
    "CREATE_CONTRACT",
    "DELETE_CONTRACT",
    "EXECUTE_CONTRACT",
    "CREATE_CONTRACT_REGISTRY",
    "DELETE_CONTRACT_REGISTRY",
    "UPDATE_CONTRACT_REGISTRY_OWNERS",
    "CREATE_NAMESPACE_REGISTRY",
    "DELETE_NAMESPACE_REGISTRY",
    "UPDATE_NAMESPACE_REGISTRY_OWNERS",
    "CREATE_NAMESPACE_REGISTRY_PERMISSION",
    "DELETE_NAMESPACE_REGISTRY_PERMISSION",
    "CREATE_SMART_PERMISSION",
    "UPDATE_SMART_PERMISSION",
    "DELETE_SMART_PERMISSION",
]

# message name -> [(field name, number, type, label, type name)]
_MESSAGES = {
    "CreateContractAction": [
        ("name", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("version", 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("inputs", 3, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
        ("outputs", 4, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
        ("contract", 5, _F.TYPE_BYTES, _F.LABEL_OPTIONAL, None),
    ],
    "ExecuteContractAction": [
        ("name", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("version", 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("inputs", 3, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
        ("outputs", 4, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
        ("payload", 5, _F.TYPE_BYTES, _F.LABEL_OPTIONAL, None),
    ],
    "CreateContractRegistryAction": [
        ("name", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("owners", 2, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
    ],
    "CreateNamespaceRegistryAction": [
        ("namespace", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("owners", 2, _F.TYPE_STRING, _F.LABEL_REPEATED, None),
    ],
    "CreateNamespaceRegistryPermissionAction": [
        ("namespace", 1, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("contract_name", 2, _F.TYPE_STRING, _F.LABEL_OPTIONAL, None),
        ("read", 3, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
        ("write", 4, _F.TYPE_BOOL, _F.LABEL_OPTIONAL, None),
    ],
    "SabrePayload": [
        ("action", 1, _F.TYPE_ENUM, _F.LABEL_OPTIONAL,
         ".sabre.SabrePayload.Action"),
        ("create_contract", 2, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL,
         ".sabre.CreateContractAction"),
        ("execute_contract", 4, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL,
         ".sabre.ExecuteContractAction"),
        ("create_contract_registry", 5, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL,
         ".sabre.CreateContractRegistryAction"),
        ("create_namespace_registry", 8, _F.TYPE_MESSAGE, _F.LABEL_OPTIONAL,
         ".sabre.CreateNamespaceRegistryAction"),
        ("create_namespace_registry_permission", 11, _F.TYPE_MESSAGE,
         _F.LABEL_OPTIONAL, ".sabre.CreateNamespaceRegistryPermissionAction"),
    ],
}


def _build_file():
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="sabre/payload.proto", package=_PACKAGE, syntax="proto3")
    for message_name, fields in _MESSAGES.items():
        message_proto = file_proto.message_type.add(name=message_name)
        for name, number, field_type, label, type_name in fields:
            field = message_proto.field.add(
                name=name, number=number, type=field_type, label=label)
            if type_name:
                field.type_name = type_name
        if message_name == "SabrePayload":
            enum_proto = message_proto.enum_type.add(name="Action")
            for number, value in enumerate(_ACTIONS):
                enum_proto.value.add(name=value, number=number)
    return file_proto


def _message_class(pool, name):
    descriptor = pool.FindMessageTypeByName(f"{_PACKAGE}.{name}")
    if hasattr(message_factory, "GetMessageClass"):
        return message_factory.GetMessageClass(descriptor)
    return message_factory.MessageFactory(pool).GetPrototype(descriptor)


_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(_build_file().SerializeToString())

CreateContractAction = _message_class(_POOL, "CreateContractAction")
ExecuteContractAction = _message_class(_POOL, "ExecuteContractAction")
CreateContractRegistryAction = _message_class(
    _POOL, "CreateContractRegistryAction")
CreateNamespaceRegistryAction = _message_class(
    _POOL, "CreateNamespaceRegistryAction")
CreateNamespaceRegistryPermissionAction = _message_class(
    _POOL, "CreateNamespaceRegistryPermissionAction")
SabrePayload = _message_class(_POOL, "SabrePayload")
