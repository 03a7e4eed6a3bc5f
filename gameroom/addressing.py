import hashlib

from gameroom.config import MESSAGE_FAMILY_NAME

# Sabre registry prefixes
NAMESPACE_REGISTRY_PREFIX = "00ec00"
CONTRACT_REGISTRY_PREFIX = "00ec01"
CONTRACT_PREFIX = "00ec02"

SETTINGS_PREFIX = "000000"
_SETTINGS_MAX_KEY_PARTS = 4
_SETTINGS_PART_LENGTH = 16


def hash512(data):
    if isinstance(data, str):
        data = data.encode()
    return hashlib.sha512(data).hexdigest()


MESSAGE_PREFIX = hash512(MESSAGE_FAMILY_NAME)[0:6]


def calculate_game_address(name):
    return MESSAGE_PREFIX + hash512(name)[0:64]


def compute_contract_registry_address(name):
    return CONTRACT_REGISTRY_PREFIX + hash512(name)[0:64]


def compute_contract_address(name, version):
    return CONTRACT_PREFIX + hash512(name + "," + version)[0:64]


def calculate_namespace_registry_address(namespace):
    """Only the first 6 characters of a namespace select its registry entry."""
    return NAMESPACE_REGISTRY_PREFIX + hash512(namespace[0:6])[0:64]


def _short_hash(part):
    return hashlib.sha256(part.encode()).hexdigest()[0:_SETTINGS_PART_LENGTH]


def compute_setting_address(key):
    """Address of a Sawtooth on-chain setting such as ``sawtooth.swa.administrators``.

    The key is split on dots into at most four parts; the last part keeps any
    remaining dots and missing parts are hashed as empty strings.
    """
    parts = key.split(".", _SETTINGS_MAX_KEY_PARTS - 1)
    parts.extend([""] * (_SETTINGS_MAX_KEY_PARTS - len(parts)))
    return SETTINGS_PREFIX + "".join(_short_hash(p) for p in parts)


SABRE_ADMINISTRATORS_SETTING_ADDRESS = compute_setting_address(
    "sawtooth.swa.administrators")
