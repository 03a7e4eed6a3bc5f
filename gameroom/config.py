import os

from gameroom.exceptions import UnknownUserError

# ======================================
# ENDPOINTS
# ======================================
GAMEROOM_URL = os.environ.get("GAMEROOM_URL", "http://localhost:8001")
SAWTOOTH_REST_API = os.environ.get("SAWTOOTH_REST_API", "http://localhost:8008")
SPLINTERD_URL = os.environ.get("SPLINTERD_URL", "http://localhost:8085")
VALIDATOR_URL = os.environ.get("VALIDATOR_URL", "tcp://localhost:4004")

REQUEST_TIMEOUT = 5

# ======================================
# FAMILIES
# ======================================
SABRE_FAMILY_NAME = "sabre"
SABRE_FAMILY_VERSION = "0.5"

# Contract name and version as registered with Sabre
MESSAGE_NAME = "sawtooth_message"
MESSAGE_VERSION = "1.0"

# Native family served by gameroom.tp
MESSAGE_FAMILY_NAME = "message"
MESSAGE_FAMILY_VERSION = "1.0"

MESSAGE_CONTRACT_PATH = "message-tp-rust.wasm"

SCABBARD_PROTOCOL_VERSION = 1

# ======================================
# DEMO USERS
# ======================================
DEMO_USERS = {
    "alice": {
        "email": "alice@cargill.com",
        "hashedPassword": "a12f5170c30d6d9504e6d1fc64f33b472cb8c69e904b66cb421889a8ff263ade",
        "publicKey": "02685c1048fed717877ac4b9cf90f724c69a770d3c33a54e2e2483cb39beca8e2c",
        "privateKey": "c1e325f8508ee82f6d8c15649a8335549057523575b8cc603bd3f471645c2fad",
    },
    "bob": {
        "email": "bob@cargill.com",
        "hashedPassword": "4b6c8f7a8de9776aeb93e0bf4abf81666864b5b06cdb503b35383b0d02f30af0",
        "publicKey": "0317bd9b540436804fe8c2d0874188c708d9bc3909a03614e9b7b7a8c318de026e",
        "privateKey": "9966b755baccc25e9d8bd9e8cd8a19fcf67953b2636d101e52f4a40473bb1ea7",
    },
}


def get_user(name):
    try:
        return DEMO_USERS[name]
    except KeyError:
        raise UnknownUserError(
            f"Unknown user {name!r}, expected one of {sorted(DEMO_USERS)}"
        ) from None
