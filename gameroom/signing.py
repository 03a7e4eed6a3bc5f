import hashlib

from sawtooth_signing import CryptoFactory, create_context
from sawtooth_signing.secp256k1 import Secp256k1PrivateKey, Secp256k1PublicKey

CONTEXT = create_context("secp256k1")


def new_signer(private_key_hex):
    private_key = Secp256k1PrivateKey.from_hex(private_key_hex)
    return CryptoFactory(CONTEXT).new_signer(private_key)


def new_random_signer():
    return CryptoFactory(CONTEXT).new_signer(CONTEXT.new_random_private_key())


def signer_for_user(user):
    """Signer for one of the config.DEMO_USERS entries."""
    return new_signer(user["privateKey"])


def verify(signature, message, public_key_hex):
    public_key = Secp256k1PublicKey.from_hex(public_key_hex)
    return CONTEXT.verify(signature, message, public_key)


def hash_password(salt, password):
    return hashlib.sha256((salt + password).encode()).hexdigest()


def to_hex(text):
    return "".join(format(ord(c), "x") for c in text)
