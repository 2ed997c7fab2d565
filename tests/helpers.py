from algosdk import account

TESTNET_GENESIS_ID = "testnet-v1.0"
TESTNET_GENESIS_HASH = "SGO1GKSzyE7IEPItTxCByw9x8FmnrCDexi9/cOUJOiI="


def random_address() -> str:
    """Checksummed address of a freshly generated key."""
    _, address = account.generate_account()
    return address
