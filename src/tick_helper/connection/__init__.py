from web3 import Web3

from .connection_manager import ConnectionManager


def get_web3() -> Web3:
    return connection_manager.get_web3(chain_id=connection_manager.default_chain_id)


def set_web3(
    w3: Web3,
    *,
    optimize: bool = True,
) -> None:
    connection_manager.register_web3(w3, optimize=optimize)
    connection_manager.set_default_chain(w3.eth.chain_id)


connection_manager = ConnectionManager()


__all__ = (
    "connection_manager",
    "get_web3",
    "set_web3",
)
