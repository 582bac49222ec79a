import pytest

from tick_helper.connection import connection_manager, get_web3, set_web3
from tick_helper.exceptions import TickHelperValueError


class DisconnectedWeb3:
    def is_connected(self) -> bool:
        return False


def test_get_web3_without_default():
    with pytest.raises(
        TickHelperValueError, match="A default Web3 instance has not been registered."
    ):
        get_web3()


def test_set_web3(fake_pool_web3):
    set_web3(fake_pool_web3, optimize=False)
    assert get_web3() is fake_pool_web3
    assert connection_manager.get_web3(1) is fake_pool_web3

    with pytest.raises(
        TickHelperValueError, match="Chain ID does not have a registered Web3 instance."
    ):
        connection_manager.get_web3(8453)


def test_disconnected_web3():
    with pytest.raises(TickHelperValueError, match="Web3 instance is not connected."):
        connection_manager.register_web3(DisconnectedWeb3())
