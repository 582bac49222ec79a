from json import JSONDecodeError
from typing import TYPE_CHECKING, cast

import tenacity
from ujson import loads as ujson_loads
from web3 import JSONBaseProvider, Web3
from web3.types import RPCResponse

from tick_helper.exceptions import TickHelperValueError
from tick_helper.logging import logger
from tick_helper.types.aliases import ChainId


def _fast_decode_rpc_response(raw_response: bytes) -> RPCResponse:
    """
    Decode the JSON-RPC response using ujson.
    """

    try:
        return cast("RPCResponse", ujson_loads(raw_response))
    except ValueError:
        # Re-raise as a dummy JSONDecodeError so web3py's exception handling works as intended.
        msg = "JSON failure"
        raise JSONDecodeError(msg, "[]", 0) from None


def optimize_web3(w3: Web3) -> None:
    """
    Remove all middleware and monkey-patch the JSON decoding for RPC responses.
    """

    w3.middleware_onion.clear()
    if TYPE_CHECKING:
        assert isinstance(w3.provider, JSONBaseProvider)
    w3.provider.decode_rpc_response = _fast_decode_rpc_response  # type:ignore[method-assign]


class ConnectionManager:
    def __init__(self) -> None:
        self.connections: dict[ChainId, Web3] = {}
        self._default_chain_id: ChainId | None = None

    def get_web3(self, chain_id: ChainId) -> Web3:
        try:
            return self.connections[chain_id]
        except KeyError:
            raise TickHelperValueError(
                message="Chain ID does not have a registered Web3 instance."
            ) from None

    def register_web3(
        self,
        w3: Web3,
        *,
        optimize: bool = True,
    ) -> None:
        w3_connected_check_with_retry = tenacity.Retrying(
            stop=tenacity.stop_after_delay(10),
            wait=tenacity.wait_exponential_jitter(),
            retry=tenacity.retry_if_result(lambda result: result is False),
        )
        try:
            w3_connected_check_with_retry(fn=w3.is_connected)
        except tenacity.RetryError as exc:
            raise TickHelperValueError(message="Web3 instance is not connected.") from exc

        if optimize:
            optimize_web3(w3)

        chain_id = w3.eth.chain_id
        self.connections[chain_id] = w3
        logger.debug(f"Registered Web3 instance for chain ID {chain_id}")

    def set_default_chain(self, chain_id: ChainId) -> None:
        self._default_chain_id = chain_id

    @property
    def default_chain_id(self) -> ChainId:
        if self._default_chain_id is None:
            raise TickHelperValueError(message="A default Web3 instance has not been registered.")
        return self._default_chain_id
