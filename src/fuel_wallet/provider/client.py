"""JSON-RPC provider client for Fuel nodes."""

import asyncio
import logging
from typing import Optional, Any, List

import aiohttp
from aiohttp import ClientTimeout, ClientError

from .. import __version__
from ..core.config import WalletConfig
from ..core.types import (
    CallResult,
    Coin,
    CoinQuantity,
    ExcludedResources,
    Message,
    Resource,
    RPCRequest,
    RPCResponse,
    TransactionCost,
    TransactionResponse,
    parse_resource,
)
from ..core.exceptions import (
    InsufficientFundsError,
    RPCError,
    NetworkError,
    TimeoutError as SDKTimeoutError,
    RateLimitError
)
from ..transactions.request import ScriptTransactionRequest
from .base import Provider

logger = logging.getLogger(__name__)

INSUFFICIENT_FUNDS_CODE = -32010


class JsonRpcProvider(Provider):
    """Async JSON-RPC client implementing the Provider contract."""

    def __init__(self, config: WalletConfig):
        """Initialize the provider client.

        Args:
            config: Wallet configuration containing the node URL and retry settings
        """
        self.config = config
        self.session: Optional[aiohttp.ClientSession] = None
        self._closed = False

    async def __aenter__(self):
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self):
        """Ensure aiohttp session is created."""
        if self.session is None or self.session.closed:
            timeout = ClientTimeout(total=self.config.request_timeout)
            self.session = aiohttp.ClientSession(
                timeout=timeout,
                headers={
                    'Content-Type': 'application/json',
                    'User-Agent': f'Fuel-Wallet-Python-SDK/{__version__}'
                }
            )

    async def close(self):
        """Close the HTTP session."""
        if self.session and not self.session.closed:
            await self.session.close()
        self._closed = True

    async def _make_rpc_call(
        self,
        method: str,
        params: list,
        timeout: Optional[float] = None
    ) -> Any:
        """Make a JSON-RPC call with retry logic.

        Args:
            method: RPC method name
            params: RPC parameters
            timeout: Request timeout override

        Returns:
            RPC result data

        Raises:
            RPCError: RPC call failed
            InsufficientFundsError: Node reported that resources do not cover the request
            NetworkError: Network connectivity issues
            TimeoutError: Request timed out
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        await self._ensure_session()

        request = RPCRequest(
            method=method,
            params=params
        )

        last_exception = None

        for attempt in range(self.config.max_retries + 1):
            try:
                logger.debug(f"RPC call attempt {attempt + 1}: {method}")

                async with self.session.post(
                    self.config.provider_url,
                    json=request.model_dump(),
                    timeout=ClientTimeout(total=timeout or self.config.request_timeout)
                ) as response:

                    if response.status == 429:
                        retry_after = int(response.headers.get('Retry-After', 60))
                        raise RateLimitError(
                            "Rate limit exceeded",
                            retry_after=retry_after,
                            details={'status_code': response.status}
                        )

                    if response.status >= 400:
                        error_text = await response.text()
                        raise RPCError(
                            f"HTTP {response.status}: {error_text}",
                            method=method,
                            status_code=response.status,
                            response_data=error_text
                        )

                    try:
                        json_data = await response.json()
                    except Exception as e:
                        raise RPCError(
                            f"Failed to parse JSON response: {e}",
                            method=method,
                            status_code=response.status
                        )

                    try:
                        rpc_response = RPCResponse(**json_data)
                    except Exception as e:
                        raise RPCError(
                            f"Invalid RPC response format: {e}",
                            method=method,
                            response_data=json_data
                        )

                    if rpc_response.error:
                        error = rpc_response.error
                        error_code = error.get('code', -1)
                        error_message = error.get('message', 'Unknown RPC error')

                        if error_code == INSUFFICIENT_FUNDS_CODE:
                            raise InsufficientFundsError(
                                error_message,
                                details={'rpc_error': error}
                            )
                        raise RPCError(
                            f"RPC error {error_code}: {error_message}",
                            method=method,
                            response_data=error
                        )

                    return rpc_response.result

            except (ClientError, asyncio.TimeoutError) as e:
                last_exception = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2 ** attempt)  # Exponential backoff
                    logger.warning(f"RPC call failed, retrying in {delay}s: {e}")
                    await asyncio.sleep(delay)
                    continue
                break

        if isinstance(last_exception, asyncio.TimeoutError):
            raise SDKTimeoutError(
                f"RPC call timed out after {self.config.max_retries + 1} attempts",
                timeout_duration=self.config.request_timeout
            )
        raise NetworkError(
            f"Network error after {self.config.max_retries + 1} attempts: {last_exception}"
        )

    async def list_coins(self, address: str, asset_id: Optional[str] = None) -> List[Coin]:
        params = {'owner': address}
        if asset_id is not None:
            params['assetId'] = asset_id

        result = await self._make_rpc_call('fuel_getCoins', [params])
        return [Coin(**{**item, 'kind': 'coin'}) for item in result or []]

    async def list_messages(self, address: str) -> List[Message]:
        result = await self._make_rpc_call('fuel_getMessages', [{'owner': address}])
        return [Message(**{**item, 'kind': 'message'}) for item in result or []]

    async def list_balances(self, address: str) -> List[CoinQuantity]:
        result = await self._make_rpc_call('fuel_getBalances', [{'owner': address}])
        return [CoinQuantity(**item) for item in result or []]

    async def query_spendable_resources(
        self,
        address: str,
        required_quantities: List[CoinQuantity],
        excluded: ExcludedResources
    ) -> List[Resource]:
        params = {
            'owner': address,
            'queryPerAsset': [
                {'assetId': q.asset_id, 'amount': str(q.amount)} for q in required_quantities
            ],
            'excludedIds': {'utxos': excluded.utxos, 'messages': excluded.messages},
        }

        result = await self._make_rpc_call('fuel_getResourcesToSpend', [params])
        # The node answers with one list per requested asset
        return [parse_resource(item) for group in result or [] for item in group]

    async def quote_transaction_cost(
        self,
        request: ScriptTransactionRequest,
        forwarding_quantities: Optional[List[CoinQuantity]] = None
    ) -> TransactionCost:
        params = {'transaction': request.to_dict()}
        if forwarding_quantities:
            params['forwardingQuantities'] = [
                {'assetId': q.asset_id, 'amount': str(q.amount)} for q in forwarding_quantities
            ]

        result = await self._make_rpc_call('fuel_getTransactionCost', [params])
        return TransactionCost(**result)

    async def estimate_transaction_dependencies(self, request: ScriptTransactionRequest) -> None:
        result = await self._make_rpc_call(
            'fuel_estimateTxDependencies',
            [{'transaction': request.to_dict()}]
        )
        if not result:
            return

        # The node may extend the script with extra inputs and outputs it depends on
        updated = ScriptTransactionRequest.from_dict(result)
        request.inputs = updated.inputs
        request.outputs = updated.outputs
        request.gas_limit = updated.gas_limit

    async def dispatch(self, request: ScriptTransactionRequest) -> TransactionResponse:
        result = await self._make_rpc_call('fuel_submit', [{'transaction': request.to_dict()}])
        if isinstance(result, str):
            return TransactionResponse(id=result)
        return TransactionResponse(**result)

    async def simulate(self, request: ScriptTransactionRequest) -> CallResult:
        result = await self._make_rpc_call('fuel_dryRun', [{'transaction': request.to_dict()}])
        return CallResult(receipts=result.get('receipts', []) if result else [])

    async def health_check(self) -> bool:
        """Check if the node is reachable.

        Returns:
            True if the node answered, False otherwise
        """
        try:
            await self._make_rpc_call(
                'fuel_health',
                [],
                timeout=5.0
            )
            return True
        except Exception as e:
            logger.warning(f"Provider health check failed: {e}")
            return False
