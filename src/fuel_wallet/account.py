"""Main Account interface for the Fuel wallet SDK."""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from .core.amount import AmountLike, to_amount, to_u64
from .core.config import WalletConfig
from .core.exceptions import ProviderNotSetError
from .core.quantities import CoinQuantityLike
from .core.types import (
    BASE_ASSET_ID,
    CallResult,
    Coin,
    CoinQuantity,
    Message,
    Resource,
    TransactionResponse,
    TxParams,
    normalize_b256,
)
from .provider.base import Provider
from .resources.catalog import ResourceCatalog
from .resources.selector import ExcludedLike, ResourceSelector
from .transactions.funder import TransactionFunder
from .transactions.request import (
    ScriptTransactionRequest,
    build_withdraw_script_data,
    transaction_requestify,
)

logger = logging.getLogger(__name__)

TransactionRequestLike = Union[ScriptTransactionRequest, Mapping[str, Any]]
TxParamsLike = Union[TxParams, Mapping[str, Any], None]


class Account:
    """
    An address, optionally bound to a provider.

    Account queries the resources and balances of its address and funds,
    sends and simulates transactions through the bound provider.

    Example:
        ```python
        async def transfer_example():
            config = WalletConfig.local()

            async with JsonRpcProvider(config) as provider:
                account = Account("0xYourAddress", provider, config)

                response = await account.transfer(
                    destination="0xRecipientAddress",
                    amount=1_000,
                )
                print(f"Submitted {response.id}")
        ```

    Every network operation reads the provider once when it starts, so
    rebinding the provider affects later calls only.
    """

    def __init__(
        self,
        address: str,
        provider: Optional[Provider] = None,
        config: Optional[WalletConfig] = None
    ):
        """
        Initialize an Account.

        Args:
            address: The account's 32-byte address
            provider: Network access point (may be set later)
            config: Wallet configuration (defaults to the local node config)

        Raises:
            ValidationError: If the address is invalid
        """
        self._address = normalize_b256(address, "address")
        self._provider = provider
        self.config = config or WalletConfig.local()

        logger.info(f"Initialized Account for {self._address}")

    @property
    def address(self) -> str:
        return self._address

    @property
    def provider(self) -> Optional[Provider]:
        return self._provider

    @provider.setter
    def provider(self, provider: Optional[Provider]) -> None:
        self._provider = provider

    def connect(self, provider: Provider) -> Provider:
        """Bind the account to another provider."""
        self._provider = provider
        return provider

    async def get_resources_to_spend(
        self,
        quantities: Iterable[CoinQuantityLike],
        excluded: ExcludedLike = None
    ) -> List[Resource]:
        """
        Get resources of this account covering the given quantities.

        Args:
            quantities: Required amounts per asset; fractional amounts round up
            excluded: Coin ids (``utxos``) and message nonces (``messages``) to skip

        Returns:
            Coins and messages whose totals cover every quantity

        Raises:
            ProviderNotSetError: If no provider is bound
            ResourceLimitExceededError: If the provider returned too many records
            InsufficientFundsError: If the account cannot cover the quantities
        """
        provider = self._require_provider()
        return await self._selector(provider).get_resources_to_spend(self._address, quantities, excluded)

    async def get_coins(self, asset_id: Optional[str] = None) -> List[Coin]:
        """Get all coins of this account, optionally for a single asset."""
        provider = self._require_provider()
        if asset_id is not None:
            asset_id = normalize_b256(asset_id, "asset_id")
        return await ResourceCatalog(provider).list_coins(self._address, asset_id)

    async def get_messages(self) -> List[Message]:
        """Get all messages spendable by this account."""
        provider = self._require_provider()
        return await ResourceCatalog(provider).list_messages(self._address)

    async def get_balance(self, asset_id: str = BASE_ASSET_ID) -> int:
        """
        Get the balance of a single asset.

        Returns:
            The balance, or 0 if the account holds none of the asset

        Raises:
            ResourceLimitExceededError: If the account holds more than 9999 assets,
                since the balance is read from the full balance listing
        """
        provider = self._require_provider()
        asset_id = normalize_b256(asset_id, "asset_id")
        balances = await ResourceCatalog(provider).list_balances(self._address)
        for balance in balances:
            if balance.asset_id == asset_id:
                return balance.amount
        return 0

    async def get_balances(self) -> List[CoinQuantity]:
        """Get the balances of all assets held by this account."""
        provider = self._require_provider()
        return await ResourceCatalog(provider).list_balances(self._address)

    async def fund(
        self,
        request: ScriptTransactionRequest,
        quantities: Iterable[CoinQuantityLike],
        fee: AmountLike,
        provider: Optional[Provider] = None
    ) -> None:
        """
        Add resources to ``request`` covering ``quantities`` plus ``fee``.

        Args:
            request: Request to fund; mutated in place
            quantities: Amounts the request must cover
            fee: Fee charged in the base asset
            provider: Provider to use instead of the bound one

        Raises:
            ProviderNotSetError: If no provider is bound
            InsufficientFundsError: If the account cannot cover the request
        """
        provider = provider if provider is not None else self._require_provider()
        funder = TransactionFunder(self._address, self._selector(provider))
        await funder.fund(request, quantities, fee)

    async def transfer(
        self,
        destination: str,
        amount: AmountLike,
        asset_id: str = BASE_ASSET_ID,
        tx_params: TxParamsLike = None
    ) -> TransactionResponse:
        """
        Transfer an amount of an asset to another address.

        The request is quoted, funded with the quoted required quantities and
        maximum fee, then sent.

        Args:
            destination: Recipient address
            amount: Amount to transfer; fractional amounts round up
            asset_id: Asset to transfer (defaults to the base asset)
            tx_params: Optional gas limit, gas price and maturity overrides

        Returns:
            Response of the dispatched transaction

        Raises:
            InvalidAmountError: If the amount is invalid
            ProviderNotSetError: If no provider is bound
            InsufficientFundsError: If the account cannot cover the transfer
        """
        amount = to_amount(amount)
        destination = normalize_b256(destination, "destination")
        asset_id = normalize_b256(asset_id, "asset_id")
        params = self._tx_params(tx_params)
        provider = self._require_provider()

        logger.info(f"Starting transfer: {self._address} -> {destination}, amount: {amount} of {asset_id}")

        try:
            request = self._new_request(params)
            request.add_coin_output(destination, amount, asset_id)

            cost = await provider.quote_transaction_cost(request)
            await self.fund(request, cost.required_quantities, cost.max_fee, provider=provider)
            response = await self.send_transaction(request, provider=provider)

            logger.info(f"Transfer submitted: {response.id}")
            return response

        except Exception as e:
            logger.error(f"Transfer failed: {e}")
            raise

    async def withdraw_to_base_layer(
        self,
        recipient: str,
        amount: AmountLike,
        tx_params: TxParamsLike = None
    ) -> TransactionResponse:
        """
        Withdraw base asset to an address on the base layer.

        Args:
            recipient: Base-layer recipient address
            amount: Amount of base asset to withdraw (must fit in a u64)
            tx_params: Optional gas limit, gas price and maturity overrides

        Returns:
            Response of the dispatched transaction

        Raises:
            InvalidAmountError: If the amount is invalid or exceeds the u64 range
            ProviderNotSetError: If no provider is bound
            InsufficientFundsError: If the account cannot cover the withdrawal
        """
        amount = to_u64(amount)
        recipient = normalize_b256(recipient, "recipient")
        params = self._tx_params(tx_params)
        provider = self._require_provider()

        logger.info(f"Starting withdrawal: {self._address} -> {recipient}, amount: {amount}")

        try:
            request = self._new_request(
                params,
                script=self.config.withdraw_script,
                script_data=build_withdraw_script_data(recipient, amount)
            )
            forwarding_quantities = [CoinQuantity(asset_id=BASE_ASSET_ID, amount=amount)]

            cost = await provider.quote_transaction_cost(request, forwarding_quantities)
            await self.fund(request, cost.required_quantities, cost.max_fee, provider=provider)
            response = await self.send_transaction(request, provider=provider)

            logger.info(f"Withdrawal submitted: {response.id}")
            return response

        except Exception as e:
            logger.error(f"Withdrawal failed: {e}")
            raise

    async def send_transaction(
        self,
        request_like: TransactionRequestLike,
        provider: Optional[Provider] = None
    ) -> TransactionResponse:
        """
        Prepare and dispatch a transaction request.

        Subclasses that sign transactions override this method; ``transfer``
        and ``withdraw_to_base_layer`` dispatch through it.

        Args:
            request_like: A request or a mapping describing one
            provider: Provider to use instead of the bound one

        Returns:
            Response of the dispatched transaction
        """
        provider = provider if provider is not None else self._require_provider()
        request = transaction_requestify(request_like)
        await provider.estimate_transaction_dependencies(request)
        return await provider.dispatch(request)

    async def simulate_transaction(self, request_like: TransactionRequestLike) -> CallResult:
        """
        Prepare a transaction request and execute it without committing.

        Args:
            request_like: A request or a mapping describing one

        Returns:
            Receipts of the simulated execution
        """
        provider = self._require_provider()
        request = transaction_requestify(request_like)
        await provider.estimate_transaction_dependencies(request)
        return await provider.simulate(request)

    def _selector(self, provider: Provider) -> ResourceSelector:
        return ResourceSelector(ResourceCatalog(provider))

    def _new_request(
        self,
        params: TxParams,
        script: bytes = b"",
        script_data: bytes = b""
    ) -> ScriptTransactionRequest:
        return ScriptTransactionRequest.from_params(
            params,
            gas_limit=self.config.max_gas_per_tx,
            gas_price=self.config.default_gas_price,
            script=script,
            script_data=script_data
        )

    @staticmethod
    def _tx_params(tx_params: TxParamsLike) -> TxParams:
        if tx_params is None:
            return TxParams()
        if isinstance(tx_params, TxParams):
            return tx_params
        return TxParams(**tx_params)

    def _require_provider(self) -> Provider:
        """Return the bound provider or fail fast."""
        if self._provider is None:
            raise ProviderNotSetError()
        return self._provider

    def __repr__(self) -> str:
        status = "connected" if self._provider is not None else "disconnected"
        return f"Account(address='{self._address}', status='{status}')"
