"""Transaction request building for the Fuel wallet SDK.

The funder lives in ``fuel_wallet.transactions.funder``; it depends on
resource selection and is not re-exported here.
"""

from .request import (
    TransactionType,
    ScriptTransactionRequest,
    CoinInput,
    MessageInput,
    CoinOutput,
    ChangeOutput,
    transaction_requestify,
    build_withdraw_script_data,
)

__all__ = [
    "TransactionType",
    "ScriptTransactionRequest",
    "CoinInput",
    "MessageInput",
    "CoinOutput",
    "ChangeOutput",
    "transaction_requestify",
    "build_withdraw_script_data",
]
