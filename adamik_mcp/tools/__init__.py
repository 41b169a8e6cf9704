"""LLM-facing tool implementations."""

from .guide import read_me_first
from .chains import get_supported_chains, list_features, get_token_details, get_chain_validators
from .account import get_account_state, get_account_history, derive_address
from .transactions import get_transaction_details, encode_transaction, broadcast_transaction
from .specification import ApiSpecCache, default_spec_cache, get_api_specification
from .generic import call_adamik_api
from . import validators

__all__ = [
    "read_me_first",
    "get_supported_chains",
    "list_features",
    "get_token_details",
    "get_chain_validators",
    "get_account_state",
    "get_account_history",
    "derive_address",
    "get_transaction_details",
    "encode_transaction",
    "broadcast_transaction",
    "ApiSpecCache",
    "default_spec_cache",
    "get_api_specification",
    "call_adamik_api",
    "validators",
]
