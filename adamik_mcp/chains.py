"""Default chain allow-list.

The full list of chains served by Adamik is documented at
https://docs.adamik.io/api-reference/chain/get-chain-details; override the
enabled subset with ADAMIK_SUPPORTED_CHAINS (comma separated).
"""

DEFAULT_SUPPORTED_CHAINS = (
    "ethereum",
    "bitcoin",
    "babylon",
    "starknet",
    "aptos",
    "sepolia",
    "holesky",
    "optimism",
    "optimism-sepolia",
    "bnb",
)
