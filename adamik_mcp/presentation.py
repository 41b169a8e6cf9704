"""Rendering hints attached to raw API payloads for the consuming agent."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple


def _tabular() -> Dict[str, Any]:
    return {
        "style": "tabular",
        "title": "Wallet Balance",
        "description": "Present this as a nicely formatted table with token symbols and values.",
        "highlights": ["totalValueUsd"],
        "format": "Token balances should always show 4 decimal places for crypto assets.",
        "sorting": "Sort tokens by value (highest first).",
    }


def _list() -> Dict[str, Any]:
    return {
        "style": "list",
        "title": "Transaction History",
        "description": "Present as a chronological list with the most recent transactions first.",
        "timeFormat": "Convert timestamps to local readable time (e.g., 'June 1, 2023 at 2:30 PM').",
        "highlights": ["recent"],
        "grouping": "Group by day for better readability.",
    }


def _summary() -> Dict[str, Any]:
    return {
        "style": "summary",
        "title": "Staking Rewards",
        "highlights": ["totalRewards", "annualPercentageRate"],
        "charts": ["rewards_over_time"],
        "recommendations": True,
    }


def _profile() -> Dict[str, Any]:
    return {
        "style": "profile",
        "title": "Validator Profile",
        "highlights": ["commission", "uptime", "votingPower"],
        "showRank": True,
        "metrics": "Show performance metrics prominently",
    }


def _default() -> Dict[str, Any]:
    return {"style": "default", "highlights": []}


# First match wins.
PATH_PATTERNS: List[Tuple[str, Callable[[], Dict[str, Any]]]] = [
    ("/balances", _tabular),
    ("/transactions", _list),
    ("/rewards", _summary),
    ("/validator", _profile),
]


def presentation_for(path: str) -> Dict[str, Any]:
    for marker, build in PATH_PATTERNS:
        if marker in path:
            return build()
    return _default()


def annotate(path: str, data: Any) -> Dict[str, Any]:
    """
    Wrap ``data`` with presentation guidance derived from the endpoint path.

    Args:
        path: Endpoint path the data was fetched from.
        data: Raw payload, returned untouched under ``data``.

    Returns:
        ``{"data": data, "presentation": {...}}``.
    """
    return {"data": data, "presentation": presentation_for(path)}
