"""
Serialization of paginate state into query parameters.

The param map keeps a fixed key order: ``page``, ``limit``, ``sortBy``,
``search``, ``searchBy``, ``select``, ``cursor``, ``withDeleted`` and then
``filter.<column>`` keys in the order the columns were first filtered.
Multi-valued keys are emitted as repeated ``key=value`` pairs.
"""

from typing import Dict, List, Tuple, Union
from urllib.parse import quote, unquote

from starlette.datastructures import QueryParams

from pagequery.query.state import PaginateState

ParamMap = Dict[str, Union[str, List[str]]]

FILTER_PREFIX = "filter."

# Characters left unescaped by JavaScript's encodeURIComponent
_SAFE_CHARS = "-_.!~*'()"


def encode_component(value: str) -> str:
    """Percent-encode a key or value the way encodeURIComponent does."""
    return quote(str(value), safe=_SAFE_CHARS)


def decode_component(value: str) -> str:
    """Percent-decode a key or value. A literal ``+`` is kept as-is."""
    return unquote(value)


def to_param_map(state: PaginateState) -> ParamMap:
    """
    Convert paginate state into an ordered param map.

    Args:
        state: The abstract parameter set

    Returns:
        Dictionary of parameter names to a string or list of strings
    """
    raw: ParamMap = {}
    if state.page is not None:
        raw["page"] = str(state.page)
    if state.limit is not None:
        raw["limit"] = str(state.limit)
    if state.sort_by:
        raw["sortBy"] = [str(rule) for rule in state.sort_by]
    if state.search:
        raw["search"] = state.search
    if state.search_by:
        raw["searchBy"] = list(state.search_by)
    if state.select:
        select = ",".join(state.select)
        if select:
            raw["select"] = select
    if state.cursor:
        raw["cursor"] = state.cursor
    if state.with_deleted is True:
        raw["withDeleted"] = "true"
    for column, tokens in state.filters.items():
        if not tokens:
            continue
        raw[f"{FILTER_PREFIX}{column}"] = tokens[0] if len(tokens) == 1 else list(tokens)
    return raw


def to_pairs(param_map: ParamMap) -> List[Tuple[str, str]]:
    """
    Flatten a param map into ordered ``(key, value)`` pairs.

    Lists become repeated keys; None and empty values are skipped. The
    result can be passed as ``params=`` to httpx or requests.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in param_map.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        for item in values:
            if item is None or item == "":
                continue
            pairs.append((key, str(item)))
    return pairs


def to_query_string(param_map: ParamMap) -> str:
    """
    Serialize a param map to a query string.

    Returns:
        ``?key=value&...`` with percent-encoded keys and values, or an
        empty string when there is nothing to send
    """
    encoded = [
        f"{encode_component(key)}={encode_component(value)}"
        for key, value in to_pairs(param_map)
    ]
    return f"?{'&'.join(encoded)}" if encoded else ""


def to_search_params(param_map: ParamMap) -> QueryParams:
    """
    Build an ordered, immutable multi-map of the params.

    Repeated keys are preserved; use ``getlist`` or ``multi_items`` to read them.
    """
    return QueryParams(to_pairs(param_map))
