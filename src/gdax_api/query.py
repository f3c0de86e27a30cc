"""Query string encoding.

Array-valued parameters are sent as repeated keys (``status=open&status=pending``),
never as ``status[]=...`` or a JSON-encoded array.
"""

from typing import List, Optional, Tuple
from urllib.parse import urlencode

from .types import QueryParams, Scalar


def _format_scalar(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def query_pairs(params: Optional[QueryParams]) -> List[Tuple[str, str]]:
    """Flatten parameters into ordered (key, value) pairs, dropping None."""
    pairs = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((key, _format_scalar(item)) for item in value if item is not None)
        else:
            pairs.append((key, _format_scalar(value)))
    return pairs


def encode_query(params: Optional[QueryParams]) -> str:
    """Encode parameters as a URL query string without the leading '?'."""
    return urlencode(query_pairs(params))


def build_path(endpoint: str, params: Optional[QueryParams] = None) -> str:
    """Build the request path ``/<endpoint>[?<query>]``."""
    path = f"/{endpoint}"
    query = encode_query(params)
    return f"{path}?{query}" if query else path
