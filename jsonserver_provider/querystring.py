from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence, Union

SortSpec = Union[str, Sequence[str], None]


def _filter_values(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, Mapping):
        return [key for key, selected in value.items() if selected]
    return [value]


def render_querystring(
    filters: Optional[Dict[str, Any]] = None,
    sort: SortSpec = None,
    order: Optional[str] = None,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> str:
    """
    Render list parameters as a json-server query string (without the leading '?').

    Args:
        filters: Field name to value. A list/tuple emits one pair per element,
            a mapping emits one pair per key whose value is truthy, anything
            else emits a single pair.
        sort: Field name or sequence of field names, joined with commas.
        order: Sort direction token, e.g. 'asc' or 'desc'.
        offset: Index of the first record. Zero is treated as absent.
        limit: Maximum number of records.

    Values are inserted verbatim; callers needing URL escaping must pre-encode.
    """
    params = []
    for key, value in (filters or {}).items():
        params.extend(f"{key}={val}" for val in _filter_values(value))
    if sort:
        joined = ",".join(sort) if isinstance(sort, (list, tuple)) else sort
        params.append(f"_sort={joined}")
    if order:
        params.append(f"_order={order}")
    # offset=0 is dropped along with None
    if offset:
        params.append(f"_start={offset}")
    if limit:
        params.append(f"_limit={limit}")
    return "&".join(params)
