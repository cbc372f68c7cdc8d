"""
Request parameter construction for SQS query actions.
"""
import time
from typing import Any, Dict, Iterable, Mapping, Optional

API_VERSION = "2011-10-01"
TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def build(action: str, fields: Optional[Mapping[str, Any]] = None) -> Dict[str, str]:
    """
    Build the parameter map for one SQS action.

    Args:
        action: Action name (e.g. 'CreateQueue')
        fields: Action-specific fields; values are converted to strings

    Returns:
        Parameter map seeded with Action, Version and Timestamp
    """
    params = {
        "Action": action,
        "Version": API_VERSION,
        "Timestamp": time.strftime(TIMESTAMP_FORMAT, time.gmtime()),
    }
    for name, value in (fields or {}).items():
        params[name] = str(value)
    return params


def add_batch_entries(
    params: Dict[str, str],
    entry_kind: str,
    entries: Iterable[Mapping[str, Any]]
) -> Dict[str, str]:
    """
    Expand batch entries into indexed parameters.

    Entry N (1-based) becomes '<entry_kind>.<N>.<Field>' for each field, plus
    a synthesized '<entry_kind>.<N>.Id' of 'msg-<N>'. An empty iterable adds
    nothing.

    Args:
        params: Parameter map to extend in place
        entry_kind: Entry prefix (e.g. 'SendMessageBatchRequestEntry')
        entries: One mapping of field name to value per entry

    Returns:
        The same parameter map
    """
    for count, entry in enumerate(entries, start=1):
        params[f"{entry_kind}.{count}.Id"] = f"msg-{count}"
        for field, value in entry.items():
            params[f"{entry_kind}.{count}.{field}"] = str(value)
    return params
