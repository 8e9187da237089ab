"""Search statistics and event logging helpers."""

from __future__ import annotations

from collections import deque
from typing import Any, Deque, Dict, List, Tuple

# Rolling history of the last 1000 searches as (duration, expanded, path_len)
_SEARCH_HISTORY_LEN = 1000
_search_history: Deque[Tuple[float, int, int]] = deque(maxlen=_SEARCH_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


def record_search(
    result: Any,
    duration: float,
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Record a finished search ``result`` that took ``duration`` seconds."""

    path, expanded = result
    _search_history.append((duration, expanded, len(path)))
    log_event(
        "search",
        {
            "found": bool(path),
            "path_length": len(path),
            "expanded": expanded,
            "duration": duration,
        },
        log,
    )


def summary() -> Dict[str, Any]:
    """Return aggregate figures over the recorded search history."""

    if not _search_history:
        return {"searches": 0, "avg_duration": 0.0, "avg_expanded": 0.0, "found": 0}
    count = len(_search_history)
    return {
        "searches": count,
        "avg_duration": sum(d for d, _, _ in _search_history) / count,
        "avg_expanded": sum(e for _, e, _ in _search_history) / count,
        "found": sum(1 for _, _, length in _search_history if length),
    }


def reset() -> None:
    _search_history.clear()
    _events.clear()


__all__ = [
    "log_event",
    "record_search",
    "summary",
    "reset",
    "_search_history",
    "_events",
]
