from __future__ import annotations

from ..core.models import TaskId


def coerce_task_id(raw: object) -> TaskId:
    """Accept ints and numeric strings (ids typed on the console); reject the rest."""
    if isinstance(raw, bool):
        raise ValueError(f"invalid task id: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str) and raw.strip().lstrip("-").isdigit():
        return int(raw.strip())
    raise ValueError(f"invalid task id: {raw!r}")
