# src/todo_controller/core/render.py

from __future__ import annotations

from typing import Any

from .events import RenderInstruction
from .models import TaskCounts

RenderCall = tuple[RenderInstruction, Any]


def content_block_visibility(counts: TaskCounts) -> dict[str, bool]:
    return {"visible": counts.total > 0}


def toggle_all_state(counts: TaskCounts) -> dict[str, bool]:
    # An empty list is never "all completed".
    return {"checked": counts.total > 0 and counts.active == 0}


def clear_completed_button(counts: TaskCounts) -> dict[str, Any]:
    return {"completed": counts.completed, "visible": counts.completed > 0}


def count_projections(counts: TaskCounts) -> list[RenderCall]:
    """
    Everything the view derives from the global counters, in render order.

    Counts always cover the whole collection, regardless of the active filter.
    """
    return [
        (RenderInstruction.UPDATE_ELEMENT_COUNT, counts.active),
        (RenderInstruction.CONTENT_BLOCK_VISIBILITY, content_block_visibility(counts)),
        (RenderInstruction.TOGGLE_ALL, toggle_all_state(counts)),
        (RenderInstruction.CLEAR_COMPLETED_BUTTON, clear_completed_button(counts)),
    ]
