# src/todo_controller/core/events.py

"""
User-originated events and render instructions.

Both sets are closed: the view can only emit a ViewEvent member with its
matching payload dataclass, and the controller can only ask the view to apply
a RenderInstruction member. Enum values are the wire names the view knows.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .models import TaskId


class ViewEvent(StrEnum):
    NEW_TODO = "newTodo"
    ITEM_REMOVE = "itemRemove"
    ITEM_TOGGLE = "itemToggle"
    TOGGLE_ALL = "toggleAll"
    ITEM_EDIT = "itemEdit"
    ITEM_EDIT_DONE = "itemEditDone"
    ITEM_EDIT_CANCEL = "itemEditCancel"
    REMOVE_COMPLETED = "removeCompleted"


class RenderInstruction(StrEnum):
    SHOW_ENTRIES = "showEntries"
    REMOVE_ITEM = "removeItem"
    UPDATE_ELEMENT_COUNT = "updateElementCount"
    CLEAR_COMPLETED_BUTTON = "clearCompletedButton"
    TOGGLE_ALL = "toggleAll"
    CONTENT_BLOCK_VISIBILITY = "contentBlockVisibility"
    SET_FILTER = "setFilter"
    ELEMENT_COMPLETE = "elementComplete"
    EDIT_ITEM = "editItem"
    EDIT_ITEM_DONE = "editItemDone"
    CLEAR_NEW_TODO = "clearNewTodo"


@dataclass(slots=True, frozen=True)
class NewTodo:
    title: str


@dataclass(slots=True, frozen=True)
class ItemRemove:
    id: TaskId


@dataclass(slots=True, frozen=True)
class ItemToggle:
    id: TaskId
    completed: bool


@dataclass(slots=True, frozen=True)
class ToggleAll:
    completed: bool


@dataclass(slots=True, frozen=True)
class ItemEdit:
    id: TaskId


@dataclass(slots=True, frozen=True)
class ItemEditDone:
    id: TaskId
    title: str


@dataclass(slots=True, frozen=True)
class ItemEditCancel:
    id: TaskId


@dataclass(slots=True, frozen=True)
class RemoveCompleted:
    pass


EventPayload = (
    NewTodo
    | ItemRemove
    | ItemToggle
    | ToggleAll
    | ItemEdit
    | ItemEditDone
    | ItemEditCancel
    | RemoveCompleted
)

PAYLOAD_TYPES: dict[ViewEvent, type] = {
    ViewEvent.NEW_TODO: NewTodo,
    ViewEvent.ITEM_REMOVE: ItemRemove,
    ViewEvent.ITEM_TOGGLE: ItemToggle,
    ViewEvent.TOGGLE_ALL: ToggleAll,
    ViewEvent.ITEM_EDIT: ItemEdit,
    ViewEvent.ITEM_EDIT_DONE: ItemEditDone,
    ViewEvent.ITEM_EDIT_CANCEL: ItemEditCancel,
    ViewEvent.REMOVE_COMPLETED: RemoveCompleted,
}
