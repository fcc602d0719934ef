"""Application state for the task board and the pure transitions over it.

``reduce`` never mutates its input; every transition returns a new
``AppState``. Handlers are looked up by ``ActionType`` so each transition
can be exercised without a network or a renderer.
"""
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Optional, Sequence, Tuple

from ..schemas import TaskOut

LOAD_FAILED = "Failed to load tasks"
CREATE_FAILED = "Failed to create task"
UPDATE_FAILED = "Failed to update task"
DELETE_FAILED = "Failed to delete task"
STATUS_FAILED = "Failed to update task status"


@dataclass(frozen=True)
class AppState:
    tasks: Tuple[TaskOut, ...] = ()
    loading: bool = True
    error: Optional[str] = None
    form_visible: bool = False
    editing: Optional[TaskOut] = None


class ActionType(str, Enum):
    LOAD_STARTED = "load_started"
    LOAD_SUCCEEDED = "load_succeeded"
    LOAD_FAILED = "load_failed"
    TASK_CREATED = "task_created"
    TASK_SAVED = "task_saved"
    TASK_UPDATED = "task_updated"
    TASK_DELETED = "task_deleted"
    REQUEST_FAILED = "request_failed"
    FORM_OPENED = "form_opened"
    FORM_CLOSED = "form_closed"


@dataclass(frozen=True)
class Action:
    type: ActionType
    task: Optional[TaskOut] = None
    tasks: Sequence[TaskOut] = ()
    task_id: Optional[int] = None
    message: Optional[str] = None


def _replace_task(tasks: Tuple[TaskOut, ...], updated: TaskOut) -> Tuple[TaskOut, ...]:
    return tuple(updated if t.id == updated.id else t for t in tasks)


def _load_started(state: AppState, action: Action) -> AppState:
    return replace(state, loading=True)


def _load_succeeded(state: AppState, action: Action) -> AppState:
    return replace(state, tasks=tuple(action.tasks), loading=False)


def _load_failed(state: AppState, action: Action) -> AppState:
    return replace(state, loading=False, error=action.message or LOAD_FAILED)


def _task_created(state: AppState, action: Action) -> AppState:
    return replace(state, tasks=(action.task,) + state.tasks, form_visible=False)


def _task_saved(state: AppState, action: Action) -> AppState:
    return replace(
        state,
        tasks=_replace_task(state.tasks, action.task),
        form_visible=False,
        editing=None,
    )


def _task_updated(state: AppState, action: Action) -> AppState:
    return replace(state, tasks=_replace_task(state.tasks, action.task))


def _task_deleted(state: AppState, action: Action) -> AppState:
    return replace(state, tasks=tuple(t for t in state.tasks if t.id != action.task_id))


def _request_failed(state: AppState, action: Action) -> AppState:
    # the form is left as it was so the user can retry
    return replace(state, error=action.message)


def _form_opened(state: AppState, action: Action) -> AppState:
    return replace(state, form_visible=True, editing=action.task)


def _form_closed(state: AppState, action: Action) -> AppState:
    return replace(state, form_visible=False, editing=None)


_HANDLERS: Dict[ActionType, Callable[[AppState, Action], AppState]] = {
    ActionType.LOAD_STARTED: _load_started,
    ActionType.LOAD_SUCCEEDED: _load_succeeded,
    ActionType.LOAD_FAILED: _load_failed,
    ActionType.TASK_CREATED: _task_created,
    ActionType.TASK_SAVED: _task_saved,
    ActionType.TASK_UPDATED: _task_updated,
    ActionType.TASK_DELETED: _task_deleted,
    ActionType.REQUEST_FAILED: _request_failed,
    ActionType.FORM_OPENED: _form_opened,
    ActionType.FORM_CLOSED: _form_closed,
}


def reduce(state: AppState, action: Action) -> AppState:
    return _HANDLERS[action.type](state, action)
