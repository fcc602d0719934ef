import logging
from typing import Callable, List, Optional

import httpx

from ..schemas import TaskCreate, TaskOut, TaskStatus
from . import state as st
from .api import TaskApiClient
from .state import Action, ActionType, AppState

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Are you sure you want to delete this task?"

# a non-JSON body or an unexpected payload surfaces as ValueError
REQUEST_ERRORS = (httpx.HTTPError, ValueError)

Listener = Callable[[AppState], None]


def ask_confirmation(prompt: str) -> bool:
    return input(f"{prompt} [y/N] ").strip().lower() == "y"


class TaskBoardController:
    """
    Owns the board's AppState and turns user intents into API calls.

    Every request failure becomes a fixed banner message in ``state.error``;
    the underlying exception is only logged. Actions are not de-duplicated,
    so a double-clicked delete sends two requests.
    """

    def __init__(self, api: TaskApiClient, confirm: Optional[Callable[[str], bool]] = None):
        self.api = api
        self.confirm = confirm or ask_confirmation
        self.state = AppState()
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        self.state = st.reduce(self.state, action)
        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def _fail(self, message: str, exc: Exception) -> None:
        logger.error("%s: %s", message, exc, exc_info=exc)
        self.dispatch(Action(ActionType.REQUEST_FAILED, message=message))

    # ---- intents ----

    def mount(self) -> None:
        self.dispatch(Action(ActionType.LOAD_STARTED))
        try:
            tasks = self.api.list_tasks()
        except REQUEST_ERRORS as exc:
            logger.error("%s: %s", st.LOAD_FAILED, exc, exc_info=exc)
            self.dispatch(Action(ActionType.LOAD_FAILED, message=st.LOAD_FAILED))
            return
        self.dispatch(Action(ActionType.LOAD_SUCCEEDED, tasks=tasks))

    def submit(self, form: TaskCreate) -> None:
        if self.state.editing is not None:
            self.edit_task(form)
        else:
            self.create_task(form)

    def create_task(self, form: TaskCreate) -> None:
        try:
            task = self.api.create_task(form)
        except REQUEST_ERRORS as exc:
            self._fail(st.CREATE_FAILED, exc)
            return
        self.dispatch(Action(ActionType.TASK_CREATED, task=task))

    def edit_task(self, form: TaskCreate) -> None:
        target = self.state.editing
        if target is None:
            return
        try:
            task = self.api.update_task(target.id, form)
        except REQUEST_ERRORS as exc:
            self._fail(st.UPDATE_FAILED, exc)
            return
        self.dispatch(Action(ActionType.TASK_SAVED, task=task))

    def delete_task(self, task_id: int) -> None:
        if not self.confirm(DELETE_PROMPT):
            return
        try:
            self.api.delete_task(task_id)
        except REQUEST_ERRORS as exc:
            self._fail(st.DELETE_FAILED, exc)
            return
        self.dispatch(Action(ActionType.TASK_DELETED, task_id=task_id))

    def change_status(self, task_id: int, status: TaskStatus) -> None:
        try:
            task = self.api.update_task(task_id, {"status": status})
        except REQUEST_ERRORS as exc:
            self._fail(st.STATUS_FAILED, exc)
            return
        self.dispatch(Action(ActionType.TASK_UPDATED, task=task))

    def open_create_form(self) -> None:
        self.dispatch(Action(ActionType.FORM_OPENED))

    def open_edit_form(self, task: TaskOut) -> None:
        self.dispatch(Action(ActionType.FORM_OPENED, task=task))

    def close_form(self) -> None:
        self.dispatch(Action(ActionType.FORM_CLOSED))

    def toggle_form(self) -> None:
        if self.state.form_visible:
            self.close_form()
        else:
            self.open_create_form()
