from .api import TaskApiClient
from .controller import TaskBoardController
from .state import Action, ActionType, AppState, reduce

__all__ = ["TaskApiClient", "TaskBoardController", "Action", "ActionType", "AppState", "reduce"]
