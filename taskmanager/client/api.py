from typing import Any, Dict, List, Optional, Union

import httpx

from ..config import settings
from ..schemas import TaskCreate, TaskOut, TaskUpdate


class TaskApiClient:
    """
    Thin typed wrapper over the /api/tasks endpoints.

    One HTTP request per call. Non-2xx responses raise httpx.HTTPStatusError
    and connection problems raise httpx.TransportError; neither is retried.
    """

    def __init__(self, base_url: Optional[str] = None, client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(base_url=base_url or settings.API_BASE_URL)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "TaskApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _request(self, method: str, url: str, **kwargs) -> Any:
        response = self._client.request(method, url, **kwargs)
        response.raise_for_status()
        return response.json()

    def list_tasks(self) -> List[TaskOut]:
        return [TaskOut.model_validate(item) for item in self._request("GET", "/tasks")]

    def get_task(self, task_id: int) -> TaskOut:
        return TaskOut.model_validate(self._request("GET", f"/tasks/{task_id}"))

    def create_task(self, task: TaskCreate) -> TaskOut:
        body = task.model_dump(mode="json")
        return TaskOut.model_validate(self._request("POST", "/tasks", json=body))

    def update_task(self, task_id: int, changes: Union[TaskUpdate, TaskCreate, Dict[str, Any]]) -> TaskOut:
        if isinstance(changes, dict):
            changes = TaskUpdate.model_validate(changes)
        # a full form submission is sent whole, a TaskUpdate only carries what was set
        body = changes.model_dump(mode="json", exclude_unset=isinstance(changes, TaskUpdate))
        return TaskOut.model_validate(self._request("PUT", f"/tasks/{task_id}", json=body))

    def delete_task(self, task_id: int) -> str:
        return self._request("DELETE", f"/tasks/{task_id}")["message"]
