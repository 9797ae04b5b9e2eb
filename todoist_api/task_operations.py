"""Task-related operations for Todoist."""
from typing import Any, Callable, List

from .data_models import CompletedTask, Task
from .exceptions import ValidationError
from .request_models import (
    COMPLETED_TASK_PATHS,
    CreateTaskRequest,
    GetCompletedTasksRequest,
    GetTasksByFilterRequest,
    GetTasksRequest,
    MoveTaskRequest,
    QuickAddTaskRequest,
    RequestArg,
    UpdateTaskRequest,
)
from .resources import TASKS, Method
from .utils.payload import require, require_any, results


class Tasks:
    """The ``tasks`` group of a :class:`~todoist_api.client.Todoist` client."""

    def __init__(self, call: Callable[..., Any]) -> None:
        self._call = call

    def get_tasks(self, request: RequestArg) -> Any:
        """List active tasks of a project, section, parent task or id list.

        The response is returned exactly as the API sent it.
        """
        req = GetTasksRequest.coerce(request)
        require_any(
            req.model_dump(),
            ("projectId", "sectionId", "parentId", "ids"),
            "At least one of projectId, sectionId, partentId or ids is required to get_tasks",
        )
        return self._call(TASKS, Method.GET, query=req.to_query())

    def create_task(self, request: RequestArg) -> Task:
        req = CreateTaskRequest.coerce(request)
        require(req.content, "content", "create_task")
        data = self._call(TASKS, Method.POST, body=req.to_body())
        return Task.from_api(data)

    def get_task_by_id(self, task_id: str) -> Task:
        require(task_id, "taskId", "get_task_by_id")
        data = self._call(f"{TASKS}/{task_id}", Method.GET)
        return Task.from_api(data)

    def get_completed_tasks(self, request: RequestArg) -> List[CompletedTask]:
        """Completed tasks, by completion date or by due date (``sortBy``)."""
        req = GetCompletedTasksRequest.coerce(request)
        require(req.sortBy, "sortBy", "get_completed_tasks")
        path = COMPLETED_TASK_PATHS.get(req.sortBy)
        if path is None:
            raise ValidationError(
                f"sortBy must be one of {', '.join(COMPLETED_TASK_PATHS)} to get_completed_tasks"
            )
        data = self._call(path, Method.GET, query=req.to_query())
        return [CompletedTask.from_api(item) for item in results(data, "items")]

    def get_tasks_by_filter(self, request: RequestArg) -> List[Task]:
        req = GetTasksByFilterRequest.coerce(request)
        require(req.filter, "filter", "get_tasks_by_filter")
        data = self._call(f"{TASKS}/filter", Method.GET, query=req.to_query())
        return [Task.from_api(item) for item in results(data)]

    def quick_add_task(self, request: RequestArg) -> Task:
        """Add a task from natural-language ``text`` ("Buy milk tomorrow #Errands")."""
        req = QuickAddTaskRequest.coerce(request)
        require(req.text, "text", "quick_add_task")
        data = self._call(f"{TASKS}/quick", Method.POST, body=req.to_body())
        return Task.from_api(data)

    def reopen_task(self, task_id: str) -> Task:
        require(task_id, "taskId", "reopen_task")
        data = self._call(f"{TASKS}/{task_id}/reopen", Method.POST)
        return Task.from_api(data)

    def close_task(self, task_id: str) -> None:
        require(task_id, "taskId", "close_task")
        self._call(f"{TASKS}/{task_id}/close", Method.POST)

    def move_task(self, request: RequestArg) -> None:
        req = MoveTaskRequest.coerce(request)
        require(req.taskId, "taskId", "move_task")
        self._call(f"{TASKS}/{req.taskId}/move", Method.POST, body=req.to_body())

    def update_task(self, request: RequestArg) -> Task:
        req = UpdateTaskRequest.coerce(request)
        require(req.taskId, "taskId", "update_task")
        data = self._call(f"{TASKS}/{req.taskId}", Method.POST, body=req.to_body())
        return Task.from_api(data)

    def delete_task(self, task_id: str) -> None:
        require(task_id, "taskId", "delete_task")
        self._call(f"{TASKS}/{task_id}", Method.DELETE)
