"""
Todoist API client.

Typed binding for the Todoist REST API v1: projects, sections and tasks,
returned as camelCase pydantic models.

    from todoist_api import Todoist
    todoist = Todoist("my-token")
    todoist.tasks.create_task({"content": "Buy milk"})
"""

__version__ = "1.0.0"

from .client import Todoist
from .data_models import (
    CollaboratorAction,
    CompletedTask,
    Due,
    Duration,
    Project,
    ProjectCollaborator,
    ProjectPermissions,
    Section,
    SectionSummary,
    Task,
)
from .exceptions import ApiError, ConfigurationError, TodoistError, ValidationError
from .request_models import (
    CreateProjectRequest,
    CreateSectionRequest,
    CreateTaskRequest,
    GetArchivedProjectsRequest,
    GetCompletedTasksRequest,
    GetProjectCollaboratorsRequest,
    GetProjectsRequest,
    GetSectionsRequest,
    GetTasksByFilterRequest,
    GetTasksRequest,
    MoveTaskRequest,
    QuickAddTaskRequest,
    RequestArg,
    UpdateProjectRequest,
    UpdateSectionRequest,
    UpdateTaskRequest,
)
from .resources import TODOIST_API_URL, Method

__all__ = [
    "Todoist",
    "TODOIST_API_URL",
    "Method",
    "TodoistError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "Project",
    "ProjectCollaborator",
    "CollaboratorAction",
    "ProjectPermissions",
    "Section",
    "SectionSummary",
    "Task",
    "Due",
    "Duration",
    "CompletedTask",
    "GetProjectsRequest",
    "GetArchivedProjectsRequest",
    "GetProjectCollaboratorsRequest",
    "CreateProjectRequest",
    "UpdateProjectRequest",
    "GetSectionsRequest",
    "CreateSectionRequest",
    "UpdateSectionRequest",
    "GetTasksRequest",
    "CreateTaskRequest",
    "UpdateTaskRequest",
    "GetTasksByFilterRequest",
    "QuickAddTaskRequest",
    "RequestArg",
    "MoveTaskRequest",
    "GetCompletedTasksRequest",
]
