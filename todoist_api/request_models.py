"""
Request values accepted by the Todoist operations.

Every field is optional at the model level: required inputs are checked by
the operation itself so a missing value raises the client's
:class:`~todoist_api.exceptions.ValidationError` before any request is made.
``BODY_FIELDS`` / ``QUERY_FIELDS`` map each camelCase field to the key sent
to the API.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .utils.payload import compact, domain_to_wire

RequestT = TypeVar("RequestT", bound="TodoistRequest")


class TodoistRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    BODY_FIELDS: ClassVar[Dict[str, str]] = {}
    QUERY_FIELDS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def coerce(cls: Type[RequestT], request: Union[RequestT, Mapping[str, Any], None]) -> RequestT:
        """Accept an instance, a plain mapping with the same keys, or ``None``."""
        if request is None:
            return cls()
        if isinstance(request, cls):
            return request
        try:
            return cls(**dict(request))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid {cls.__name__}: {exc}", cause=exc) from exc

    def to_body(self) -> Dict[str, Any]:
        """JSON body holding only the fields the caller set to a value."""
        return compact(self.model_dump(), self.BODY_FIELDS)

    def to_query(self) -> Dict[str, Any]:
        return compact(self.model_dump(), self.QUERY_FIELDS)


# what every operation accepts as its request argument
RequestArg = Union[TodoistRequest, Mapping[str, Any], None]


# --- Projects ---------------------------------------------------------------

class GetProjectsRequest(TodoistRequest):
    QUERY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("limit")

    limit: Optional[int] = None


class GetArchivedProjectsRequest(GetProjectsRequest):
    pass


class GetProjectCollaboratorsRequest(TodoistRequest):
    QUERY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("limit", "public_key")

    projectId: Optional[str] = None
    limit: Optional[int] = None
    publicKey: Optional[str] = None


class CreateProjectRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(
        "name", "description", "parent_id", "color", "is_favorite", "view_style",
    )

    name: Optional[str] = None
    description: Optional[str] = None
    parentId: Optional[Union[str, int]] = None
    color: Optional[Union[str, int]] = None
    isFavorite: Optional[bool] = None
    viewStyle: Optional[str] = None


class UpdateProjectRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(
        "name", "description", "color", "is_favorite", "view_style", "is_collapsed",
    )

    projectId: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[Union[str, int]] = None
    isFavorite: Optional[bool] = None
    viewStyle: Optional[str] = None
    isCollapsed: Optional[bool] = None


# --- Sections ---------------------------------------------------------------

class GetSectionsRequest(TodoistRequest):
    # the section listing is queried with the camelCase keys as-is
    QUERY_FIELDS: ClassVar[Dict[str, str]] = {"projectId": "projectId", "limit": "limit"}

    projectId: Optional[str] = None
    limit: Optional[int] = None


class CreateSectionRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("name", "project_id", "order")

    name: Optional[str] = None
    projectId: Optional[str] = None
    order: Optional[int] = None


class UpdateSectionRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("name")

    sectionId: Optional[str] = None
    name: Optional[str] = None


# --- Tasks ------------------------------------------------------------------

_TASK_FIELDS = (
    "content", "description", "labels", "priority", "due_string", "due_date",
    "due_datetime", "due_lang", "assignee_id", "duration", "duration_unit",
)


class GetTasksRequest(TodoistRequest):
    QUERY_FIELDS: ClassVar[Dict[str, str]] = {
        "projectId": "projectId",
        "sectionId": "sectionId",
        "parentId": "parentId",
        "label": "label",
        "ids": "ids",
        "limit": "limit",
    }

    projectId: Optional[Union[str, int]] = None
    sectionId: Optional[Union[str, int]] = None
    parentId: Optional[Union[str, int]] = None
    label: Optional[str] = None
    ids: Optional[List[str]] = None
    limit: Optional[int] = None

    def to_query(self) -> Dict[str, Any]:
        query = super().to_query()
        query.pop("ids", None)
        if self.ids:
            query["ids"] = ",".join(self.ids)
        return query


class CreateTaskRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(
        "content", "description", "project_id", "section_id", "parent_id", "order",
        "labels", "priority", "due_string", "due_date", "due_datetime", "due_lang",
        "assignee_id", "duration", "duration_unit",
    )

    content: Optional[str] = None
    description: Optional[str] = None
    projectId: Optional[str] = None
    sectionId: Optional[str] = None
    parentId: Optional[str] = None
    order: Optional[int] = None
    labels: Optional[List[str]] = None
    priority: Optional[int] = None
    dueString: Optional[str] = None
    dueDate: Optional[str] = None
    dueDatetime: Optional[str] = None
    dueLang: Optional[str] = None
    assigneeId: Optional[str] = None
    duration: Optional[int] = None
    durationUnit: Optional[str] = None  # "minute" or "day"


class UpdateTaskRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(*_TASK_FIELDS)

    taskId: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None
    labels: Optional[List[str]] = None
    priority: Optional[int] = None
    dueString: Optional[str] = None
    dueDate: Optional[str] = None
    dueDatetime: Optional[str] = None
    dueLang: Optional[str] = None
    assigneeId: Optional[str] = None
    duration: Optional[int] = None
    durationUnit: Optional[str] = None


class GetTasksByFilterRequest(TodoistRequest):
    QUERY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("filter", "lang", "limit")

    filter: Optional[str] = None
    lang: Optional[str] = None
    limit: Optional[int] = None


class QuickAddTaskRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(
        "text", "note", "reminder", "auto_reminder",
    )

    text: Optional[str] = None
    note: Optional[str] = None
    reminder: Optional[str] = None
    autoReminder: Optional[bool] = None


class MoveTaskRequest(TodoistRequest):
    BODY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire("project_id", "section_id", "parent_id")

    taskId: Optional[str] = None
    projectId: Optional[str] = None
    sectionId: Optional[str] = None
    parentId: Optional[str] = None


COMPLETED_TASK_PATHS = {
    "completionDate": "tasks/completed/by_completion_date",
    "dueDate": "tasks/completed/by_due_date",
}


class GetCompletedTasksRequest(TodoistRequest):
    QUERY_FIELDS: ClassVar[Dict[str, str]] = domain_to_wire(
        "project_id", "section_id", "limit", "cursor", "since", "until",
    )

    sortBy: Optional[str] = None  # one of COMPLETED_TASK_PATHS
    projectId: Optional[str] = None
    sectionId: Optional[str] = None
    limit: Optional[int] = None
    cursor: Optional[str] = None
    since: Optional[str] = None
    until: Optional[str] = None
