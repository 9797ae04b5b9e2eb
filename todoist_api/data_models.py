"""
Data models representing Todoist objects (projects, sections, tasks, etc.).

Field names follow the camelCase domain shape.  ``from_api`` builds a model
from one snake_case API object; keys missing from the payload stay unset, so
``to_dict()`` only reports what the API actually returned.
"""
from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel

from .utils.payload import expect_object, rename_present, wire_to_domain


class TodoistModel(BaseModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = {}

    @classmethod
    def from_api(cls, data: Dict[str, Any]):
        return cls(**rename_present(expect_object(data), cls.WIRE_FIELDS))

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class Project(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "id", "can_assign_tasks", "child_order", "color", "creator_uid", "created_at",
        "is_archived", "is_deleted", "is_favorite", "is_frozen", "name", "updated_at",
        "view_style", "default_order", "description", "public_key", "role", "parent_id",
        "inbox_project", "is_collapsed", "is_shared",
    )

    id: str
    canAssignTasks: Optional[bool] = None
    childOrder: Optional[int] = None
    color: Optional[str] = None
    creatorUid: Optional[str] = None
    createdAt: Optional[str] = None
    isArchived: Optional[bool] = None
    isDeleted: Optional[bool] = None
    isFavorite: Optional[bool] = None
    isFrozen: Optional[bool] = None
    name: Optional[str] = None
    updatedAt: Optional[str] = None
    viewStyle: Optional[str] = None
    defaultOrder: Optional[int] = None
    description: Optional[str] = None
    publicKey: Optional[str] = None
    role: Optional[str] = None
    parentId: Optional[str] = None
    inboxProject: Optional[bool] = None
    isCollapsed: Optional[bool] = None
    isShared: Optional[bool] = None


class ProjectCollaborator(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain("id", "name", "email")

    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class CollaboratorAction(TodoistModel):
    """A role (``CREATOR``, ``ADMIN``, ``READ_WRITE``, ``READ_ONLY``) and the actions it allows."""

    name: Optional[str] = None
    actions: List[str] = []

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "CollaboratorAction":
        data = expect_object(data)
        actions = [action.get("name") for action in data.get("actions") or []]
        return cls(name=data.get("name"), actions=actions)


class ProjectPermissions(TodoistModel):
    projectCollaboratorActions: List[CollaboratorAction] = []
    workspaceCollaboratorActions: List[CollaboratorAction] = []

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "ProjectPermissions":
        data = expect_object(data)
        return cls(
            projectCollaboratorActions=[
                CollaboratorAction.from_api(item)
                for item in data.get("project_collaborator_actions") or []
            ],
            workspaceCollaboratorActions=[
                CollaboratorAction.from_api(item)
                for item in data.get("workspace_collaborator_actions") or []
            ],
        )


class Section(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "id", "name", "user_id", "project_id", "section_order", "is_collapsed",
        "added_at", "updated_at", "archived_at", "is_archived", "is_deleted",
    )

    id: str
    name: Optional[str] = None
    userId: Optional[str] = None
    projectId: Optional[str] = None
    sectionOrder: Optional[int] = None
    isCollapsed: Optional[bool] = None
    addedAt: Optional[str] = None
    updatedAt: Optional[str] = None
    archivedAt: Optional[str] = None
    isArchived: Optional[bool] = None
    isDeleted: Optional[bool] = None


class SectionSummary(TodoistModel):
    """The narrower section shape returned by the section listing."""

    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "id", "name", "project_id", "order", "is_collapsed", "created_at", "updated_at",
    )

    id: str
    name: Optional[str] = None
    projectId: Optional[str] = None
    order: Optional[int] = None
    isCollapsed: Optional[bool] = None
    createdAt: Optional[str] = None
    updatedAt: Optional[str] = None


class Due(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "date", "is_recurring", "datetime", "string", "timezone",
    )

    date: Optional[str] = None
    isRecurring: Optional[bool] = None
    datetime: Optional[str] = None
    string: Optional[str] = None
    timezone: Optional[str] = None


class Duration(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain("amount", "unit")

    amount: Optional[float] = None
    unit: Optional[str] = None  # "minute" or "day"


class Task(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "id", "content", "description", "project_id", "section_id", "parent_id",
        "order", "priority", "assignee_id", "assigner_id", "comment_count",
        "is_completed", "created_at", "creator_id", "url",
    )

    id: str
    content: Optional[str] = None
    description: Optional[str] = None
    projectId: Optional[str] = None
    sectionId: Optional[str] = None
    parentId: Optional[str] = None
    order: Optional[int] = None
    priority: Optional[int] = None
    due: Optional[Due] = None
    labels: List[str] = []
    assigneeId: Optional[str] = None
    assignerId: Optional[str] = None
    commentCount: Optional[int] = None
    isCompleted: Optional[bool] = None
    createdAt: Optional[str] = None
    creatorId: Optional[str] = None
    url: Optional[str] = None
    duration: Optional[Duration] = None

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Task":
        data = expect_object(data)
        fields = rename_present(data, cls.WIRE_FIELDS)
        fields["labels"] = list(data.get("labels") or [])
        # due/duration stay unset (never null) unless the API sent an object
        if data.get("due"):
            fields["due"] = Due.from_api(data["due"])
        if data.get("duration"):
            fields["duration"] = Duration.from_api(data["duration"])
        return cls(**fields)


class CompletedTask(TodoistModel):
    WIRE_FIELDS: ClassVar[Dict[str, str]] = wire_to_domain(
        "id", "task_id", "content", "project_id", "section_id", "completed_at",
        "user_id", "note",
    )

    id: str
    taskId: Optional[str] = None
    content: Optional[str] = None
    projectId: Optional[str] = None
    sectionId: Optional[str] = None
    completedAt: Optional[str] = None
    userId: Optional[str] = None
    note: Optional[str] = None
