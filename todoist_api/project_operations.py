"""Project-related operations for Todoist."""
from typing import Any, Callable, List

from .data_models import Project, ProjectCollaborator, ProjectPermissions
from .request_models import (
    CreateProjectRequest,
    GetArchivedProjectsRequest,
    GetProjectCollaboratorsRequest,
    GetProjectsRequest,
    RequestArg,
    UpdateProjectRequest,
)
from .resources import PROJECTS, Method
from .utils.payload import require, results


class Projects:
    """The ``projects`` group of a :class:`~todoist_api.client.Todoist` client."""

    def __init__(self, call: Callable[..., Any]) -> None:
        self._call = call

    def get_project_by_id(self, project_id: str) -> Project:
        require(project_id, "projectId", "get_project_by_id")
        data = self._call(f"{PROJECTS}/{project_id}", Method.GET)
        return Project.from_api(data)

    def get_projects(self, request: RequestArg = None) -> List[Project]:
        req = GetProjectsRequest.coerce(request)
        data = self._call(PROJECTS, Method.GET, query=req.to_query())
        return [Project.from_api(item) for item in results(data)]

    def get_archived_projects(self, request: RequestArg = None) -> List[Project]:
        req = GetArchivedProjectsRequest.coerce(request)
        data = self._call(f"{PROJECTS}/archived", Method.GET, query=req.to_query())
        return [Project.from_api(item) for item in results(data)]

    def get_project_collaborators(self, request: RequestArg) -> List[ProjectCollaborator]:
        req = GetProjectCollaboratorsRequest.coerce(request)
        require(req.projectId, "projectId", "get_project_collaborators")
        data = self._call(
            f"{PROJECTS}/{req.projectId}/collaborators", Method.GET, query=req.to_query()
        )
        return [ProjectCollaborator.from_api(item) for item in results(data)]

    def get_project_permissions(self) -> ProjectPermissions:
        data = self._call(f"{PROJECTS}/permissions", Method.GET)
        return ProjectPermissions.from_api(data)

    def create_project(self, request: RequestArg) -> Project:
        """Create a project.

        Only ``name`` is mandatory for Todoist; the API enforces that, so the
        request is forwarded as given.
        """
        req = CreateProjectRequest.coerce(request)
        data = self._call(PROJECTS, Method.POST, body=req.to_body())
        return Project.from_api(data)

    def update_project(self, request: RequestArg) -> Project:
        req = UpdateProjectRequest.coerce(request)
        require(req.projectId, "projectId", "update_project")
        data = self._call(f"{PROJECTS}/{req.projectId}", Method.POST, body=req.to_body())
        return Project.from_api(data)
