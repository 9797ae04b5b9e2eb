import pytest

from todoist_api import (
    ApiError,
    CreateProjectRequest,
    Project,
    ProjectCollaborator,
    ValidationError,
)

from conftest import API_URL


class TestGetProjectById:
    def test_success(self, todoist, respond, sent, project_payload):
        respond(project_payload)

        project = todoist.projects.get_project_by_id("123")

        request = sent()
        assert request.method == "GET"
        assert request.url == f"{API_URL}projects/123"
        assert request.headers["Authorization"] == "Bearer test-api-key"
        assert isinstance(project, Project)
        assert project.to_dict() == {
            "id": "123",
            "canAssignTasks": True,
            "childOrder": 1,
            "color": "blue",
            "creatorUid": "user123",
            "createdAt": "2024-01-01T00:00:00Z",
            "isArchived": False,
            "isDeleted": False,
            "isFavorite": True,
            "isFrozen": False,
            "name": "Test Project",
            "updatedAt": "2024-01-01T00:00:00Z",
            "viewStyle": "list",
            "defaultOrder": 0,
            "description": "Test description",
            "publicKey": "key123",
            "role": "owner",
            "parentId": None,
            "inboxProject": False,
            "isCollapsed": False,
            "isShared": False,
        }

    def test_missing_id(self, todoist, session):
        with pytest.raises(ValidationError, match="projectId is required to get_project_by_id"):
            todoist.projects.get_project_by_id("")
        session.request.assert_not_called()

    def test_api_error(self, todoist, respond):
        respond({"error": "Project not found"}, status=404)
        with pytest.raises(ApiError, match="Project not found"):
            todoist.projects.get_project_by_id("123")


class TestGetProjects:
    def test_success(self, todoist, respond, sent, project_payload):
        respond({"results": [project_payload]})

        projects = todoist.projects.get_projects()

        assert sent().url == f"{API_URL}projects"
        assert len(projects) == 1
        assert projects[0].id == "123"
        assert projects[0].name == "Test Project"

    def test_limit(self, todoist, respond, sent):
        respond({"results": []})
        assert todoist.projects.get_projects({"limit": 5}) == []
        assert sent().url == f"{API_URL}projects?limit=5"

    def test_api_error(self, todoist, respond):
        respond({"error": "Failed to fetch projects"}, status=500)
        with pytest.raises(ApiError):
            todoist.projects.get_projects()


class TestGetArchivedProjects:
    def test_success(self, todoist, respond, sent, project_payload):
        archived = dict(project_payload, id="456", name="Archived Project", is_archived=True)
        respond({"results": [archived]})

        projects = todoist.projects.get_archived_projects({"limit": 10})

        assert sent().url == f"{API_URL}projects/archived?limit=10"
        assert len(projects) == 1
        assert projects[0].isArchived is True
        assert projects[0].name == "Archived Project"

    def test_empty(self, todoist, respond):
        respond({"results": []})
        assert todoist.projects.get_archived_projects() == []


class TestGetProjectCollaborators:
    def test_success(self, todoist, respond, sent):
        respond(
            {
                "results": [
                    {"id": "user1", "name": "John Doe", "email": "john@example.com"},
                    {"id": "user2", "name": "Jane Smith", "email": "jane@example.com"},
                ]
            }
        )

        collaborators = todoist.projects.get_project_collaborators({"projectId": "123", "limit": 10})

        assert sent().url == f"{API_URL}projects/123/collaborators?limit=10"
        assert [c.name for c in collaborators] == ["John Doe", "Jane Smith"]
        assert isinstance(collaborators[1], ProjectCollaborator)
        assert collaborators[1].email == "jane@example.com"

    def test_public_key_query(self, todoist, respond, sent):
        respond({"results": []})
        todoist.projects.get_project_collaborators({"projectId": "123", "publicKey": "abc"})
        assert sent().url == f"{API_URL}projects/123/collaborators?public_key=abc"

    def test_missing_project_id(self, todoist, session):
        with pytest.raises(
            ValidationError, match="projectId is required to get_project_collaborators"
        ):
            todoist.projects.get_project_collaborators({"projectId": ""})
        session.request.assert_not_called()


class TestGetProjectPermissions:
    def test_success(self, todoist, respond, sent):
        respond(
            {
                "project_collaborator_actions": [
                    {"name": "CREATOR", "actions": [{"name": "edit"}, {"name": "delete"}]},
                ],
                "workspace_collaborator_actions": [
                    {"name": "ADMIN", "actions": [{"name": "manage"}]},
                ],
            }
        )

        permissions = todoist.projects.get_project_permissions()

        assert sent().url == f"{API_URL}projects/permissions"
        assert len(permissions.projectCollaboratorActions) == 1
        assert len(permissions.workspaceCollaboratorActions) == 1
        assert permissions.projectCollaboratorActions[0].name == "CREATOR"
        assert permissions.projectCollaboratorActions[0].actions == ["edit", "delete"]
        assert permissions.workspaceCollaboratorActions[0].actions == ["manage"]

    def test_api_error(self, todoist, respond):
        respond({"error": "Failed to fetch permissions"}, status=403)
        with pytest.raises(ApiError):
            todoist.projects.get_project_permissions()


class TestCreateProject:
    def test_success(self, todoist, respond, sent, project_payload):
        respond(dict(project_payload, id="789", name="New Project", color="green"))

        project = todoist.projects.create_project(
            {"name": "New Project", "description": "New project description", "color": "green"}
        )

        request = sent()
        assert request.method == "POST"
        assert request.url == f"{API_URL}projects"
        assert request.body == {
            "name": "New Project",
            "description": "New project description",
            "color": "green",
        }
        assert project.id == "789"
        assert project.name == "New Project"

    def test_snake_case_body(self, todoist, respond, sent, project_payload):
        respond(project_payload)
        todoist.projects.create_project(
            CreateProjectRequest(name="Child", parentId="1", isFavorite=True, viewStyle="board")
        )
        assert sent().body == {
            "name": "Child",
            "parent_id": "1",
            "is_favorite": True,
            "view_style": "board",
        }

    def test_api_error(self, todoist, respond):
        respond({"error": "Failed to create project"}, status=400)
        with pytest.raises(ApiError, match="Failed to create project"):
            todoist.projects.create_project({"name": "New Project"})


class TestUpdateProject:
    def test_success(self, todoist, respond, sent, project_payload):
        respond(dict(project_payload, name="Updated Project", color="purple"))

        project = todoist.projects.update_project(
            {
                "projectId": "123",
                "name": "Updated Project",
                "description": "Updated description",
                "color": "purple",
            }
        )

        request = sent()
        assert request.method == "POST"
        assert request.url == f"{API_URL}projects/123"
        assert request.body == {
            "name": "Updated Project",
            "description": "Updated description",
            "color": "purple",
        }
        assert project.name == "Updated Project"
        assert project.color == "purple"

    def test_is_collapsed_false_is_sent(self, todoist, respond, sent, project_payload):
        respond(project_payload)
        todoist.projects.update_project({"projectId": "123", "isCollapsed": False})
        assert sent().body == {"is_collapsed": False}

    def test_missing_project_id(self, todoist, session):
        with pytest.raises(ValidationError, match="projectId is required to update_project"):
            todoist.projects.update_project({"projectId": "", "name": "Test"})
        session.request.assert_not_called()
