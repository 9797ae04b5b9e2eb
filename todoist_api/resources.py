"""Constants describing the Todoist REST surface."""
from enum import Enum

TODOIST_API_URL = "https://api.todoist.com/api/v1/"

PROJECTS = "projects"
SECTIONS = "sections"
TASKS = "tasks"


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
