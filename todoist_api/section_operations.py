"""Section-related operations for Todoist."""
from typing import Any, Callable, List

from .data_models import Section, SectionSummary
from .request_models import (
    CreateSectionRequest,
    GetSectionsRequest,
    RequestArg,
    UpdateSectionRequest,
)
from .resources import SECTIONS, Method
from .utils.payload import require, results


class Sections:
    """The ``sections`` group of a :class:`~todoist_api.client.Todoist` client."""

    def __init__(self, call: Callable[..., Any]) -> None:
        self._call = call

    def get_sections(self, request: RequestArg = None) -> List[SectionSummary]:
        """List sections, optionally limited to one project.

        The listing uses a narrower shape than :meth:`get_section_by_id`.
        """
        req = GetSectionsRequest.coerce(request)
        data = self._call(SECTIONS, Method.GET, query=req.to_query())
        return [SectionSummary.from_api(item) for item in results(data)]

    def create_section(self, request: RequestArg) -> Section:
        req = CreateSectionRequest.coerce(request)
        require(req.name, "name", "create_section")
        require(req.projectId, "projectId", "create_section")
        data = self._call(SECTIONS, Method.POST, body=req.to_body())
        return Section.from_api(data)

    def get_section_by_id(self, section_id: str) -> Section:
        require(section_id, "sectionId", "get_section_by_id")
        data = self._call(f"{SECTIONS}/{section_id}", Method.GET)
        return Section.from_api(data)

    def update_section(self, request: RequestArg) -> Section:
        req = UpdateSectionRequest.coerce(request)
        require(req.sectionId, "sectionId", "update_section")
        require(req.name, "name", "update_section")
        data = self._call(f"{SECTIONS}/{req.sectionId}", Method.POST, body=req.to_body())
        return Section.from_api(data)

    def delete_section(self, section_id: str) -> None:
        require(section_id, "sectionId", "delete_section")
        self._call(f"{SECTIONS}/{section_id}", Method.DELETE)
