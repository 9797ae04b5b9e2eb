"""Todoist REST client.

:class:`Todoist` owns the only network code in the package: every
operation in the ``projects``, ``sections`` and ``tasks`` groups ends up in
:meth:`Todoist._call`, which builds the URL and headers, sends one request
through the injected transport and turns the response into either parsed
JSON or an :class:`~todoist_api.exceptions.ApiError`.

A 204 response returns ``None``.  A failure status, or a body carrying an
``error`` / ``http_code`` field (Todoist reports some failures that way with
a 200), raises ``ApiError`` with the API's message and the full payload as
``cause``.  Anything that blows up while building or sending the request is
wrapped as ``ApiError("Error calling API")``.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Final, Mapping, Optional
from urllib.parse import urlencode

import requests

from .exceptions import ApiError, ConfigurationError
from .resources import TODOIST_API_URL, Method
from .project_operations import Projects
from .section_operations import Sections
from .task_operations import Tasks
from .utils.config import get_api_key, load_env_vars
from .utils.logger import get_logger
from .utils.payload import compact

__all__: Final = ["Todoist"]

log = get_logger(__name__)


class Todoist:
    """Entry point: ``Todoist(api_key).tasks.get_task_by_id("123")``.

    ``session`` is the HTTP transport; anything with a ``requests.Session``
    compatible ``request()`` method works.  ``timeout`` is handed to the
    transport unchanged.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        session: Optional[requests.Session] = None,
        base_url: str = TODOIST_API_URL,
        timeout: Optional[float] = None,
    ) -> None:
        if not api_key:
            raise ConfigurationError("Todoist api_key is required")
        self._api_key = api_key
        self._session = session if session is not None else requests.Session()
        self._base_url = base_url
        self._timeout = timeout
        self._projects = Projects(self._call)
        self._sections = Sections(self._call)
        self._tasks = Tasks(self._call)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "Todoist":
        """Build a client from ``TODOIST_API_KEY`` (``.todoist.env`` files are loaded first)."""
        load_env_vars()
        return cls(get_api_key(), **kwargs)

    @property
    def projects(self) -> Projects:
        return self._projects

    @property
    def sections(self) -> Sections:
        return self._sections

    @property
    def tasks(self) -> Tasks:
        return self._tasks

    def __repr__(self) -> str:
        return f"Todoist(base_url={self._base_url!r})"

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    def _build_url(self, resource: str, query: Optional[Mapping[str, Any]] = None) -> str:
        url = f"{self._base_url}{resource}"
        params = compact(query or {})
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _call(
        self,
        resource: str,
        method: Method,
        body: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send one request and return the parsed JSON (``None`` for 204)."""
        try:
            url = self._build_url(resource, query)
            data = json.dumps(body) if body is not None else None
            log.debug("%s %s", method.value, url)
            response = self._session.request(
                method.value,
                url,
                headers=self._headers(),
                data=data,
                timeout=self._timeout,
            )
            if response.status_code == 204:
                return None
            payload = response.json()
        except Exception as exc:
            log.warning("Todoist request %s %s failed: %s", method.value, resource, exc)
            raise ApiError("Error calling API", cause=exc) from exc

        error = None
        if isinstance(payload, dict):
            error = payload.get("error") or payload.get("http_code")
        if not response.ok or error:
            message = str(error) if error else f"Todoist API returned HTTP {response.status_code}"
            log.warning("Todoist API error on %s %s: %s", method.value, resource, message)
            raise ApiError(message, cause=payload, status_code=response.status_code)
        return payload
