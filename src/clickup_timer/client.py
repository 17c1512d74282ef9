"""Async client that turns the ClickUp v2 HTTP API into typed operations."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from .config import API_BASE, API_KEY_ENV_VAR, ConfigError, RuntimeSettings
from .logging import get_logger, log_event, redact
from .schemas import (
    CurrentTimeEntryResponse,
    Task,
    TasksResponse,
    Team,
    TeamsResponse,
    TimeEntriesResponse,
    TimeEntry,
    User,
    UserResponse,
)

LOGGER = get_logger("client")
RECENT_ENTRIES_LIMIT = 10

ModelT = TypeVar("ModelT", bound=BaseModel)


class ClickUpError(Exception):
    """Base class for failures reported by the ClickUp client."""


class ApiError(ClickUpError):
    """Raised when ClickUp answers with a non-success HTTP status."""

    def __init__(self, status_code: int, body: str, message: Optional[str] = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"ClickUp API Error {status_code}: {body}")


class ResponseDecodeError(ApiError):
    """Raised when a successful response does not match the expected shape."""

    def __init__(self, status_code: int, body: str, reason: str) -> None:
        self.reason = reason
        super().__init__(
            status_code, body, f"Unexpected ClickUp response ({status_code}): {reason}"
        )


class NoTeamsError(ClickUpError):
    """Raised when the API key does not belong to any team."""

    def __init__(self) -> None:
        super().__init__("No teams found")


class ClickUpClient:
    """Authenticated access to the handful of ClickUp endpoints the CLI needs.

    The default team id and the current user id are resolved lazily and cached
    for the lifetime of the instance. One instance is built per invocation, so
    the cache never needs invalidating.
    """

    def __init__(
        self,
        api_key: Optional[str],
        *,
        base_url: str = API_BASE,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigError(f"{API_KEY_ENV_VAR} is not defined in environment variables")
        self._api_key = api_key
        redact(api_key)
        self._base_url = base_url.rstrip("/")
        client_kwargs: Dict[str, Any] = {"transport": transport}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self._http = httpx.AsyncClient(**client_kwargs)
        self._default_team_id: Optional[str] = None
        self._user_id: Optional[int] = None

    @classmethod
    def from_settings(
        cls,
        settings: RuntimeSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ClickUpClient":
        return cls(
            settings.api_key,
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "ClickUpClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # ClickUp expects the personal token as-is in the Authorization header.
    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": self._api_key,
            "Content-Type": "application/json",
        }

    async def _send(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Any = None,
    ) -> httpx.Response:
        url = f"{self._base_url}{endpoint}"
        log_event(LOGGER, logging.DEBUG, "api.request", method=method, endpoint=endpoint)

        response = await self._http.request(
            method,
            url,
            headers=self._headers(),
            json=body,
            params=params,
        )

        if not response.is_success:
            log_event(
                LOGGER,
                logging.WARNING,
                "api.error",
                method=method,
                endpoint=endpoint,
                status=response.status_code,
            )
            raise ApiError(response.status_code, response.text)

        log_event(
            LOGGER,
            logging.DEBUG,
            "api.response",
            method=method,
            endpoint=endpoint,
            status=response.status_code,
        )
        return response

    async def _request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Any = None,
        params: Any = None,
    ) -> Any:
        """Send a request and return the parsed JSON body."""

        response = await self._send(endpoint, method, body, params)
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(
                response.status_code, response.text, "body is not valid JSON"
            ) from exc

    async def _fetch(self, model: Type[ModelT], endpoint: str, params: Any = None) -> ModelT:
        """GET ``endpoint`` and validate the raw body against ``model``."""

        response = await self._send(endpoint, params=params)
        try:
            return model.model_validate_json(response.content)
        except ValidationError as exc:
            raise ResponseDecodeError(response.status_code, response.text, str(exc)) from exc

    async def get_me(self) -> User:
        """Return the user owning the API key.

        Only the first call hits the API; later calls return a ``User`` with
        just ``id`` populated.
        """

        if self._user_id is not None:
            return User.model_construct(id=self._user_id)
        data = await self._fetch(UserResponse, "/user")
        self._user_id = data.user.id
        return data.user

    async def get_teams(self) -> List[Team]:
        """Return the teams (workspaces) the current user belongs to."""

        data = await self._fetch(TeamsResponse, "/team")
        return data.teams

    async def get_default_team_id(self) -> str:
        if self._default_team_id is not None:
            return self._default_team_id
        teams = await self.get_teams()
        if not teams:
            raise NoTeamsError()
        self._default_team_id = teams[0].id
        log_event(LOGGER, logging.DEBUG, "team.default", team_id=self._default_team_id)
        return self._default_team_id

    async def get_assigned_tasks(self) -> List[Task]:
        team_id = await self.get_default_team_id()
        me = await self.get_me()
        data = await self._fetch(
            TasksResponse,
            f"/team/{team_id}/task",
            params=[
                ("assignees[]", str(me.id)),
                ("include_closed", "false"),
                ("subtasks", "true"),
            ],
        )
        return data.tasks

    async def search_tasks(self, query: str) -> List[Task]:
        team_id = await self.get_default_team_id()
        # The filtered team tasks endpoint is the only one that accepts free-text search.
        data = await self._fetch(
            TasksResponse,
            f"/team/{team_id}/task",
            params=[("search", query), ("include_closed", "false")],
        )
        return data.tasks

    async def start_timer(self, task_id: str, description: Optional[str] = None) -> Any:
        """Start a timer on ``task_id``; ClickUp replaces any timer already running."""

        team_id = await self.get_default_team_id()
        body: Dict[str, Any] = {"tid": task_id}
        if description is not None:
            body["description"] = description
        return await self._request(f"/team/{team_id}/time_entries/start", "POST", body)

    async def stop_timer(self) -> Any:
        """Stop the running timer."""

        team_id = await self.get_default_team_id()
        return await self._request(f"/team/{team_id}/time_entries/stop", "POST")

    async def get_recent_time_entries(self) -> List[TimeEntry]:
        """Return recent time entries, newest first."""

        team_id = await self.get_default_team_id()
        data = await self._fetch(
            TimeEntriesResponse,
            f"/team/{team_id}/time_entries",
            params={"limit": RECENT_ENTRIES_LIMIT},
        )
        entries = data.data
        # ClickUp answers oldest first.
        return sorted(entries, key=lambda entry: entry.start_ms, reverse=True)

    async def get_running_timer(self) -> Optional[TimeEntry]:
        team_id = await self.get_default_team_id()
        data = await self._fetch(CurrentTimeEntryResponse, f"/team/{team_id}/time_entries/current")
        return data.data
