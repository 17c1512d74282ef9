"""Pydantic models for the ClickUp API payloads consumed by the CLI."""

from __future__ import annotations

from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StringConstraints

EpochMillis = Annotated[str, StringConstraints(pattern=r"^\d+$")]


class User(BaseModel):
    """A ClickUp user as returned by ``GET /user``."""

    id: int
    username: Optional[str] = Field(..., description="Display name; may be null.")
    email: str
    color: Optional[str] = Field(..., description="Profile colour; may be null.")


class TeamMember(BaseModel):
    user: User


class Team(BaseModel):
    """A ClickUp workspace (called a team by the v2 API)."""

    id: str
    name: str
    color: Optional[str] = None
    avatar: Optional[str] = None
    members: List[TeamMember] = Field(default_factory=list)


class TaskStatus(BaseModel):
    status: str


class Task(BaseModel):
    """A task reference. The CLI only ever reads tasks."""

    id: str
    name: str
    status: TaskStatus
    url: str


class TimeEntry(BaseModel):
    """A tracked interval; ``start`` and ``end`` are epoch milliseconds as strings."""

    id: str
    task: Task
    start: EpochMillis
    end: Optional[EpochMillis] = None
    duration: Optional[str] = None
    description: Optional[str] = None

    @property
    def start_ms(self) -> int:
        return int(self.start)

    @property
    def end_ms(self) -> Optional[int]:
        return int(self.end) if self.end else None

    @property
    def is_running(self) -> bool:
        return self.end_ms is None

    def elapsed_minutes(self, now_ms: int) -> int:
        """Whole minutes between the entry start and ``now_ms`` (or its end)."""

        finish = self.end_ms if self.end_ms is not None else now_ms
        return max(finish - self.start_ms, 0) // 60000


class UserResponse(BaseModel):
    user: User


class TeamsResponse(BaseModel):
    teams: List[Team]


class TasksResponse(BaseModel):
    tasks: List[Task]


class TimeEntriesResponse(BaseModel):
    data: List[TimeEntry]


class CurrentTimeEntryResponse(BaseModel):
    data: Optional[TimeEntry]
