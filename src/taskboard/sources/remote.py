"""Data source backed by the taskboard REST API."""

from typing import Any, TypeVar
from urllib.parse import quote

from pydantic import ValidationError

from taskboard.client.http import ApiClient
from taskboard.errors import ApiError
from taskboard.models import (
    Note,
    NoteCategory,
    NoteCreate,
    NoteUpdate,
    RecordModel,
    Task,
    TaskCreate,
    TaskStatus,
    TaskUpdate,
    User,
    UserCreate,
    UserRole,
    UserUpdate,
    utcnow,
)
from taskboard.sources.base import DataSource

R = TypeVar("R", bound=RecordModel)


def _q(record_id: str) -> str:
    # ids go into the path as a single segment
    return quote(record_id, safe="")


def _parse(model: type[R], data: Any, endpoint: str) -> R:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ApiError(f"Unexpected {model.__name__} payload: {e}", url=endpoint) from e


def _parse_list(model: type[R], data: Any, endpoint: str) -> list[R]:
    if not isinstance(data, list):
        raise ApiError(f"Expected a list of {model.__name__}", url=endpoint)
    return [_parse(model, item, endpoint) for item in data]


class RemoteDataSource(DataSource):
    def __init__(self, client: ApiClient) -> None:
        self.client = client

    # ── Tasks ──────────────────────────────────────────────

    async def list_tasks(self) -> list[Task]:
        endpoint = "/api/tasks"
        return _parse_list(Task, await self.client.get(endpoint), endpoint)

    async def list_tasks_by_user(self, user_id: str) -> list[Task]:
        endpoint = f"/api/tasks/user/{_q(user_id)}"
        return _parse_list(Task, await self.client.get(endpoint), endpoint)

    async def get_task(self, task_id: str) -> Task:
        endpoint = f"/api/tasks/{_q(task_id)}"
        return _parse(Task, await self.client.get(endpoint), endpoint)

    async def create_task(self, data: TaskCreate) -> Task:
        endpoint = "/api/tasks"
        return _parse(Task, await self.client.post(endpoint, data.to_wire()), endpoint)

    async def update_task(self, task_id: str, data: TaskUpdate) -> Task:
        endpoint = f"/api/tasks/{_q(task_id)}"
        return _parse(Task, await self.client.put(endpoint, data.to_wire()), endpoint)

    async def delete_task(self, task_id: str) -> None:
        await self.client.delete(f"/api/tasks/{_q(task_id)}")

    async def assign_task(self, task_id: str, user_id: str | None) -> Task:
        endpoint = f"/api/tasks/{_q(task_id)}/assign"
        return _parse(Task, await self.client.patch(endpoint, {"assignedTo": user_id}), endpoint)

    async def update_task_status(self, task_id: str, status: TaskStatus) -> Task:
        endpoint = f"/api/tasks/{_q(task_id)}/status"
        body = {"status": TaskStatus(status).value}
        return _parse(Task, await self.client.put(endpoint, body), endpoint)

    # ── Notes ──────────────────────────────────────────────

    async def list_notes(self) -> list[Note]:
        endpoint = "/api/notes"
        return _parse_list(Note, await self.client.get(endpoint), endpoint)

    async def list_notes_by_category(self, category: NoteCategory) -> list[Note]:
        endpoint = f"/api/notes/category/{NoteCategory(category).value}"
        return _parse_list(Note, await self.client.get(endpoint), endpoint)

    async def get_note(self, note_id: str) -> Note:
        endpoint = f"/api/notes/{_q(note_id)}"
        return _parse(Note, await self.client.get(endpoint), endpoint)

    async def create_note(self, data: NoteCreate) -> Note:
        endpoint = "/api/notes"
        return _parse(Note, await self.client.post(endpoint, data.to_wire()), endpoint)

    async def update_note(self, note_id: str, data: NoteUpdate) -> Note:
        endpoint = f"/api/notes/{_q(note_id)}"
        body = {**data.to_wire(), "updatedAt": utcnow().isoformat()}
        return _parse(Note, await self.client.put(endpoint, body), endpoint)

    async def delete_note(self, note_id: str) -> None:
        await self.client.delete(f"/api/notes/{_q(note_id)}")

    async def update_note_category(self, note_id: str, category: NoteCategory) -> Note:
        endpoint = f"/api/notes/{_q(note_id)}/category"
        body = {"category": NoteCategory(category).value}
        return _parse(Note, await self.client.put(endpoint, body), endpoint)

    # ── Users ──────────────────────────────────────────────

    async def list_users(self) -> list[User]:
        endpoint = "/api/users"
        return _parse_list(User, await self.client.get(endpoint), endpoint)

    async def get_user(self, user_id: str) -> User:
        endpoint = f"/api/users/{_q(user_id)}"
        return _parse(User, await self.client.get(endpoint), endpoint)

    async def create_user(self, data: UserCreate) -> User:
        endpoint = "/api/users"
        return _parse(User, await self.client.post(endpoint, data.to_wire()), endpoint)

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        endpoint = f"/api/users/{_q(user_id)}"
        return _parse(User, await self.client.put(endpoint, data.to_wire()), endpoint)

    async def delete_user(self, user_id: str) -> None:
        await self.client.delete(f"/api/users/{_q(user_id)}")

    async def update_user_role(self, user_id: str, role: UserRole) -> User:
        endpoint = f"/api/users/{_q(user_id)}/role"
        body = {"role": UserRole(role).value}
        return _parse(User, await self.client.put(endpoint, body), endpoint)

    async def aclose(self) -> None:
        await self.client.aclose()
