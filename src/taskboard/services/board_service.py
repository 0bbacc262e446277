"""Application-level operations on top of a DataSource.

Groups the multi-step actions the task board, notes page and admin panel
perform: completing and assigning tasks, resolving assignees and building
the admin assignment overview.
"""

import logging
from collections import Counter

from taskboard.errors import NotFoundError
from taskboard.models import Priority, Task, TaskStatus, TaskUpdate, User, UserCreate, UserUpdate
from taskboard.sources.base import DataSource

logger = logging.getLogger(__name__)


class BoardService:
    def __init__(self, source: DataSource) -> None:
        self.source = source

    async def complete_task(self, task_id: str) -> Task:
        """Mark a task as done (the swipe-to-complete action)."""
        return await self.source.update_task(task_id, TaskUpdate(status=TaskStatus.DONE))

    async def assign_task(self, task_id: str, user_id: str | None) -> Task:
        task = await self.source.assign_task(task_id, user_id)
        logger.info("Task %s assigned to %s", task_id, user_id or "nobody")
        return task

    async def task_with_assignee(self, task_id: str) -> tuple[Task, User | None]:
        """Fetch a task together with its assigned user.

        The assignee is not a validated reference: an unknown user id
        resolves to None instead of failing the whole lookup.
        """
        task = await self.source.get_task(task_id)
        if not task.assigned_to:
            return task, None
        try:
            user = await self.source.get_user(task.assigned_to)
        except NotFoundError:
            logger.warning("Task %s is assigned to unknown user %s", task_id, task.assigned_to)
            return task, None
        return task, user

    async def assignment_overview(self) -> dict[str | None, list[Task]]:
        """Tasks grouped by assignee for every listed user.

        Unassigned tasks, and tasks assigned to users that no longer
        exist, are grouped under None.
        """
        users = await self.source.list_users()
        tasks = await self.source.list_tasks()

        overview: dict[str | None, list[Task]] = {u.id: [] for u in users}
        overview[None] = []
        for task in tasks:
            key = task.assigned_to if task.assigned_to in overview else None
            overview[key].append(task)
        return overview

    async def save_user(self, user_id: str | None, data: UserCreate | UserUpdate) -> User:
        """Create a user when no id is given, otherwise update it."""
        if user_id is None:
            if not isinstance(data, UserCreate):
                raise TypeError("Creating a user requires a UserCreate payload")
            return await self.source.create_user(data)
        if isinstance(data, UserCreate):
            data = UserUpdate(**data.model_dump())
        return await self.source.update_user(user_id, data)

    async def task_counts(self) -> dict[str, int]:
        """Dashboard stats: total, one count per status and high-priority tasks."""
        tasks = await self.source.list_tasks()
        counts = Counter(TaskStatus(t.status).value for t in tasks)
        stats = {"total": len(tasks)}
        stats.update({status.value: counts.get(status.value, 0) for status in TaskStatus})
        stats["high_priority"] = sum(1 for t in tasks if t.priority == Priority.HIGH)
        return stats
