"""Pure list filtering and sorting for tasks, notes and users.

None of these functions mutate their input. Sorting is stable: records with
equal keys keep their input order.
"""

from dataclasses import dataclass, replace

from taskboard.models import Note, Priority, Task, TaskStatus, User

ALL = "all"

PRIORITY_RANK = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}
STATUS_RANK = {TaskStatus.IN_PROGRESS: 0, TaskStatus.PENDING: 1, TaskStatus.DONE: 2}


def _matches(term: str, *fields: str) -> bool:
    term = term.lower()
    return any(term in (f or "").lower() for f in fields)


# ── Tasks ──────────────────────────────────────────────────


@dataclass(frozen=True)
class TaskFilter:
    status: str = ALL
    priority: str = ALL
    search_term: str = ""
    high_priority_only: bool = False
    assigned_to: str | None = None


def filter_tasks(tasks: list[Task], flt: TaskFilter) -> list[Task]:
    result = list(tasks)
    if flt.high_priority_only:
        result = [t for t in result if t.priority == Priority.HIGH]
    if flt.assigned_to:
        result = [t for t in result if t.assigned_to == flt.assigned_to]
    if flt.status != ALL:
        result = [t for t in result if t.status == flt.status]
    if flt.priority != ALL:
        result = [t for t in result if t.priority == flt.priority]
    if flt.search_term:
        result = [t for t in result if _matches(flt.search_term, t.title, t.description)]
    return result


def _due_key(task: Task) -> tuple[bool, float]:
    # tasks without a due date go last
    if task.due_date is None:
        return (True, 0.0)
    return (False, task.due_date.timestamp())


_TASK_KEYS = {
    "due_date": _due_key,
    "priority": lambda t: PRIORITY_RANK[Priority(t.priority)],
    "status": lambda t: STATUS_RANK[TaskStatus(t.status)],
    "title": lambda t: t.title.casefold(),
}


def sort_tasks(tasks: list[Task], by: str = "due_date", descending: bool = False) -> list[Task]:
    """Return tasks sorted by due_date, priority, status or title.

    With descending=True missing due dates still sort last.
    """
    if by not in _TASK_KEYS:
        raise ValueError(f"Unknown task sort key: {by}")
    if by == "due_date" and descending:
        dated = [t for t in tasks if t.due_date is not None]
        undated = [t for t in tasks if t.due_date is None]
        return sorted(dated, key=_due_key, reverse=True) + undated
    return sorted(tasks, key=_TASK_KEYS[by], reverse=descending)


# ── Notes ──────────────────────────────────────────────────


@dataclass(frozen=True)
class NoteFilter:
    category: str | None = None  # fixed by the page, not by the user
    search_term: str = ""
    filter_category: str = ALL
    filter_priority: str = ALL

    @property
    def has_active_filters(self) -> bool:
        return bool(self.search_term) or self.filter_category != ALL or self.filter_priority != ALL

    def cleared(self) -> "NoteFilter":
        return replace(self, search_term="", filter_category=ALL, filter_priority=ALL)


def filter_notes(notes: list[Note], flt: NoteFilter) -> list[Note]:
    result = list(notes)
    if flt.category:
        result = [n for n in result if n.category == flt.category]
    if flt.search_term:
        result = [n for n in result if _matches(flt.search_term, n.title, n.content)]
    if flt.filter_category != ALL:
        result = [n for n in result if n.category == flt.filter_category]
    if flt.filter_priority != ALL:
        result = [n for n in result if n.priority == flt.filter_priority]
    return result


_NOTE_KEYS = {
    "updated_at": lambda n: n.updated_at.timestamp(),
    "created_at": lambda n: n.created_at.timestamp(),
    "priority": lambda n: PRIORITY_RANK[Priority(n.priority)],
    "title": lambda n: n.title.casefold(),
}


def sort_notes(notes: list[Note], by: str = "updated_at", descending: bool = True) -> list[Note]:
    if by not in _NOTE_KEYS:
        raise ValueError(f"Unknown note sort key: {by}")
    return sorted(notes, key=_NOTE_KEYS[by], reverse=descending)


# ── Users ──────────────────────────────────────────────────


def filter_users(users: list[User], role: str = ALL, search_term: str = "") -> list[User]:
    result = list(users)
    if role != ALL:
        result = [u for u in result if u.role == role]
    if search_term:
        result = [u for u in result if _matches(search_term, u.name, u.email, u.department)]
    return result
