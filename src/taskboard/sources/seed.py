"""Demo dataset used by the fallback store and to seed a fresh database.

Timestamps are relative to the moment the dataset is built, so every call
returns fresh records.
"""

from datetime import datetime, timedelta

from taskboard.models import Note, Task, User, utcnow


def demo_tasks(now: datetime | None = None) -> list[Task]:
    now = now or utcnow()
    return [
        Task(
            id="1",
            title="Completar propuesta de proyecto",
            description="Terminar el borrador y enviar para revisión",
            status="in-progress",
            priority="high",
            due_date=now + timedelta(days=1),
            assigned_to="2",
        ),
        Task(
            id="2",
            title="Reunión semanal de equipo",
            description="Discutir el progreso del proyecto y los próximos pasos",
            status="pending",
            priority="high",
            due_date=now + timedelta(days=2),
        ),
        Task(
            id="3",
            title="Revisar comentarios del cliente",
            description="Revisar los comentarios y preparar respuestas",
            status="pending",
            priority="medium",
            due_date=now + timedelta(days=3),
            assigned_to="1",
        ),
        Task(
            id="4",
            title="Actualizar documentación",
            description="Añadir cambios recientes a la documentación del proyecto",
            status="pending",
            priority="low",
            due_date=now + timedelta(days=4),
        ),
    ]


def demo_notes(now: datetime | None = None) -> list[Note]:
    now = now or utcnow()
    day = timedelta(days=1)
    return [
        Note(
            id="1",
            title="Ideas para el nuevo proyecto",
            content=(
                "Implementar sistema de notificaciones push\n"
                "Mejorar la interfaz de usuario\n"
                "Añadir modo oscuro"
            ),
            category="idea",
            priority="high",
            created_at=now - day,
            updated_at=now - day,
        ),
        Note(
            id="2",
            title="Reunión con el cliente",
            content=(
                "Revisar los requisitos del proyecto\n"
                "Discutir el cronograma\n"
                "Definir entregables"
            ),
            category="meeting",
            priority="medium",
            created_at=now - 2 * day,
            updated_at=now - 2 * day,
        ),
        Note(
            id="3",
            title="Tareas pendientes",
            content=(
                "Comprar materiales de oficina\n"
                "Programar mantenimiento del servidor\n"
                "Actualizar documentación"
            ),
            category="todo",
            priority="low",
            created_at=now - 3 * day,
            updated_at=now - 3 * day,
        ),
    ]


def demo_users() -> list[User]:
    return [
        User(
            id="1",
            name="Juan Pérez",
            email="juan.perez@ejemplo.com",
            role="admin",
            department="Ingeniería",
            position="Desarrollador Senior",
        ),
        User(
            id="2",
            name="María García",
            email="maria.garcia@ejemplo.com",
            role="manager",
            department="Marketing",
            position="Gerente de Marketing",
        ),
        User(
            id="3",
            name="Roberto Rodríguez",
            email="roberto.rodriguez@ejemplo.com",
            role="user",
            department="Ventas",
            position="Representante de Ventas",
        ),
    ]
