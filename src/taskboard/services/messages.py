"""User-facing failure messages.

Every failure collapses to one generic message per action and entity; the
underlying cause is only logged.
"""

_ENTITIES = {
    "task": ("la tarea", "las tareas"),
    "note": ("la nota", "las notas"),
    "user": ("el usuario", "los usuarios"),
}

_ACTIONS = {
    "load": "No se pudieron cargar {plural}.",
    "create": "No se pudo crear {singular}.",
    "save": "No se pudo guardar {singular}.",
    "delete": "No se pudo eliminar {singular}.",
    "assign": "No se pudo asignar {singular}.",
}

GENERIC_ERROR = "Ha ocurrido un error. Inténtalo de nuevo."


def failure_message(action: str, entity: str) -> str:
    """Return the inline alert text shown when an action on an entity fails."""
    template = _ACTIONS.get(action)
    names = _ENTITIES.get(entity)
    if template is None or names is None:
        return GENERIC_ERROR
    singular, plural = names
    return template.format(singular=singular, plural=plural)
