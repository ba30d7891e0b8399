import os
import threading

from core.domain.models.task import Task
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

_store: InMemoryTaskRepository | None = None
_store_lock = threading.Lock()

_DEMO_TASKS = (
    ("A", "Primera tarea de ejemplo"),
    ("B", "Segunda tarea de ejemplo"),
)


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _seed(store: InMemoryTaskRepository) -> None:
    for title, description in _DEMO_TASKS:
        store.add(
            Task(
                id=store.next_id(),
                title=title,
                description=description,
                completed=False,
            )
        )


def get_store() -> InMemoryTaskRepository:
    """
    Obtiene el almacén de tareas del proceso (Singleton).

    Si SEED_DEMO_TASKS está activo, el almacén arranca con dos tareas de ejemplo.
    """
    global _store
    with _store_lock:
        if _store is None:
            _store = InMemoryTaskRepository()
            if _as_bool(os.getenv("SEED_DEMO_TASKS", "false")):
                _seed(_store)
        return _store


def reset_store() -> None:
    """Descarta el almacén actual. El próximo get_store() crea uno nuevo."""
    global _store
    with _store_lock:
        _store = None
