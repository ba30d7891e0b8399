import logging
import threading
from typing import Callable
from dataclasses import replace
from itertools import count

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class InMemoryTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository en memoria del proceso.

    - Las tareas se guardan en un dict, que conserva el orden de inserción.
    - Los ids salen de un contador monotónico: un id borrado no se reutiliza.
    - Todas las operaciones se serializan con un RLock (FastAPI ejecuta los
      endpoints síncronos en un pool de threads).
    - Nunca se entregan referencias internas: entradas y salidas se copian.
    """

    def __init__(self) -> None:
        self._data: dict[str, Task] = {}
        self._ids = count(1)
        self._lock = threading.RLock()

    def next_id(self) -> str:
        with self._lock:
            return str(next(self._ids))

    def list(self) -> list[Task]:
        """
        Lista todas las tareas vivas en orden de inserción.

        Retorna:
            list[Task]: Copia de las tareas en el momento de la llamada.
        """
        with self._lock:
            return [replace(task) for task in self._data.values()]

    def add(self, task: Task) -> None:
        """
        Agrega una tarea nueva.

        Argumentos:
            task (Task): La tarea a guardar. Su id debe venir de next_id().
        """
        with self._lock:
            if task.id in self._data:
                raise ValueError(f"Ya existe una tarea con id {task.id}")
            self._data[task.id] = replace(task)
        logger.debug("Tarea %s agregada", task.id)

    def update(self, task_id: str, change: Callable[[Task], None]) -> Task | None:
        """
        Modifica una tarea existente sin alterar su posición. La lectura, el
        cambio y la escritura ocurren bajo el mismo lock.

        Argumentos:
            task_id (str): El id de la tarea.
            change (Callable[[Task], None]): Muta la copia de trabajo de la tarea.

        Retorna:
            Task | None: La tarea actualizada, o None si el id no existe.
        """
        with self._lock:
            current = self._data.get(task_id)
            if current is None:
                logger.info("Tarea %s no encontrada al actualizar", task_id)
                return None
            task = replace(current)
            change(task)
            self._data[task_id] = task
            logger.debug("Tarea %s actualizada", task_id)
            return replace(task)

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
            if task is None:
                logger.info("Tarea %s no encontrada", task_id)
                return None
            return replace(task)

    def delete(self, task_id: str) -> Task | None:
        """
        Elimina una tarea por su id.

        Retorna:
            Task | None: El último estado de la tarea eliminada, o None.
        """
        with self._lock:
            task = self._data.pop(task_id, None)
        if task is None:
            logger.info("Tarea %s no encontrada al eliminar", task_id)
            return None
        logger.debug("Tarea %s eliminada", task_id)
        return task
