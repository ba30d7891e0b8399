from abc import ABC, abstractmethod
from typing import Callable

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def next_id(self) -> str:
        """Reserva un id nuevo. Nunca devuelve uno ya emitido."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> None:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: str, change: Callable[[Task], None]) -> Task | None:
        """
        Aplica `change` sobre la tarea de forma atómica.
        None si el id no existe; en ese caso `change` no se ejecuta.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: str) -> Task | None:
        raise NotImplementedError
