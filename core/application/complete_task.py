from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class CompleteTaskCommand:
    id: str


def _mark_completed(task: Task) -> None:
    task.completed = True


class CompleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CompleteTaskCommand) -> Task | None:
        return self._repository.update(cmd.id, _mark_completed)
