from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class ChangeDescriptionCommand:
    id: str
    description: str


class ChangeDescriptionUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ChangeDescriptionCommand) -> Task | None:
        def change(task: Task) -> None:
            task.description = cmd.description

        return self._repository.update(cmd.id, change)
