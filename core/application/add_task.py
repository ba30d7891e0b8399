from dataclasses import dataclass

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class AddTaskCommand:
    title: str
    description: str
    completed: bool
    duration: int | None = None


class AddTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: AddTaskCommand) -> Task:
        task = Task(
            id=self._repository.next_id(),
            title=cmd.title,
            description=cmd.description,
            completed=cmd.completed,
            duration=cmd.duration,
        )
        self._repository.add(task)
        return task
