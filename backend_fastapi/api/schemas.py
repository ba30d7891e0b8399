from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from core.domain.models.task import Task


class TaskOut(BaseModel):
    """
    Representación pública de una tarea.
    """

    id: str
    title: str
    description: str
    completed: bool
    duration: int | None = None

    @classmethod
    def from_domain(cls, task: Task) -> "TaskOut":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            duration=task.duration,
        )


class AddTaskIn(BaseModel):
    title: str = Field(min_length=1)
    description: str
    completed: bool
    duration: int | None = Field(default=None, ge=0)


class ChangeDescriptionIn(BaseModel):
    description: str


class TaskIdArgs(BaseModel):
    id: str


class ChangeDescriptionArgs(BaseModel):
    id: str
    description: str


class NoArgs(BaseModel):
    pass


class GetTaskRequest(BaseModel):
    operation: Literal["getTask"]
    arguments: TaskIdArgs


class ListTasksRequest(BaseModel):
    operation: Literal["listTasks"]
    arguments: NoArgs = Field(default_factory=NoArgs)


class AddTaskRequest(BaseModel):
    operation: Literal["addTask"]
    arguments: AddTaskIn


class CompleteTaskRequest(BaseModel):
    operation: Literal["completeTask"]
    arguments: TaskIdArgs


class ChangeDescriptionRequest(BaseModel):
    operation: Literal["changeDescription"]
    arguments: ChangeDescriptionArgs


class DeleteTaskRequest(BaseModel):
    operation: Literal["deleteTask"]
    arguments: TaskIdArgs


OperationRequest = Annotated[
    Union[
        GetTaskRequest,
        ListTasksRequest,
        AddTaskRequest,
        CompleteTaskRequest,
        ChangeDescriptionRequest,
        DeleteTaskRequest,
    ],
    Field(discriminator="operation"),
]


class OperationResponse(BaseModel):
    """
    Respuesta del endpoint de operaciones. Un id inexistente se propaga como
    null en el campo de la operación, no como error.
    """

    data: dict[str, TaskOut | list[TaskOut] | None]
