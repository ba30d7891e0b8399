from fastapi import APIRouter, Depends, HTTPException, status

from backend_fastapi.api.deps import (
    add_task_use_case,
    change_description_use_case,
    complete_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
)
from backend_fastapi.api.schemas import AddTaskIn, ChangeDescriptionIn, TaskOut
from core.application.add_task import AddTaskCommand, AddTaskUseCase
from core.application.change_description import (
    ChangeDescriptionCommand,
    ChangeDescriptionUseCase,
)
from core.application.complete_task import CompleteTaskCommand, CompleteTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskCommand, GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.domain.models.task import Task

router = APIRouter(prefix="/tasks", tags=["tasks"])


def _found(task: Task | None, task_id: str) -> TaskOut:
    if task is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Tarea con id {task_id} no encontrada",
        )
    return TaskOut.from_domain(task)


@router.get(
    "",
    response_model=list[TaskOut],
    summary="Listar todas las tareas",
)
def list_tasks(
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> list[TaskOut]:
    """
    Obtiene todas las tareas, en el orden en que fueron creadas.
    """
    return [TaskOut.from_domain(task) for task in use_case.execute()]


@router.get(
    "/{task_id}",
    response_model=TaskOut,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> TaskOut:
    return _found(use_case.execute(GetTaskCommand(id=task_id)), task_id)


@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una nueva tarea",
)
def add_task(
    body: AddTaskIn,
    use_case: AddTaskUseCase = Depends(add_task_use_case),
) -> TaskOut:
    """
    Crea una nueva tarea en el sistema.

    - **title**: Título de la tarea (no vacío, inmutable).
    - **description**: Descripción de la tarea.
    - **completed**: Estado inicial de la tarea.
    - **duration**: Duración opcional en minutos.
    """
    task = use_case.execute(
        AddTaskCommand(
            title=body.title,
            description=body.description,
            completed=body.completed,
            duration=body.duration,
        )
    )
    return TaskOut.from_domain(task)


@router.post(
    "/{task_id}/complete",
    response_model=TaskOut,
    summary="Marcar una tarea como completada",
)
def complete_task(
    task_id: str,
    use_case: CompleteTaskUseCase = Depends(complete_task_use_case),
) -> TaskOut:
    return _found(use_case.execute(CompleteTaskCommand(id=task_id)), task_id)


@router.patch(
    "/{task_id}/description",
    response_model=TaskOut,
    summary="Cambiar la descripción de una tarea",
)
def change_description(
    task_id: str,
    body: ChangeDescriptionIn,
    use_case: ChangeDescriptionUseCase = Depends(change_description_use_case),
) -> TaskOut:
    """
    Reemplaza la descripción de una tarea existente.

    - **task_id**: Id de la tarea a modificar.
    - **description**: Nueva descripción.
    """
    task = use_case.execute(
        ChangeDescriptionCommand(id=task_id, description=body.description)
    )
    return _found(task, task_id)


@router.delete(
    "/{task_id}",
    response_model=TaskOut,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> TaskOut:
    """
    Elimina una tarea del sistema y devuelve su último estado.
    """
    return _found(use_case.execute(DeleteTaskCommand(id=task_id)), task_id)
