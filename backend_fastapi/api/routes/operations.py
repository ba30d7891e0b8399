import logging

from fastapi import APIRouter, Depends, HTTPException

from backend_fastapi.api.deps import (
    add_task_use_case,
    change_description_use_case,
    complete_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
)
from backend_fastapi.api.schemas import (
    AddTaskRequest,
    ChangeDescriptionRequest,
    CompleteTaskRequest,
    GetTaskRequest,
    ListTasksRequest,
    OperationRequest,
    OperationResponse,
    TaskOut,
)
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

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/operations", tags=["operations"])


def _as_out(task: Task | None) -> TaskOut | None:
    return None if task is None else TaskOut.from_domain(task)


@router.post(
    "",
    response_model=OperationResponse,
    summary="Ejecutar una consulta o mutación sobre las tareas",
)
def run_operation(
    body: OperationRequest,
    get_uc: GetTaskUseCase = Depends(get_task_use_case),
    list_uc: ListTasksUseCase = Depends(list_tasks_use_case),
    add_uc: AddTaskUseCase = Depends(add_task_use_case),
    complete_uc: CompleteTaskUseCase = Depends(complete_task_use_case),
    change_uc: ChangeDescriptionUseCase = Depends(change_description_use_case),
    delete_uc: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> OperationResponse:
    """
    Despacha una operación con nombre contra el almacén de tareas.

    El cuerpo ya llega validado: una operación desconocida o argumentos con
    tipos incorrectos se rechazan con 422 antes de llegar aquí.

    - **operation**: getTask, listTasks, addTask, completeTask,
      changeDescription o deleteTask.
    - **arguments**: argumentos de la operación.

    Si el id no existe, el campo de la operación vale null.
    """
    args = body.arguments
    try:
        if isinstance(body, GetTaskRequest):
            result = _as_out(get_uc.execute(GetTaskCommand(id=args.id)))
        elif isinstance(body, ListTasksRequest):
            result = [TaskOut.from_domain(task) for task in list_uc.execute()]
        elif isinstance(body, AddTaskRequest):
            result = _as_out(
                add_uc.execute(
                    AddTaskCommand(
                        title=args.title,
                        description=args.description,
                        completed=args.completed,
                        duration=args.duration,
                    )
                )
            )
        elif isinstance(body, CompleteTaskRequest):
            result = _as_out(complete_uc.execute(CompleteTaskCommand(id=args.id)))
        elif isinstance(body, ChangeDescriptionRequest):
            result = _as_out(
                change_uc.execute(
                    ChangeDescriptionCommand(id=args.id, description=args.description)
                )
            )
        else:  # deleteTask
            result = _as_out(delete_uc.execute(DeleteTaskCommand(id=args.id)))
    except Exception as e:
        logger.exception("Falló la operación %s", body.operation)
        raise HTTPException(status_code=500, detail=str(e))

    return OperationResponse(data={body.operation: result})
