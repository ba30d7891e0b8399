import logging
import os

from core.application.add_task import AddTaskUseCase
from core.application.change_description import ChangeDescriptionUseCase
from core.application.complete_task import CompleteTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.session.store import get_store

logger = logging.getLogger(__name__)

_SUPPORTED_STORES = {"memory"}


def get_task_repository() -> TaskRepository:
    store = os.getenv("TASK_STORE", "memory").lower()

    if store not in _SUPPORTED_STORES:
        raise ValueError(
            f"TASK_STORE={store!r} no soportado "
            f"(opciones: {', '.join(sorted(_SUPPORTED_STORES))})"
        )
    logger.debug("Usando almacén de tareas %r", store)
    return get_store()


def get_get_task_use_case() -> GetTaskUseCase:
    return GetTaskUseCase(repository=get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository())


def get_add_task_use_case() -> AddTaskUseCase:
    return AddTaskUseCase(repository=get_task_repository())


def get_complete_task_use_case() -> CompleteTaskUseCase:
    return CompleteTaskUseCase(repository=get_task_repository())


def get_change_description_use_case() -> ChangeDescriptionUseCase:
    return ChangeDescriptionUseCase(repository=get_task_repository())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository())
