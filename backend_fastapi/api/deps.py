from core.application.add_task import AddTaskUseCase
from core.application.change_description import ChangeDescriptionUseCase
from core.application.complete_task import CompleteTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from infrastructure.container import (
    get_add_task_use_case,
    get_change_description_use_case,
    get_complete_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
)


def get_task_use_case() -> GetTaskUseCase:
    return get_get_task_use_case()


def list_tasks_use_case() -> ListTasksUseCase:
    return get_list_tasks_use_case()


def add_task_use_case() -> AddTaskUseCase:
    return get_add_task_use_case()


def complete_task_use_case() -> CompleteTaskUseCase:
    return get_complete_task_use_case()


def change_description_use_case() -> ChangeDescriptionUseCase:
    return get_change_description_use_case()


def delete_task_use_case() -> DeleteTaskUseCase:
    return get_delete_task_use_case()
