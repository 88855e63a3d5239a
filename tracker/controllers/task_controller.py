from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from tracker.core.deps import get_task_service
from tracker.schemas.task import (
    TaskAssignRequest,
    TaskCreateRequest,
    TaskDueDateRequest,
    TaskPriorityUpdateRequest,
    TaskResponse,
    TaskStatusUpdateRequest,
    TaskUpdateRequest,
)
from tracker.services.task_service import TaskService
from tracker.utils.timezone import to_utc_millis
from tracker.validation import validate_task

router = APIRouter()


# =================================================================
# 1. 작업 조회 (GET /tasks/{task_id})
# =================================================================
@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    task = await service.get_task(task_id)
    return TaskResponse.from_entity(task)


# =================================================================
# 2. 작업 생성 (POST /tasks)
# =================================================================
@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: TaskCreateRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.create_task(
        project_id=payload.project_id,
        title=payload.title,
        description=payload.description,
        priority=payload.priority,
        assignee_id=payload.assignee_id,
        due_date=payload.due_date,
        created_by=payload.created_by,
    )
    return TaskResponse.from_entity(task)


# =================================================================
# 3. 작업 수정 (PUT /tasks/{task_id})
# =================================================================
@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    payload: TaskUpdateRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.get_task(task_id)
    actor = payload.updated_by
    if payload.title != task.title:
        task.update_title(payload.title, actor)
    if payload.description != task.description:
        task.update_description(payload.description, actor)
    if payload.status != task.status:
        task.update_status(payload.status, actor)
    if payload.priority != task.priority:
        task.update_priority(payload.priority, actor)
    if payload.assignee_id != task.assignee_id:
        task.assign_to(payload.assignee_id, actor)
    if to_utc_millis(payload.due_date) != task.due_date:
        task.set_due_date(payload.due_date, actor)

    validate_task(task)
    await service.update_task(task)
    return TaskResponse.from_entity(task)


# =================================================================
# 4. 단일 필드 변경 (PATCH)
# =================================================================
@router.patch("/{task_id}/status", response_model=TaskResponse)
async def update_task_status(
    task_id: UUID,
    payload: TaskStatusUpdateRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.update_task_status(task_id, payload.status, payload.updated_by)
    return TaskResponse.from_entity(task)


@router.patch("/{task_id}/priority", response_model=TaskResponse)
async def update_task_priority(
    task_id: UUID,
    payload: TaskPriorityUpdateRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.update_task_priority(task_id, payload.priority, payload.updated_by)
    return TaskResponse.from_entity(task)


@router.patch("/{task_id}/assignee", response_model=TaskResponse)
async def assign_task(
    task_id: UUID,
    payload: TaskAssignRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.assign_task(task_id, payload.assignee_id, payload.updated_by)
    return TaskResponse.from_entity(task)


@router.patch("/{task_id}/due-date", response_model=TaskResponse)
async def set_task_due_date(
    task_id: UUID,
    payload: TaskDueDateRequest,
    service: TaskService = Depends(get_task_service),
):
    task = await service.set_task_due_date(task_id, payload.due_date, payload.updated_by)
    return TaskResponse.from_entity(task)


# =================================================================
# 5. 작업 삭제 (DELETE /tasks/{task_id})
# =================================================================
@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
