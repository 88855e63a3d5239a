from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from tracker.core.deps import get_project_service, get_task_service
from tracker.schemas.project import (
    ProjectCreateRequest,
    ProjectDetailsUpdateRequest,
    ProjectResponse,
    ProjectStatusUpdateRequest,
    ProjectUpdateRequest,
)
from tracker.schemas.task import TaskListResponse, TaskResponse
from tracker.services.project_service import ProjectService
from tracker.services.task_service import TaskService
from tracker.validation import validate_project

router = APIRouter()


# =================================================================
# 1. 프로젝트 조회 (GET /projects/{project_id})
# =================================================================
@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.get_project(project_id)
    return ProjectResponse.from_entity(project)


# =================================================================
# 2. 프로젝트 생성 (POST /projects)
# =================================================================
@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: ProjectCreateRequest,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.create_project(
        name=payload.name,
        description=payload.description,
        owner_id=payload.owner_id,
        created_by=payload.created_by,
    )
    return ProjectResponse.from_entity(project)


# =================================================================
# 3. 프로젝트 수정 (PUT /projects/{project_id})
# =================================================================
@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    payload: ProjectUpdateRequest,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.get_project(project_id)
    if payload.name != project.name:
        project.update_name(payload.name, payload.updated_by)
    if payload.description != project.description:
        project.update_description(payload.description, payload.updated_by)
    if payload.status != project.status:
        project.update_status(payload.status, payload.updated_by)

    validate_project(project)
    await service.update_project(project)
    return ProjectResponse.from_entity(project)


@router.patch("/{project_id}", response_model=ProjectResponse)
async def update_project_details(
    project_id: UUID,
    payload: ProjectDetailsUpdateRequest,
    service: ProjectService = Depends(get_project_service),
):
    changes = payload.model_dump(exclude_unset=True, exclude={"updated_by"})
    project = await service.update_project_details(project_id, payload.updated_by, **changes)
    return ProjectResponse.from_entity(project)


@router.patch("/{project_id}/status", response_model=ProjectResponse)
async def update_project_status(
    project_id: UUID,
    payload: ProjectStatusUpdateRequest,
    service: ProjectService = Depends(get_project_service),
):
    project = await service.update_project_status(project_id, payload.status, payload.updated_by)
    return ProjectResponse.from_entity(project)


# =================================================================
# 4. 프로젝트 삭제 (DELETE /projects/{project_id})
# =================================================================
@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: UUID,
    service: ProjectService = Depends(get_project_service),
):
    await service.delete_project(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =================================================================
# 5. 프로젝트의 작업 목록 (GET /projects/{project_id}/tasks)
# =================================================================
@router.get("/{project_id}/tasks", response_model=TaskListResponse)
async def get_project_tasks(
    project_id: UUID,
    service: TaskService = Depends(get_task_service),
):
    tasks = await service.get_tasks_by_project(project_id)
    return TaskListResponse(
        project_id=project_id,
        tasks=[TaskResponse.from_entity(task) for task in tasks],
    )
