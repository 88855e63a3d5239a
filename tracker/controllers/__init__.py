from .health_controller import router as health_router
from .project_controller import router as project_router
from .task_controller import router as task_router

API_PREFIX = "/api/v1"

# (router, prefix, tags) 순서로 정의
all_routers = [
    (health_router, "/health", "Health"),
    (project_router, f"{API_PREFIX}/projects", "Projects"),
    (task_router, f"{API_PREFIX}/tasks", "Tasks"),
]
