# app/routers/tasks.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas import tasks as task_schema
from app.services.tasks_service import TasksService
from app.utils.auth import CurrentUser, get_current_user

# every task route needs a valid bearer token
router = APIRouter(dependencies=[Depends(get_current_user)])

@router.post("/create", response_model=task_schema.TaskOut, status_code=status.HTTP_201_CREATED)
def create_task(
    task: task_schema.TaskCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return TasksService.create(db, current_user, task)

@router.get("/", response_model=List[task_schema.TaskOut])
def get_tasks(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Only the caller's own tasks"""
    return TasksService.list(db, current_user)

@router.get("/{task_id}", response_model=task_schema.TaskOut)
def get_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return TasksService.get_by_id(db, current_user, task_id)

@router.put("/update/{task_id}", response_model=task_schema.TaskOut)
def update_task(
    task_id: int,
    task_update: task_schema.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    return TasksService.update(db, current_user, task_id, task_update)

@router.delete("/{task_id}", response_model=task_schema.TaskOut)
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
):
    """Delete one of the caller's tasks and return what was removed"""
    return TasksService.delete(db, current_user, task_id)
