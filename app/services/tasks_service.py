import logging
from typing import List

from sqlalchemy.orm import Session

from app.models.tasks import Task, DEFAULT_DESCRIPTION
from app.repositories import task_repository
from app.schemas import tasks as task_schema
from app.utils.auth import CurrentUser
from app.utils.exceptions import NotFoundError

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found!"

LIST_FIELDS = ["id", "title"]


class TasksService:
    """Task operations. Every query is filtered by the caller's id."""

    @staticmethod
    def create(db: Session, caller: CurrentUser, payload: task_schema.TaskCreate) -> Task:
        task = task_repository.save(db, {
            "title": payload.title,
            "description": payload.description or DEFAULT_DESCRIPTION,
            "user_id": caller.id,
        })
        logger.info(f"Task {task.id} created for user {caller.id}")
        return task

    @staticmethod
    def list(db: Session, caller: CurrentUser) -> List[Task]:
        return task_repository.find_all(db, where={"user_id": caller.id}, select=LIST_FIELDS)

    @staticmethod
    def get_by_id(db: Session, caller: CurrentUser, task_id: int) -> Task:
        task = task_repository.find_one(db, where={"id": task_id, "user_id": caller.id})
        if not task:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    @staticmethod
    def update(db: Session, caller: CurrentUser, task_id: int, payload: task_schema.TaskUpdate) -> Task:
        # same ownership check as get/delete before anything is written
        TasksService.get_by_id(db, caller, task_id)

        task = task_repository.update(db, task_id, payload.model_dump(exclude_unset=True))
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)

        logger.info(f"Task {task.id} updated by user {caller.id}")
        return task

    @staticmethod
    def delete(db: Session, caller: CurrentUser, task_id: int) -> task_schema.TaskOut:
        task = TasksService.get_by_id(db, caller, task_id)

        # keep what the caller gets back before the row is gone
        deleted = task_schema.TaskOut.model_validate(task)
        task_repository.delete(db, task_id)

        logger.info(f"Task {task_id} deleted by user {caller.id}")
        return deleted
