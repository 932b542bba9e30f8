from app.models import Task, User
from .base import Repository

user_repository = Repository(User)
task_repository = Repository(Task)
