from .user import User
from .tasks import Task
