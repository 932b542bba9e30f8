from .user import UserCreate, UserLogin, UserUpdate, UserOut, LogoutOut
from .tasks import TaskCreate, TaskUpdate, TaskOut
