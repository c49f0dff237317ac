from .team import Team
from .user import User, UserRole
from .task import Task, TaskStatus, TaskPriority
from .comment import Comment
