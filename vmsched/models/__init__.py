"""数据模型层"""

from .vm import VM
from .task import Task
from .outcome import TaskOutcome, STATUS_SUCCESS
from .pool import VMPool

__all__ = ["VM", "Task", "TaskOutcome", "STATUS_SUCCESS", "VMPool"]
