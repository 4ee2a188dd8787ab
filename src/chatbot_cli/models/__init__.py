"""ChatBot CLI domain models.

Pydantic models for the three task variants, the task list that owns them,
and the application configuration. The error hierarchy lives in
``chatbot_cli.exceptions``.
"""

from .config_models import AppConfig
from .task import Deadline, Event, Task, Todo, decode_task, encode_task
from .task_list import TaskList

__all__ = [
    # Task models
    "Task",
    "Todo",
    "Deadline",
    "Event",
    "TaskList",
    "decode_task",
    "encode_task",
    # Config
    "AppConfig",
]
