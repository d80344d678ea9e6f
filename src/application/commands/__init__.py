"""
Application Commands (CQRS write side)

Contains:
    - CreateTaskCommand, UpdateTaskCommand: Task writes
    - RegisterUserCommand, LoginCommand: Authentication
"""

from src.application.commands.authenticate import LoginCommand, RegisterUserCommand
from src.application.commands.save_task import CreateTaskCommand, UpdateTaskCommand

__all__ = [
    "CreateTaskCommand",
    "UpdateTaskCommand",
    "RegisterUserCommand",
    "LoginCommand",
]
