"""
Business logic services.
"""

from services.task_sheet_service import TaskSheetService, get_task_sheet_service

__all__ = [
    "TaskSheetService",
    "get_task_sheet_service",
]
