from pydantic import BaseModel
from typing import Optional, Any
import datetime


class TaskCount(BaseModel):
    """Schema for task count report"""
    total_tasks: int
    completed_tasks: int
    remaining_tasks: int


class AvgTasksPerDay(BaseModel):
    """Schema for average completed tasks per day report"""
    avg_tasks_per_day: int


class TasksNotCompletedOnTime(BaseModel):
    """Schema for late completions report"""
    tasks_not_completed_on_time: int


class DateWithMostCompletedTasks(BaseModel):
    """Schema for most productive day report"""
    date: Optional[datetime.date] = None


class ApiResponse(BaseModel):
    """Standard API response wrapper"""
    success: bool
    data: Optional[Any] = None
    error: Optional[dict] = None
