from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlmodel import Session
from database import get_session
from models import User
from repositories import TaskRepository, TodoListRepository
from schemas import (
    ApiResponse,
    AvgTasksPerDay,
    DateWithMostCompletedTasks,
    TasksNotCompletedOnTime,
)
from services.reports import ReportsService
from middleware.auth import verify_jwt_middleware, ensure_same_user
from config import REPORTS_TIMEZONE

router = APIRouter()


def get_reports_service(session: Session = Depends(get_session)) -> ReportsService:
    """Build a reports service bound to the request's session"""
    return ReportsService(
        TaskRepository(session),
        TodoListRepository(session),
        tz=REPORTS_TIMEZONE
    )


def get_report_user(
    user_id: str,
    request: Request,
    session: Session = Depends(get_session)
) -> User:
    """
    Resolve the user a report is requested for

    Raises:
        HTTPException: 403 for another user's id, 404 if the user is unknown
    """
    ensure_same_user(request, user_id)

    user = session.get(User, user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user


@router.get("/{user_id}/reports/task-count", dependencies=[Depends(verify_jwt_middleware)])
async def task_count(
    user: User = Depends(get_report_user),
    reports: ReportsService = Depends(get_reports_service)
) -> ApiResponse:
    """
    Get total, completed and remaining tasks of the user's list

    Args:
        user: User resolved from the URL and token
        reports: Reports service

    Returns:
        ApiResponse with the task counts
    """
    return ApiResponse(
        success=True,
        data=reports.get_task_count(user).model_dump()
    )


@router.get("/{user_id}/reports/avg-tasks-per-day", dependencies=[Depends(verify_jwt_middleware)])
async def avg_tasks_per_day(
    user: User = Depends(get_report_user),
    reports: ReportsService = Depends(get_reports_service)
) -> ApiResponse:
    """
    Get completed tasks per day since the account was created

    Args:
        user: User resolved from the URL and token
        reports: Reports service

    Returns:
        ApiResponse with the average, rounded down
    """
    report = AvgTasksPerDay(avg_tasks_per_day=reports.get_avg_tasks_per_day(user))
    return ApiResponse(success=True, data=report.model_dump())


@router.get(
    "/{user_id}/reports/tasks-not-completed-on-time",
    dependencies=[Depends(verify_jwt_middleware)]
)
async def tasks_not_completed_on_time(
    user: User = Depends(get_report_user),
    reports: ReportsService = Depends(get_reports_service)
) -> ApiResponse:
    """
    Get the number of tasks completed after their due date

    Args:
        user: User resolved from the URL and token
        reports: Reports service

    Returns:
        ApiResponse with the late completion count
    """
    report = TasksNotCompletedOnTime(
        tasks_not_completed_on_time=reports.get_tasks_not_completed_on_time(user)
    )
    return ApiResponse(success=True, data=report.model_dump())


@router.get(
    "/{user_id}/reports/date-with-most-completed-tasks",
    dependencies=[Depends(verify_jwt_middleware)]
)
async def date_with_most_completed_tasks(
    user: User = Depends(get_report_user),
    reports: ReportsService = Depends(get_reports_service)
) -> ApiResponse:
    """
    Get the date (YYYY-MM-DD) with the most completed tasks

    Args:
        user: User resolved from the URL and token
        reports: Reports service

    Returns:
        ApiResponse with the date, or null when no task is completed
    """
    report = DateWithMostCompletedTasks(
        date=reports.get_date_with_most_completed_tasks(user)
    )
    return ApiResponse(success=True, data=report.model_dump(mode="json"))
