import logging
from datetime import date, datetime, timezone, tzinfo
from typing import Callable, Dict, Optional
from models import TodoList, User, utc_now
from repositories import TaskQuery, TaskRepository, TodoListRepository
from schemas import TaskCount

logger = logging.getLogger(__name__)


def to_local_date(value: datetime, tz: tzinfo) -> date:
    """
    Truncate a timestamp to its calendar date in the given timezone

    Naive timestamps are stored as UTC, so they are read as UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz).date()


class ReportsService:
    """
    Aggregate statistics over a single user's to-do list

    Every report fetches its data fresh. A user who has not created a list
    yet gets zero/empty results rather than an error. Database errors are
    not caught here.
    """

    def __init__(
        self,
        tasks: TaskRepository,
        todo_lists: TodoListRepository,
        tz: tzinfo = timezone.utc,
        clock: Callable[[], datetime] = utc_now
    ):
        self.tasks = tasks
        self.todo_lists = todo_lists
        self.tz = tz
        self.clock = clock

    def _get_todo_list_by_user(self, user_id: str) -> Optional[TodoList]:
        return self.todo_lists.find_one_by_user(user_id)

    def get_task_count(self, user: User) -> TaskCount:
        todo_list = self._get_todo_list_by_user(user.id)
        if not todo_list:
            return TaskCount(total_tasks=0, completed_tasks=0, remaining_tasks=0)

        total, tasks = self.tasks.find_and_count_all(TaskQuery(todo_list_id=todo_list.id))
        completed = sum(1 for task in tasks if task.completion_status)

        logger.debug(f"Task count for user {user.id}: {completed}/{total} completed")
        return TaskCount(
            total_tasks=total,
            completed_tasks=completed,
            remaining_tasks=total - completed
        )

    def days_since_account_creation(self, user: User) -> int:
        today = to_local_date(self.clock(), self.tz)
        return (today - to_local_date(user.created_at, self.tz)).days

    def get_avg_tasks_per_day(self, user: User) -> int:
        """
        Completed tasks per day since signup, rounded down

        Returns 0 on the day the account was created.
        """
        todo_list = self._get_todo_list_by_user(user.id)
        if not todo_list:
            return 0

        days = self.days_since_account_creation(user)
        if days <= 0:
            return 0

        completed = self.tasks.count(
            TaskQuery(todo_list_id=todo_list.id, completion_status=True)
        )
        logger.debug(f"User {user.id} completed {completed} tasks in {days} days")
        return completed // days

    def get_tasks_not_completed_on_time(self, user: User) -> int:
        """Completed tasks whose completion time is after their due time"""
        todo_list = self._get_todo_list_by_user(user.id)
        if not todo_list:
            return 0

        late = self.tasks.count(
            TaskQuery(
                todo_list_id=todo_list.id,
                completion_status=True,
                completed_after_due=True
            )
        )
        logger.debug(f"User {user.id} completed {late} tasks after their due date")
        return late

    def get_date_with_most_completed_tasks(self, user: User) -> Optional[date]:
        """
        The calendar date on which the user completed the most tasks

        Tasks are read in ascending completion time, so dates are counted in
        ascending order and a tie goes to the earliest date.
        """
        todo_list = self._get_todo_list_by_user(user.id)
        if not todo_list:
            return None

        tasks = self.tasks.find_all(
            TaskQuery(todo_list_id=todo_list.id, completion_status=True)
        )

        tasks_by_date: Dict[date, int] = {}
        for task in tasks:
            if task.completion_date_time is None:
                continue
            day = to_local_date(task.completion_date_time, self.tz)
            tasks_by_date[day] = tasks_by_date.get(day, 0) + 1

        max_date = None
        max_count = 0
        for day, count in tasks_by_date.items():
            if count > max_count:
                max_count = count
                max_date = day

        logger.debug(f"Most completed tasks for user {user.id}: {max_count} on {max_date}")
        return max_date
