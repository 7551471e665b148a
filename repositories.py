from dataclasses import dataclass
from typing import List, Optional, Tuple
from sqlalchemy.orm import selectinload
from sqlalchemy import func
from sqlmodel import Session, col, select
from models import Task, TodoList


@dataclass(frozen=True)
class TaskQuery:
    """
    Filter for task lookups

    Attributes:
        todo_list_id: List the tasks belong to
        completion_status: Match only completed (True) or pending (False) tasks
        completed_after_due: Match only tasks whose completion time is later
            than their due time
    """
    todo_list_id: int
    completion_status: Optional[bool] = None
    completed_after_due: bool = False

    def apply(self, statement):
        statement = statement.where(Task.todo_list_id == self.todo_list_id)

        if self.completion_status is not None:
            statement = statement.where(Task.completion_status == self.completion_status)

        if self.completed_after_due:
            statement = statement.where(
                col(Task.completion_date_time) > col(Task.due_date_time)
            )

        return statement


class TaskRepository:
    """Read-only access to tasks"""

    def __init__(self, session: Session):
        self.session = session

    def count(self, query: TaskQuery) -> int:
        statement = query.apply(select(func.count(Task.id)))
        return self.session.exec(statement).one()

    def find_all(self, query: TaskQuery) -> List[Task]:
        """Tasks matching the query, oldest completion first"""
        statement = query.apply(select(Task)).order_by(
            col(Task.completion_date_time).asc(),
            col(Task.id).asc()
        )
        return list(self.session.exec(statement).all())

    def find_and_count_all(self, query: TaskQuery) -> Tuple[int, List[Task]]:
        return self.count(query), self.find_all(query)


class TodoListRepository:
    """Read-only access to to-do lists"""

    def __init__(self, session: Session):
        self.session = session

    def find_one_by_user(self, user_id: str) -> Optional[TodoList]:
        """
        Get the list owned by a user, with its tasks loaded

        Returns:
            The TodoList, or None if the user has not created one yet
        """
        statement = (
            select(TodoList)
            .where(TodoList.user_id == user_id)
            .options(selectinload(TodoList.tasks))
        )
        return self.session.exec(statement).first()
