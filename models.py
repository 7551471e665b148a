from sqlmodel import SQLModel, Field, Relationship
from datetime import datetime, timezone
from typing import List, Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """Shadow Better Auth user table; only the columns reports read."""
    __tablename__ = "user"

    id: str = Field(primary_key=True)
    # Better Auth stores camelCase column names.
    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column_kwargs={"name": "createdAt"}
    )


class TodoList(SQLModel, table=True):
    """One to-do list per user, created at registration"""
    __tablename__ = "todo_lists"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(foreign_key="user.id", unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)

    user: Optional[User] = Relationship()
    tasks: List["Task"] = Relationship(back_populates="todo_list")


class Task(SQLModel, table=True):
    """Task model for todo items"""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    todo_list_id: int = Field(foreign_key="todo_lists.id", index=True)
    title: str = Field(max_length=200)
    description: Optional[str] = None
    completion_status: bool = Field(default=False)
    completion_date_time: Optional[datetime] = None
    due_date_time: datetime
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    todo_list: Optional[TodoList] = Relationship(back_populates="tasks")
