"""ORM Models — SQLAlchemy declarative models for users, projects and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata holds every table before create_all

Design Decisions:
    - No relationship() declarations: deleting a parent must not touch child rows,
      and ORM cascades would null or delete them
"""

from task_api.models.user import User  # noqa: F401
from task_api.models.project import Project  # noqa: F401
from task_api.models.task import Task  # noqa: F401
