"""ORM Models: tables backing the remote variant (companies, members, projects).

Invariants:
    - Column names are the snake_case record field names
    - Ids are strings assigned by the repository, never by the database
    - No ORM relationships: references are weak (lookup by id only)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/migrations
"""

from copejem.models.company import CompanyRow  # noqa: F401
from copejem.models.member import MemberRow  # noqa: F401
from copejem.models.project import ProjectRow  # noqa: F401
