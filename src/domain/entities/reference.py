"""
Reference Entities

Rank and department tables. Both are descriptive metadata for display and
sorting; neither grants any capability.
"""

from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel


class Rank(SQLModel, table=True):
    """Hierarchical title, level 1 (highest) to 9 (lowest)"""

    __tablename__ = "ranks"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=20)
    name: str = Field(max_length=100)
    level: int
    description: Optional[str] = Field(default=None, max_length=255)


class Department(SQLModel, table=True):
    __tablename__ = "departments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=20)
    name: str = Field(unique=True, max_length=100)
    description: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)


DEFAULT_RANKS = [
    ("cg", "Commissioner General", 1, "Highest authority"),
    ("dcg", "Deputy Commissioner General", 2, "Regional oversight and policy"),
    ("dg", "Director General", 3, "Department head"),
    ("dir", "Director", 4, "Division head"),
    ("dd", "Deputy Director", 5, "Team oversight"),
    ("tl", "Team Leader", 6, "Team management"),
    ("so", "Senior Officer", 7, "Senior operational tasks"),
    ("off", "Officer", 8, "Regular operational tasks"),
    ("ao", "Assistant Officer", 9, "Basic operational tasks"),
]

DEFAULT_DEPARTMENTS = [
    ("REV", "Revenue Monitoring", "Tax revenue collection and monitoring"),
    ("CUST", "Customs Operations", "Import/Export customs management"),
    ("AUDIT", "Audit and Investigation", "Tax audit and compliance investigation"),
    ("COMP", "Compliance and Enforcement", "Tax compliance enforcement"),
    ("IT", "Information Technology", "IT infrastructure and systems"),
    ("LEGAL", "Legal Affairs", "Legal matters and dispute resolution"),
    ("HR", "Human Resources", "Personnel management"),
    ("FIN", "Finance and Administration", "Financial management"),
]
