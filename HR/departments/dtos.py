from dataclasses import dataclass
from typing import Optional


@dataclass
class DepartmentCreateDTO:
    """DTO for creating a new department"""
    code: str
    name: str
    description: str = ''
    parent_id: Optional[int] = None  # None for top-level departments


@dataclass
class DepartmentUpdateDTO:
    """DTO for updating an existing department"""
    department_id: int  # Primary Key
    code: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    parent_id: Optional[int] = None
    # parent_id=None means "unchanged"; clear_parent moves the department to the top level
    clear_parent: bool = False
