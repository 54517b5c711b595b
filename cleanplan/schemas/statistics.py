import datetime
from pydantic import BaseModel, Field
from typing import List


class EmployeeStat(BaseModel):
    name: str
    count: int


class DayStat(BaseModel):
    date: datetime.date
    count: int


class Statistics(BaseModel):
    """Per-user dashboard figures."""
    total_orders: int = Field(..., description="Number of apartments owned by the user")
    top_employees: List[EmployeeStat] = Field(default_factory=list, description="Most assigned employees, best first")
    busiest_days: List[DayStat] = Field(default_factory=list, description="Days with most cleanings, busiest first")
