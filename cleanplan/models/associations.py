"""
Association tables for many-to-many relationships.
Kept separate to avoid circular imports between models.
"""
from sqlalchemy import Column, Integer, Table, ForeignKey, UniqueConstraint
from cleanplan.models.base import Base

# One row per employee assigned to an apartment's cleaning job
assignments = Table(
    'assignments',
    Base.metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('apartment_id', Integer, ForeignKey('apartments.id', ondelete='CASCADE'), nullable=False, index=True),
    Column('employee_id', Integer, ForeignKey('employees.id', ondelete='CASCADE'), nullable=False, index=True),
    UniqueConstraint('apartment_id', 'employee_id', name='uq_assignments_apartment_employee'),
)
