"""employees and monthly_work_records

Revision ID: 4f1a2b3c5d6e
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4f1a2b3c5d6e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'employees',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=160), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('telephone', sa.String(length=32), nullable=False),
        sa.Column('cpf', sa.String(length=20), nullable=True),
        sa.Column('rg', sa.String(length=20), nullable=True),
        sa.Column('hire_date', sa.Date(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('salary', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('weekend_rate', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('holiday_rate', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('has_insurance', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('insurance_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('has_transport_fee', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('transport_fee_daily', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('has_food_support', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('food_support_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('bank_name', sa.String(length=120), nullable=True),
        sa.Column('bank_branch', sa.String(length=20), nullable=True),
        sa.Column('bank_account', sa.String(length=40), nullable=True),
        sa.Column('bank_pix', sa.String(length=120), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_emp_name', 'employees', ['name'], unique=False)

    op.create_table(
        'monthly_work_records',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('employee_id', sa.Integer(), sa.ForeignKey('employees.id', ondelete='CASCADE'), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('weekends_worked', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('holidays_worked', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('weekend_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('holiday_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('total_amount', sa.Numeric(12, 2), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('employee_id', 'year', 'month', name='uq_mwr_employee_period'),
        sa.CheckConstraint('month BETWEEN 1 AND 12', name='ck_mwr_month'),
    )
    op.create_index('ix_mwr_period', 'monthly_work_records', ['year', 'month'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_mwr_period', table_name='monthly_work_records')
    op.drop_table('monthly_work_records')
    op.drop_index('ix_emp_name', table_name='employees')
    op.drop_table('employees')
