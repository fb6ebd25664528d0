"""Create account tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    """Create account tables"""

    # 1. Accounts
    op.create_table('cuentas',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(100), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(150), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('role', sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_cuentas_username', 'cuentas', ['username'], unique=True)
    op.create_index('ix_cuentas_email', 'cuentas', ['email'], unique=True)
    op.create_index('ix_cuentas_role', 'cuentas', ['role'])

    # 2. Doctor profiles
    op.create_table('doctores',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('specialty', sa.String(100), nullable=True),
        sa.Column('license_number', sa.String(100), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['account_id'], ['cuentas.id']),
    )
    op.create_index('ix_doctores_account_id', 'doctores', ['account_id'], unique=True)

    # 3. Appointments
    op.create_table('citas',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('doctor_id', sa.Integer(), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(), nullable=True),
        sa.Column('reason', sa.String(500), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['account_id'], ['cuentas.id']),
        sa.ForeignKeyConstraint(['doctor_id'], ['doctores.id']),
    )
    op.create_index('ix_citas_account_id', 'citas', ['account_id'])
    op.create_index('ix_citas_doctor_id', 'citas', ['doctor_id'])

    # 4. Medical history
    op.create_table('historial_medico',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('account_id', sa.Integer(), nullable=False),
        sa.Column('diagnosis', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('recorded_at', sa.DateTime(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['account_id'], ['cuentas.id']),
    )
    op.create_index('ix_historial_medico_account_id', 'historial_medico', ['account_id'])


def downgrade() -> None:
    """Drop account tables"""
    op.drop_table('historial_medico')
    op.drop_table('citas')
    op.drop_table('doctores')
    op.drop_table('cuentas')
