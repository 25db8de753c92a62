"""create_users_and_todos

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-19 10:12:03.418842
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from app.db.models.base import SCHEMA, qualified


# revision identifiers, used by Alembic.
revision: str = '3f1c2a7b9d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, comment='登录邮箱'),
        sa.Column('hashed_pwd', sa.String(length=256), nullable=False, comment='bcrypt 密码哈希'),
        sa.Column('name', sa.String(length=128), nullable=False, comment='姓名'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False, comment='创建时间'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False, comment='更新时间'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        schema=SCHEMA,
    )
    op.create_table(
        'todos',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False, comment='标题'),
        sa.Column('description', sa.Text(), nullable=True, comment='描述（可选）'),
        sa.Column('completed', sa.Boolean(), server_default='false', nullable=False, comment='是否完成'),
        sa.Column('owner_id', sa.Uuid(), nullable=False, comment='所属用户'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False, comment='创建时间'),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False, comment='更新时间'),
        sa.ForeignKeyConstraint(['owner_id'], [qualified('users.id')], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        schema=SCHEMA,
    )
    op.create_index('ix_todos_owner_created', 'todos', ['owner_id', 'created_at'], unique=False, schema=SCHEMA)


def downgrade() -> None:
    op.drop_index('ix_todos_owner_created', table_name='todos', schema=SCHEMA)
    op.drop_table('todos', schema=SCHEMA)
    op.drop_table('users', schema=SCHEMA)
