"""initial_portfolio_schema

Revision ID: 7c41e2a9d0b3
Revises:
Create Date: 2026-10-17 09:00:00.000000

포트폴리오 초기 스키마: users, project_details, projects, lsi_records.
Initial portfolio schema: users, project_details, projects, lsi_records.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c41e2a9d0b3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # users — 포트폴리오 소유자 계정 및 공개 프로필
    # Portfolio owner accounts and public profiles
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('first_name', sa.String(40), nullable=False),
        sa.Column('last_name', sa.String(40), nullable=False),
        sa.Column('other_names', sa.JSON(), nullable=True),
        sa.Column('username', sa.String(40), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('title', sa.JSON(), nullable=True),
        sa.Column('resume', sa.String(500), nullable=True),
        sa.Column('headline_photo', sa.String(500), nullable=True),
        sa.Column('about', sa.Text(), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('education', sa.JSON(), nullable=True),
        sa.Column('contact_info', sa.JSON(), nullable=True),
        sa.Column('logo', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # project_details — 프로젝트 상세 페이지 본문 (why / how sections)
    op.create_table(
        'project_details',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('project_id', sa.Uuid(), nullable=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('why', sa.JSON(), nullable=False),
        sa.Column('how', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_project_details_name', 'project_details', ['name'])

    # projects — 사용자별 포트폴리오 프로젝트 (name unique per user)
    op.create_table(
        'projects',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('demo', sa.String(500), nullable=True),
        sa.Column('demo_type', sa.String(20), nullable=True),
        sa.Column('link', sa.String(500), nullable=True),
        sa.Column('technologies', sa.JSON(), nullable=True),
        sa.Column('status', sa.String(20), server_default='planned', nullable=False),
        sa.Column('started_on', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('first_push', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_push', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deployment_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('details_id', sa.Uuid(), sa.ForeignKey('project_details.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'name', name='uq_project_user_name'),
    )

    # lsi_records — 플랫폼별 추적 링크와 방문자 수 (one per user and platform)
    op.create_table(
        'lsi_records',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('lsi', sa.String(100), nullable=False),
        sa.Column('social_platform', sa.String(50), nullable=False),
        sa.Column('count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('generated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'social_platform', name='uq_lsi_user_platform'),
    )
    op.create_index('ix_lsi_records_lsi', 'lsi_records', ['lsi'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_lsi_records_lsi', table_name='lsi_records')
    op.drop_table('lsi_records')
    op.drop_table('projects')
    op.drop_index('ix_project_details_name', table_name='project_details')
    op.drop_table('project_details')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
