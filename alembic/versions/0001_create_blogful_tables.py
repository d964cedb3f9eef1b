"""
create blogful users, articles and comments

Revision ID: 0001
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None

ARTICLE_CATEGORY = sa.Enum('Listicle', 'How-to', 'News', 'Interview', 'Story', name='article_category')


def upgrade() -> None:
    op.create_table(
        'blogful_users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('fullname', sa.Text(), nullable=False),
        sa.Column('username', sa.Text(), nullable=False, unique=True),
        sa.Column('password', sa.Text(), nullable=True),
        sa.Column('nickname', sa.Text(), nullable=True),
        sa.Column('date_created', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    )
    op.create_table(
        'blogful_articles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('style', ARTICLE_CATEGORY, nullable=False),
        sa.Column('date_published', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('author', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['author'], ['blogful_users.id'], ondelete='SET NULL'),
    )
    op.create_table(
        'blogful_comments',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('date_commented', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
        sa.Column('article_id', sa.Integer(), nullable=False, index=True),
        sa.Column('user_id', sa.Integer(), nullable=False, index=True),
        sa.ForeignKeyConstraint(['article_id'], ['blogful_articles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['user_id'], ['blogful_users.id'], ondelete='CASCADE'),
    )


def downgrade() -> None:
    op.drop_table('blogful_comments')
    op.drop_table('blogful_articles')
    op.drop_table('blogful_users')
    ARTICLE_CATEGORY.drop(op.get_bind(), checkfirst=True)
