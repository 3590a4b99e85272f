"""create kindergartens and diaries

Revision ID: 4f1d2c7a9b30
Revises:
Create Date: 2026-10-17 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = '4f1d2c7a9b30'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'kindergartens',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('owner_name', sa.String(length=50), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('password_hash', sa.String(length=254), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_kindergartens')),
        sa.UniqueConstraint('email', name='uq_kindergartens_email'),
    )
    with op.batch_alter_table('kindergartens', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_kindergartens_email'), ['email'], unique=False)

    op.create_table(
        'diaries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('uuid', sa.String(length=36), nullable=False),
        sa.Column('kindergarten_id', sa.Integer(), nullable=False),
        sa.Column('dog_name', sa.String(length=30), nullable=False),
        sa.Column('title', sa.String(length=50), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('(CURRENT_TIMESTAMP)'), nullable=False),
        sa.ForeignKeyConstraint(
            ['kindergarten_id'],
            ['kindergartens.id'],
            name=op.f('fk_diaries_kindergarten_id_kindergartens'),
            ondelete='CASCADE',
        ),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_diaries')),
        sa.UniqueConstraint('uuid', name='uq_diaries_uuid'),
    )
    with op.batch_alter_table('diaries', schema=None) as batch_op:
        batch_op.create_index('ix_diaries_kindergarten_id_date', ['kindergarten_id', 'date'], unique=False)


def downgrade():
    with op.batch_alter_table('diaries', schema=None) as batch_op:
        batch_op.drop_index('ix_diaries_kindergarten_id_date')
    op.drop_table('diaries')

    with op.batch_alter_table('kindergartens', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_kindergartens_email'))
    op.drop_table('kindergartens')
