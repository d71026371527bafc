"""Create users, models and annotations tables

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-17 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the three application tables."""

    op.create_table(
        'users',
        sa.Column('username', sa.Text, primary_key=True),
        sa.Column('password', sa.Text, nullable=False),
    )

    # Uploaded 3D models; uploaded_by is a plain reference, not a foreign key
    op.create_table(
        'models',
        sa.Column('id', sa.String, primary_key=True),
        sa.Column('name', sa.Text, nullable=False),
        sa.Column('file_url', sa.Text, nullable=False),
        sa.Column('file_type', sa.Text, nullable=False),
        sa.Column('file_size', sa.Float, nullable=False),
        sa.Column('uploaded_by', sa.String, nullable=False),
        sa.Column('uploaded_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_models_uploaded_by', 'models', ['uploaded_by'])

    op.create_table(
        'annotations',
        sa.Column('id', sa.String, primary_key=True),
        sa.Column('room_id', sa.String, nullable=False),
        sa.Column('title', sa.Text, nullable=False),
        sa.Column('description', sa.Text, nullable=True),
        sa.Column('position', sa.JSON, nullable=False),
        sa.Column('created_by', sa.String, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_annotations_room_id', 'annotations', ['room_id'])


def downgrade() -> None:
    op.drop_index('ix_annotations_room_id', table_name='annotations')
    op.drop_table('annotations')
    op.drop_index('ix_models_uploaded_by', table_name='models')
    op.drop_table('models')
    op.drop_table('users')
