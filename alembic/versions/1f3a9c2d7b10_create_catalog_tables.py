"""create catalog tables

Revision ID: 1f3a9c2d7b10
Revises:
Create Date: 2026-10-17 10:12:44.918230

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '1f3a9c2d7b10'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=255), nullable=False),
        sa.Column('password', sa.String(length=255), nullable=False),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
    )
    op.create_index('ix_users_id', 'users', ['id'])
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'classes',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=80), nullable=False),
        sa.Column('icon', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_classes'),
    )
    op.create_index('ix_classes_id', 'classes', ['id'])
    op.create_index('ix_classes_name', 'classes', ['name'], unique=True)

    op.create_table(
        'subjects',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=160), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(length=120), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_subjects'),
    )
    op.create_index('ix_subjects_id', 'subjects', ['id'])
    op.create_index('ix_subjects_class_id', 'subjects', ['class_id'])

    op.create_table(
        'chapters',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('lessons', sa.Integer(), nullable=False),
        sa.Column('practices', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_chapters'),
    )
    op.create_index('ix_chapters_id', 'chapters', ['id'])
    op.create_index('ix_chapters_subject_id', 'chapters', ['subject_id'])

    op.create_table(
        'topics',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('chapter_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_topics'),
    )
    op.create_index('ix_topics_chapter_id', 'topics', ['chapter_id'])

    op.create_table(
        'books',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('author', sa.String(length=255), nullable=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('cover_image', sa.String(length=512), nullable=True),
        sa.Column('format', sa.String(length=10), nullable=False),
        sa.Column('page_count', sa.Integer(), nullable=True),
        sa.Column('file_url', sa.String(length=512), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('topics', sa.JSON(), nullable=False),
        sa.Column('ref_number', sa.String(length=10), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=False),
        sa.Column('recommended', sa.Boolean(), nullable=False),
        sa.Column('download_count', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_books'),
    )
    op.create_index('ix_books_id', 'books', ['id'])
    op.create_index('ix_books_subject_id', 'books', ['subject_id'])
    op.create_index('ix_books_class_id', 'books', ['class_id'])

    op.create_table(
        'resources',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('icon', sa.String(length=120), nullable=True),
        sa.Column('count', sa.Integer(), nullable=False),
        sa.Column('metadata', sa.String(length=255), nullable=False),
        sa.Column('subject_id', sa.Integer(), nullable=False),
        sa.Column('class_id', sa.Integer(), nullable=False),
        sa.Column('chapter_id', sa.Integer(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_resources'),
    )
    op.create_index('ix_resources_id', 'resources', ['id'])
    op.create_index('ix_resources_type', 'resources', ['type'])
    op.create_index('ix_resources_subject_id', 'resources', ['subject_id'])
    op.create_index('ix_resources_class_id', 'resources', ['class_id'])

    for table in ('categories', 'resource_types'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('slug', sa.String(length=80), nullable=False),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('id', name=f'pk_{table}'),
        )
        op.create_index(f'ix_{table}_id', table, ['id'])
        op.create_index(f'ix_{table}_slug', table, ['slug'], unique=True)

    op.create_table(
        'resource_files',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('file_size', sa.String(length=20), nullable=False),
        sa.Column('file_name', sa.String(length=255), nullable=False),
        sa.Column('file_path', sa.String(length=512), nullable=False),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('category_name', sa.String(length=120), nullable=False),
        sa.Column('type_id', sa.Integer(), nullable=False),
        sa.Column('type_name', sa.String(length=120), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('uploaded_by', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_resource_files'),
    )
    op.create_index('ix_resource_files_id', 'resource_files', ['id'])
    op.create_index('ix_resource_files_category_id', 'resource_files', ['category_id'])
    op.create_index('ix_resource_files_type_id', 'resource_files', ['type_id'])

def downgrade():
    for table in ('resource_files', 'resource_types', 'categories', 'resources',
                  'books', 'topics', 'chapters', 'subjects', 'classes', 'users'):
        op.drop_table(table)
