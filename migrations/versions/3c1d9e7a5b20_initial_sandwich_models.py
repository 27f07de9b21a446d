"""initial sandwich models

Revision ID: 3c1d9e7a5b20
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1d9e7a5b20'
down_revision = None
branch_labels = None
depends_on = None


def _record_columns():
    return [
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade():
    conn = op.get_bind()
    insp = sa.inspect(conn)

    for table in ('breads', 'ingredients', 'sauces'):
        if not insp.has_table(table):
            op.create_table(
                table,
                *_record_columns(),
                sa.Column('name', sa.String(length=150), nullable=False),
            )

    if not insp.has_table('todos'):
        op.create_table(
            'todos',
            *_record_columns(),
            sa.Column('content', sa.Text(), nullable=True),
        )

    if not insp.has_table('sandwiches'):
        op.create_table(
            'sandwiches',
            *_record_columns(),
            sa.Column('name', sa.String(length=150), nullable=False),
            sa.Column('bread_id', sa.String(length=36), sa.ForeignKey('breads.id'), nullable=False),
            sa.Column('sauce_id', sa.String(length=36), sa.ForeignKey('sauces.id'), nullable=True),
        )

    if not insp.has_table('sandwich_ingredients'):
        op.create_table(
            'sandwich_ingredients',
            sa.Column('sandwich_id', sa.String(length=36), sa.ForeignKey('sandwiches.id'), primary_key=True),
            sa.Column('ingredient_id', sa.String(length=36), sa.ForeignKey('ingredients.id'), primary_key=True),
        )


def downgrade():
    op.drop_table('sandwich_ingredients')
    op.drop_table('sandwiches')
    op.drop_table('todos')
    op.drop_table('sauces')
    op.drop_table('ingredients')
    op.drop_table('breads')
