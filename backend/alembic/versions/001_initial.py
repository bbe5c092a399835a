"""Initial migration - create registry tables

Revision ID: 001_initial
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'continents',
        sa.Column('id', sa.String(50), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
    )

    op.create_table(
        'countries',
        sa.Column('id', sa.String(50), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('iso2', sa.String(2), unique=True, nullable=False),
        sa.Column('continent_id', sa.String(50), sa.ForeignKey('continents.id'), nullable=False),
    )
    op.create_index('ix_countries_continent_id', 'countries', ['continent_id'])

    op.create_table(
        'users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('wca_id', sa.String(10), nullable=True),
        sa.Column('name', sa.String(255), nullable=True),
        sa.Column('country_iso2', sa.String(2), nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('delegate_status', sa.String(50), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_wca_id', 'users', ['wca_id'], unique=True)

    op.create_table(
        'competitions',
        sa.Column('id', sa.String(32), primary_key=True),
        sa.Column('name', sa.String(50), nullable=False),
        sa.Column('country_id', sa.String(50), sa.ForeignKey('countries.id'), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_competitions_country_id', 'competitions', ['country_id'])
    op.create_index('ix_competitions_start_date', 'competitions', ['start_date'])

    op.create_table(
        'championships',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('competition_id', sa.String(32), sa.ForeignKey('competitions.id'), nullable=False),
        sa.Column('championship_type', sa.String(50), nullable=False),
        sa.UniqueConstraint('competition_id', 'championship_type', name='uq_competition_championship_type'),
    )
    op.create_index('ix_championships_competition_id', 'championships', ['competition_id'])
    op.create_index('ix_championships_championship_type', 'championships', ['championship_type'])

    op.create_table(
        'competition_delegates',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('competition_id', sa.String(32), sa.ForeignKey('competitions.id'), nullable=False),
        sa.Column('delegate_id', sa.String(36), sa.ForeignKey('users.id'), nullable=False),
        sa.UniqueConstraint('competition_id', 'delegate_id', name='uq_competition_delegate'),
    )
    op.create_index('ix_competition_delegates_competition_id', 'competition_delegates', ['competition_id'])
    op.create_index('ix_competition_delegates_delegate_id', 'competition_delegates', ['delegate_id'])

    op.create_table(
        'competition_media',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('competition_id', sa.String(32), sa.ForeignKey('competitions.id'), nullable=False),
        sa.Column('type', sa.String(15), nullable=False),
        sa.Column('status', sa.String(10), nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('uri', sa.Text(), nullable=False),
        sa.Column('submitter_name', sa.String(255), nullable=True),
        sa.Column('submitter_email', sa.String(255), nullable=True),
        sa.Column('submitter_comment', sa.Text(), nullable=True),
        sa.Column('submitted_at', sa.DateTime(), nullable=True),
        sa.Column('decided_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_competition_media_competition_id', 'competition_media', ['competition_id'])

    op.create_table(
        'results',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('person_id', sa.String(10), nullable=False),
        sa.Column('person_name', sa.String(80), nullable=False),
        sa.Column('country_id', sa.String(50), sa.ForeignKey('countries.id'), nullable=False),
        sa.Column('competition_id', sa.String(32), sa.ForeignKey('competitions.id'), nullable=False),
        sa.Column('event_id', sa.String(6), nullable=False),
        sa.Column('round_type_id', sa.String(1), nullable=False),
        sa.Column('pos', sa.Integer(), nullable=False),
        sa.Column('best', sa.Integer(), nullable=False),
        sa.Column('average', sa.Integer(), nullable=False),
    )
    op.create_index('ix_results_person_id', 'results', ['person_id'])
    op.create_index('ix_results_country_id', 'results', ['country_id'])
    op.create_index('ix_results_competition_id', 'results', ['competition_id'])
    op.create_index('ix_results_competition_event', 'results', ['competition_id', 'event_id'])

    op.create_table(
        'persons',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('wca_id', sa.String(10), nullable=False),
        sa.Column('sub_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(80), nullable=False),
        sa.Column('country_id', sa.String(50), sa.ForeignKey('countries.id'), nullable=False),
        sa.Column('gender', sa.String(1), nullable=True),
        sa.Column('dob', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('wca_id', 'sub_id', name='uq_person_wca_id_sub_id'),
    )
    op.create_index('ix_persons_wca_id', 'persons', ['wca_id'])


def downgrade() -> None:
    op.drop_table('persons')
    op.drop_table('results')
    op.drop_table('competition_media')
    op.drop_table('competition_delegates')
    op.drop_table('championships')
    op.drop_table('competitions')
    op.drop_table('users')
    op.drop_table('countries')
    op.drop_table('continents')
