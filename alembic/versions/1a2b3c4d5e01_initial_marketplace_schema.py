"""initial marketplace schema

Revision ID: 1a2b3c4d5e01
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '1a2b3c4d5e01'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('open_id', sa.String(64), nullable=False),
        sa.Column('name', sa.Text(), nullable=True),
        sa.Column('email', sa.String(320), nullable=True),
        sa.Column('login_method', sa.String(64), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='user'),
        sa.Column('user_type', sa.String(20), nullable=True, server_default='client'),
        *_timestamps(),
        sa.Column('last_signed_in', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_open_id', 'users', ['open_id'], unique=True)

    op.create_table(
        'creative_profiles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('business_name', sa.String(255), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('categories', sa.Text(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('latitude', sa.String(50), nullable=True),
        sa.Column('longitude', sa.String(50), nullable=True),
        sa.Column('base_price', sa.Integer(), nullable=True),
        sa.Column('hourly_rate', sa.Integer(), nullable=True),
        sa.Column('profile_image', sa.String(500), nullable=True),
        sa.Column('cover_image', sa.String(500), nullable=True),
        sa.Column('average_rating', sa.String(10), server_default='0'),
        sa.Column('total_reviews', sa.Integer(), server_default='0'),
        sa.Column('is_verified', sa.Boolean(), server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('portfolio', sa.Text(), nullable=True),
        sa.Column('social_links', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_creative_profiles_user_id', 'creative_profiles', ['user_id'])

    op.create_table(
        'portfolio_items',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('video_url', sa.String(500), nullable=True),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('display_order', sa.Integer(), server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_portfolio_items_creative_id', 'portfolio_items', ['creative_id'])

    op.create_table(
        'availability',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.String(50), nullable=False),
        sa.Column('start_time', sa.String(50), nullable=False),
        sa.Column('end_time', sa.String(50), nullable=False),
        sa.Column('is_booked', sa.Boolean(), server_default=sa.false()),
        *_timestamps(),
    )
    op.create_index('ix_availability_creative_id', 'availability', ['creative_id'])

    op.create_table(
        'bookings',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('service_type', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('booking_date', sa.String(50), nullable=False),
        sa.Column('start_time', sa.String(50), nullable=False),
        sa.Column('end_time', sa.String(50), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('total_price', sa.Integer(), nullable=False),
        sa.Column('deposit_amount', sa.Integer(), nullable=False),
        sa.Column('deposit_paid', sa.Boolean(), server_default=sa.false()),
        sa.Column('status', sa.String(20), server_default='pending'),
        sa.Column('payment_method', sa.String(50), nullable=True),
        sa.Column('transaction_id', sa.String(255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_bookings_client_id', 'bookings', ['client_id'])
    op.create_index('ix_bookings_creative_id', 'bookings', ['creative_id'])
    op.create_index('ix_bookings_status', 'bookings', ['status'])

    op.create_table(
        'conversations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('participant_one_id', sa.Integer(), nullable=False),
        sa.Column('participant_two_id', sa.Integer(), nullable=False),
        sa.Column('booking_id', sa.Integer(), nullable=True),
        sa.Column('last_message', sa.Text(), nullable=True),
        sa.Column('last_message_at', sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_conversations_participant_one_id', 'conversations', ['participant_one_id'])
    op.create_index('ix_conversations_participant_two_id', 'conversations', ['participant_two_id'])

    op.create_table(
        'messages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('conversation_id', sa.Integer(), nullable=False),
        sa.Column('sender_id', sa.Integer(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('attachment_url', sa.String(500), nullable=True),
        sa.Column('attachment_type', sa.String(50), nullable=True),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_messages_conversation_id', 'messages', ['conversation_id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])

    op.create_table(
        'deliverables',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_url', sa.String(500), nullable=True),
        sa.Column('file_type', sa.String(50), nullable=True),
        sa.Column('file_size', sa.Integer(), nullable=True),
        sa.Column('download_count', sa.Integer(), server_default='0'),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_deliverables_booking_id', 'deliverables', ['booking_id'])
    op.create_index('ix_deliverables_creative_id', 'deliverables', ['creative_id'])

    op.create_table(
        'reviews',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), nullable=False),
        sa.Column('reviewer_id', sa.Integer(), nullable=False),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('is_verified', sa.Boolean(), server_default=sa.true()),
        sa.Column('is_published', sa.Boolean(), server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_reviews_reviewer_id', 'reviews', ['reviewer_id'])
    op.create_index('ix_reviews_creative_id', 'reviews', ['creative_id'])

    op.create_table(
        'gig_posts',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('client_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(100), nullable=True),
        sa.Column('budget', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('deadline', sa.String(50), nullable=True),
        sa.Column('status', sa.String(20), server_default='open'),
        sa.Column('applications_count', sa.Integer(), server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_gig_posts_client_id', 'gig_posts', ['client_id'])
    op.create_index('ix_gig_posts_status', 'gig_posts', ['status'])

    op.create_table(
        'gig_applications',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('gig_post_id', sa.Integer(), nullable=False),
        sa.Column('creative_id', sa.Integer(), nullable=False),
        sa.Column('proposed_price', sa.Integer(), nullable=True),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('portfolio_links', sa.Text(), nullable=True),
        sa.Column('status', sa.String(20), server_default='pending'),
        *_timestamps(),
    )
    op.create_index('ix_gig_applications_gig_post_id', 'gig_applications', ['gig_post_id'])
    op.create_index('ix_gig_applications_creative_id', 'gig_applications', ['creative_id'])

    op.create_table(
        'transactions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('booking_id', sa.Integer(), nullable=True),
        sa.Column('gig_post_id', sa.Integer(), nullable=True),
        sa.Column('payer_id', sa.Integer(), nullable=False),
        sa.Column('payee_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False),
        sa.Column('currency', sa.String(10), server_default='USD'),
        sa.Column('type', sa.String(20), server_default='deposit'),
        sa.Column('payment_method', sa.String(50), nullable=False),
        sa.Column('external_transaction_id', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), server_default='pending'),
        sa.Column('metadata', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_transactions_payer_id', 'transactions', ['payer_id'])
    op.create_index('ix_transactions_payee_id', 'transactions', ['payee_id'])


def downgrade():
    for table in [
        'transactions',
        'gig_applications',
        'gig_posts',
        'reviews',
        'deliverables',
        'messages',
        'conversations',
        'bookings',
        'availability',
        'portfolio_items',
        'creative_profiles',
        'users',
    ]:
        op.drop_table(table)
