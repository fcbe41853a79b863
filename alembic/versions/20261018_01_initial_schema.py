"""initial parking lot schema

Revision ID: 20261018_01
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op


revision = "20261018_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "parking_slots",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("slot_number", sa.Integer(), nullable=False),
        sa.Column("vehicle_type", sa.String(length=16), nullable=False),
        sa.Column("is_available", sa.Boolean(), nullable=True),
        sa.CheckConstraint("slot_number >= 1", name="ck_parking_slots_slot_number_positive"),
    )
    op.create_index("ix_parking_slots_slot_number", "parking_slots", ["slot_number"], unique=True)

    op.create_table(
        "reservations",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("license_plate", sa.String(length=32), nullable=False),
        sa.Column("in_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("out_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("vehicle_type", sa.String(length=16), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.Column("arrived", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("dqr", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("exit_id", sa.String(length=64), nullable=False),
        sa.Column("status", sa.String(length=16), nullable=False, server_default="BOOKED"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_reservations_user_id", "reservations", ["user_id"])
    op.create_index("ix_reservations_out_time", "reservations", ["out_time"])
    op.create_index("ix_reservations_slot", "reservations", ["slot"])
    op.create_index("ix_reservations_exit_id", "reservations", ["exit_id"], unique=True)
    op.create_index("ix_reservations_status", "reservations", ["status"])

    op.create_table(
        "reservation_history",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=255), nullable=False),
        sa.Column("license_plate", sa.String(length=32), nullable=False),
        sa.Column("in_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("out_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("vehicle_type", sa.String(length=16), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("slot", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_reservation_history_user_id", "reservation_history", ["user_id"])
    op.create_index("ix_reservation_history_vehicle_type", "reservation_history", ["vehicle_type"])
    op.create_index("ix_reservation_history_created_at", "reservation_history", ["created_at"])
    op.create_index(
        "ix_reservation_history_natural",
        "reservation_history",
        ["user_id", "license_plate", "in_time", "slot"],
    )

    op.create_table(
        "admins",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("username", sa.String(length=128), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=128), nullable=False),
        sa.Column("middle_initial", sa.String(length=8), nullable=True),
        sa.Column("last_name", sa.String(length=128), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(length=32), nullable=True),
        sa.Column("tin_id", sa.String(length=64), nullable=True),
        sa.Column("country", sa.String(length=128), nullable=True),
        sa.Column("zip_code", sa.String(length=16), nullable=True),
        sa.Column("address", sa.String(length=512), nullable=True),
        sa.Column("job", sa.String(length=128), nullable=True),
        sa.Column("is_superadmin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_admins_username", "admins", ["username"], unique=True)
    op.create_index("ix_admins_email", "admins", ["email"], unique=True)

    op.create_table(
        "user_info",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("dob", sa.Date(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("contact", sa.String(length=32), nullable=False),
        sa.Column("profile_image_url", sa.String(length=1024), nullable=False),
        sa.Column("license", sa.JSON(), nullable=True),
        sa.Column("address", sa.JSON(), nullable=True),
        sa.Column("verified", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("reset_password_token", sa.String(length=255), nullable=True),
        sa.Column("reset_password_expires", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_user_info_email", "user_info", ["email"], unique=True)
    op.create_index("ix_user_info_verified", "user_info", ["verified"])


def downgrade() -> None:
    op.drop_index("ix_user_info_verified", table_name="user_info")
    op.drop_index("ix_user_info_email", table_name="user_info")
    op.drop_table("user_info")
    op.drop_index("ix_admins_email", table_name="admins")
    op.drop_index("ix_admins_username", table_name="admins")
    op.drop_table("admins")
    op.drop_index("ix_reservation_history_natural", table_name="reservation_history")
    op.drop_index("ix_reservation_history_created_at", table_name="reservation_history")
    op.drop_index("ix_reservation_history_vehicle_type", table_name="reservation_history")
    op.drop_index("ix_reservation_history_user_id", table_name="reservation_history")
    op.drop_table("reservation_history")
    op.drop_index("ix_reservations_status", table_name="reservations")
    op.drop_index("ix_reservations_exit_id", table_name="reservations")
    op.drop_index("ix_reservations_slot", table_name="reservations")
    op.drop_index("ix_reservations_out_time", table_name="reservations")
    op.drop_index("ix_reservations_user_id", table_name="reservations")
    op.drop_table("reservations")
    op.drop_index("ix_parking_slots_slot_number", table_name="parking_slots")
    op.drop_table("parking_slots")
