"""Station master table plus tanks, dispensers, nozzles and cameras.

Revision ID: 20250302000000
Revises: 20250301000000
Create Date: 2025-03-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250302000000"
down_revision: Union[str, None] = "20250301000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("created_by", sa.Integer(), nullable=True),
        sa.Column("updated_by", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "station_information",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("station_code", sa.String(length=50), nullable=False),
        sa.Column("station_name", sa.String(length=255), nullable=False),
        sa.Column("area_region", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("district", sa.String(length=255), nullable=True),
        sa.Column("street", sa.String(length=255), nullable=True),
        sa.Column("geographic_location", sa.Text(), nullable=True),
        sa.Column("station_type_code", sa.String(length=50), nullable=True),
        sa.Column("station_status_code", sa.String(length=50), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_station_information_station_code"), "station_information", ["station_code"], unique=True)

    op.create_table(
        "tanks",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("tank_code", sa.String(length=50), nullable=False),
        sa.Column("fuel_type", sa.String(length=50), nullable=True),
        sa.Column("vendor", sa.String(length=255), nullable=True),
        sa.Column("tank_capacity", sa.Numeric(12, 2), nullable=True),
        sa.Column("tank_size", sa.String(length=100), nullable=True),
        sa.Column("tank_manufacturer", sa.String(length=255), nullable=True),
        sa.Column("tank_warranty_certificate", sa.Text(), nullable=True),
        sa.Column("station_code", sa.String(length=50), nullable=False),
        sa.Column("canopy_code", sa.String(length=50), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tanks_tank_code"), "tanks", ["tank_code"], unique=True)
    op.create_index(op.f("ix_tanks_station_code"), "tanks", ["station_code"], unique=False)

    op.create_table(
        "dispensers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dispenser_serial_number", sa.String(length=100), nullable=False),
        sa.Column("dispenser_name", sa.String(length=255), nullable=True),
        sa.Column("model", sa.String(length=255), nullable=True),
        sa.Column("vendor", sa.String(length=255), nullable=True),
        sa.Column("number_of_nozzles", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=True),
        sa.Column("station_code", sa.String(length=50), nullable=False),
        sa.Column("canopy_code", sa.String(length=50), nullable=True),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_dispensers_dispenser_serial_number"), "dispensers", ["dispenser_serial_number"], unique=True
    )
    op.create_index(op.f("ix_dispensers_station_code"), "dispensers", ["station_code"], unique=False)

    op.create_table(
        "nozzles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("nozzle_serial_number", sa.String(length=100), nullable=False),
        sa.Column("fuel_type", sa.String(length=50), nullable=True),
        sa.Column("vendor", sa.String(length=255), nullable=True),
        sa.Column("dispenser_serial_number", sa.String(length=100), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_nozzles_nozzle_serial_number"), "nozzles", ["nozzle_serial_number"], unique=True)
    op.create_index(
        op.f("ix_nozzles_dispenser_serial_number"), "nozzles", ["dispenser_serial_number"], unique=False
    )

    op.create_table(
        "cameras",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("serial_number", sa.String(length=100), nullable=False),
        sa.Column("camera_type", sa.String(length=100), nullable=True),
        sa.Column("model", sa.String(length=255), nullable=True),
        sa.Column("size", sa.String(length=100), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("status", sa.String(length=50), nullable=True),
        sa.Column("station_code", sa.String(length=50), nullable=False),
        *_audit_columns(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cameras_serial_number"), "cameras", ["serial_number"], unique=True)
    op.create_index(op.f("ix_cameras_station_code"), "cameras", ["station_code"], unique=False)


def downgrade() -> None:
    for table, indexes in (
        ("cameras", ("serial_number", "station_code")),
        ("nozzles", ("nozzle_serial_number", "dispenser_serial_number")),
        ("dispensers", ("dispenser_serial_number", "station_code")),
        ("tanks", ("tank_code", "station_code")),
        ("station_information", ("station_code",)),
    ):
        for column in indexes:
            op.drop_index(op.f(f"ix_{table}_{column}"), table_name=table)
        op.drop_table(table)
