"""Investment projects with PM/CEO review columns.

Revision ID: 20250303000000
Revises: 20250302000000
Create Date: 2025-03-03

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "20250303000000"
down_revision: Union[str, None] = "20250302000000"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "investment_projects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("department_type", sa.String(length=100), nullable=False),
        sa.Column("request_type", sa.String(length=100), nullable=True),
        sa.Column("project_name", sa.String(length=255), nullable=False),
        sa.Column("project_code", sa.String(length=100), nullable=False),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("district", sa.String(length=255), nullable=True),
        sa.Column("area", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("project_status", sa.String(length=100), nullable=True),
        sa.Column("contract_type", sa.String(length=100), nullable=True),
        sa.Column("google_location", sa.Text(), nullable=True),
        sa.Column("priority_level", sa.String(length=50), nullable=True),
        sa.Column("order_date", sa.Date(), nullable=True),
        sa.Column("request_sender", sa.String(length=255), nullable=True),
        sa.Column("super_market", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("fuel_station", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("kiosks", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("retail_shop", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("drive_through", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("element_area", sa.Numeric(14, 2), nullable=False, server_default="0"),
        sa.Column("owner_name", sa.String(length=255), nullable=True),
        sa.Column("owner_contact_no", sa.String(length=50), nullable=True),
        sa.Column("id_no", sa.String(length=50), nullable=True),
        sa.Column("national_address", sa.Text(), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("owner_type", sa.String(length=50), nullable=False, server_default="individual"),
        sa.Column("design_file_url", sa.Text(), nullable=True),
        sa.Column("documents_url", sa.Text(), nullable=True),
        sa.Column("autocad_url", sa.Text(), nullable=True),
        sa.Column("station_code", sa.String(length=50), nullable=True),
        sa.Column("feasibility_status", sa.String(length=50), nullable=True),
        sa.Column("contract_status", sa.String(length=50), nullable=True),
        sa.Column("review_status", sa.String(length=50), nullable=False, server_default="Pending Review"),
        sa.Column("pm_comment", sa.Text(), nullable=True),
        sa.Column("ceo_comment", sa.Text(), nullable=True),
        sa.Column("created_by", sa.Integer(), nullable=True),
        sa.Column("updated_by", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.CheckConstraint(
            "review_status IN ('Pending Review', 'Validated', 'Approved', 'Rejected')",
            name="investment_projects_review_status_check",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_investment_projects_project_code"), "investment_projects", ["project_code"], unique=True
    )
    op.create_index(
        op.f("ix_investment_projects_department_type"), "investment_projects", ["department_type"], unique=False
    )
    op.create_index(
        op.f("ix_investment_projects_station_code"), "investment_projects", ["station_code"], unique=False
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_investment_projects_station_code"), table_name="investment_projects")
    op.drop_index(op.f("ix_investment_projects_department_type"), table_name="investment_projects")
    op.drop_index(op.f("ix_investment_projects_project_code"), table_name="investment_projects")
    op.drop_table("investment_projects")
