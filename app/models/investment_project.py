"""ORM model for investment projects and their PM/CEO review fields."""

from sqlalchemy import CheckConstraint, Column, Date, Integer, Numeric, String, Text

from app.models.base import AuditMixin, Base

REVIEW_STATUSES = ("Pending Review", "Validated", "Approved", "Rejected")
DEFAULT_REVIEW_STATUS = "Pending Review"


class InvestmentProject(AuditMixin, Base):
    """
    Investment project request for a station site.

    review_status is a flat status field: any of REVIEW_STATUSES may follow any
    other. pm_comment and ceo_comment are written independently by the review
    endpoint depending on the caller's role.
    """

    __tablename__ = "investment_projects"
    __table_args__ = (
        CheckConstraint(
            "review_status IN ('Pending Review', 'Validated', 'Approved', 'Rejected')",
            name="investment_projects_review_status_check",
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    department_type = Column(String(100), nullable=False, index=True)
    request_type = Column(String(100), nullable=True)
    project_name = Column(String(255), nullable=False)
    project_code = Column(String(100), nullable=False, unique=True, index=True)
    city = Column(String(255), nullable=True)
    district = Column(String(255), nullable=True)
    area = Column(Numeric(14, 2), nullable=False, default=0)
    project_status = Column(String(100), nullable=True)
    contract_type = Column(String(100), nullable=True)
    google_location = Column(Text, nullable=True)
    priority_level = Column(String(50), nullable=True)
    order_date = Column(Date, nullable=True)
    request_sender = Column(String(255), nullable=True)

    # Elements
    super_market = Column(Integer, nullable=False, default=0)
    fuel_station = Column(Integer, nullable=False, default=0)
    kiosks = Column(Integer, nullable=False, default=0)
    retail_shop = Column(Integer, nullable=False, default=0)
    drive_through = Column(Integer, nullable=False, default=0)
    element_area = Column(Numeric(14, 2), nullable=False, default=0)

    # Owner
    owner_name = Column(String(255), nullable=True)
    owner_contact_no = Column(String(50), nullable=True)
    id_no = Column(String(50), nullable=True)
    national_address = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    owner_type = Column(String(50), nullable=False, default="individual")

    # Attachments (URLs after separate upload)
    design_file_url = Column(Text, nullable=True)
    documents_url = Column(Text, nullable=True)
    autocad_url = Column(Text, nullable=True)

    station_code = Column(String(50), nullable=True, index=True)
    feasibility_status = Column(String(50), nullable=True)
    contract_status = Column(String(50), nullable=True)

    # Review
    review_status = Column(
        String(50),
        nullable=False,
        default=DEFAULT_REVIEW_STATUS,
        server_default=DEFAULT_REVIEW_STATUS,
    )
    pm_comment = Column(Text, nullable=True)
    ceo_comment = Column(Text, nullable=True)
