from datetime import datetime
from workforce_api.extensions import db

class Employee(db.Model):
    __tablename__ = "employees"
    __label__ = "Employee"

    id = db.Column(db.Integer, primary_key=True)

    name      = db.Column(db.String(160), nullable=False)
    email     = db.Column(db.String(255), unique=True, nullable=False)
    telephone = db.Column(db.String(32), nullable=False)

    # identity documents
    cpf = db.Column(db.String(20), nullable=True)
    rg  = db.Column(db.String(20), nullable=True)

    hire_date = db.Column(db.Date, nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    # pay
    salary       = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    weekend_rate = db.Column(db.Numeric(12, 2), nullable=False, default=0)  # per weekend day worked
    holiday_rate = db.Column(db.Numeric(12, 2), nullable=False, default=0)  # per holiday worked

    # benefits
    has_insurance       = db.Column(db.Boolean, nullable=False, default=False)
    insurance_amount    = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    has_transport_fee   = db.Column(db.Boolean, nullable=False, default=False)
    transport_fee_daily = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    has_food_support    = db.Column(db.Boolean, nullable=False, default=False)
    food_support_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    # banking
    bank_name    = db.Column(db.String(120), nullable=True)
    bank_branch  = db.Column(db.String(20), nullable=True)
    bank_account = db.Column(db.String(40), nullable=True)
    bank_pix     = db.Column(db.String(120), nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.Index("ix_emp_name", "name"),
    )

    # deleting an employee removes its monthly records
    monthly_records = db.relationship(
        "MonthlyWorkRecord",
        back_populates="employee",
        cascade="all, delete-orphan",
        lazy="select",
    )
