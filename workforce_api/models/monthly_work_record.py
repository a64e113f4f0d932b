from datetime import datetime
from workforce_api.extensions import db

class MonthlyWorkRecord(db.Model):
    __tablename__ = "monthly_work_records"
    __label__ = "Monthly work record"

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id", ondelete="CASCADE"), nullable=False)

    year  = db.Column(db.Integer, nullable=False)
    month = db.Column(db.Integer, nullable=False)  # 1..12

    weekends_worked = db.Column(db.Integer, nullable=False, default=0)
    holidays_worked = db.Column(db.Integer, nullable=False, default=0)

    # derived from the owning employee's rates at write time
    weekend_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    holiday_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    total_amount   = db.Column(db.Numeric(12, 2), nullable=False, default=0)

    notes = db.Column(db.Text, nullable=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        db.UniqueConstraint("employee_id", "year", "month", name="uq_mwr_employee_period"),
        db.CheckConstraint("month BETWEEN 1 AND 12", name="ck_mwr_month"),
        db.Index("ix_mwr_period", "year", "month"),
    )

    employee = db.relationship("Employee", back_populates="monthly_records", lazy="joined")
