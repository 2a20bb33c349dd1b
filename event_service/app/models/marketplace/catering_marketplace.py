# app/models/marketplace/catering_marketplace.py
from sqlalchemy import Column, Integer, Numeric, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class CateringMarketplace(AuditMixin, Base):
    __tablename__ = "catering_marketplaces"

    catering_marketplace_id = Column(Integer, unique=True, nullable=False, index=True)
    catering_marketplace_category_id = Column(Integer, nullable=False, index=True)
    name = Column(String(200), nullable=False)
    image = Column(String(500))
    review_count = Column(Integer, nullable=False, default=0)
    address = Column(String(500), nullable=False)
    mobile_no = Column(String(20), nullable=False)
    amount_per_guest = Column(Numeric(12, 2), nullable=False, default=0)
