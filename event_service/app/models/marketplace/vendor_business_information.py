# app/models/marketplace/vendor_business_information.py
from sqlalchemy import Column, Integer, String
from shared.core.database import Base
from shared.models.mixins import AuditMixin


class VendorBusinessInformation(AuditMixin, Base):
    __tablename__ = "vendor_business_information"

    business_information_id = Column(Integer, unique=True, nullable=False, index=True)
    vendor_id = Column(Integer, nullable=False, index=True)
    business_name = Column(String(200), nullable=False)
    legal_name = Column(String(200))
    business_email = Column(String(200), nullable=False)
    business_phone = Column(String(20), nullable=False)
    description = Column(String(1000))
    business_address = Column(String(500))
    city_id = Column(Integer, index=True)
    state_id = Column(Integer)
    country_id = Column(Integer)
    zip_code = Column(String(20))
    business_website_url = Column(String(500))
    business_logo_url = Column(String(500))
    service_location = Column(String(500))
    service_radius = Column(Integer)
