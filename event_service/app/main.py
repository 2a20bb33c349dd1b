# app/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, engine
from shared.core.logging_config import setup_logging
from shared.helpers.exception_handler import setup_exception_handlers
from shared.models import counters
from .models.admin import coupon_code, event_type, payment_methods
from .models.communication import messages, notification
from .models.events import event, event_discussion_chat, event_entry_tickets, guest, vibescard_studio
from .models.marketplace import catering_marketplace, contact_vendor, decorations, vendor_business_information
from .models.payments import transaction

from .router.admin import coupon_code_router, event_type_router, payment_methods_router
from .router.communication import messages_router, notification_router
from .router.events import (
    event_discussion_chat_router, event_entry_tickets_router, event_router, guest_router,
    vibescard_studio_router)
from .router.files import file_upload_router
from .router.integrations import escrow_router
from .router.marketplace import (
    catering_marketplace_router, contact_vendor_router, decorations_router,
    vendor_business_information_router)
from .router.payments import transaction_router

setup_logging(settings.LOG_LEVEL)

# Create tables
Base.metadata.create_all(bind=engine)

# This MUST exist for uvicorn
app = FastAPI(title=settings.APP_NAME, version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Routers
app.include_router(event_type_router.router)
app.include_router(coupon_code_router.router)
app.include_router(payment_methods_router.router)
app.include_router(event_router.router)
app.include_router(guest_router.router)
app.include_router(event_entry_tickets_router.router)
app.include_router(event_discussion_chat_router.router)
app.include_router(vibescard_studio_router.router)
app.include_router(vendor_business_information_router.router)
app.include_router(contact_vendor_router.router)
app.include_router(catering_marketplace_router.router)
app.include_router(decorations_router.router)
app.include_router(messages_router.router)
app.include_router(notification_router.router)
app.include_router(transaction_router.router)
app.include_router(escrow_router.router)
app.include_router(file_upload_router.router)


@app.get("/health")
def health():
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.API_VERSION}
