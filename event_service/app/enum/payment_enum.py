from enum import Enum


class TransactionStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"
    requires_payment_method = "requires_payment_method"
    refunded = "refunded"
    partially_refunded = "partially_refunded"
    cancelled = "cancelled"


class TransactionType(str, Enum):
    registration_fee = "Registration_fee"
    deposit = "deposit"
    venue_payment = "Venue payment"
    withdraw = "withdraw"
    recharge_by_admin = "RechargeByAdmin"
    event_payment = "EventPayment"
    package_buy = "Package_Buy"
    recharge = "Recharge"
    ticket_booking = "TicketBooking"
    staff_booking = "StaffBooking"
    catering_booking = "CateringBooking"
    vendor_booking = "VendorBooking"
    refund = "Refund"
    cancellation = "Cancellation"
    escrow_payment = "EscrowPayment"
    escrow_cancellation = "EscrowCancellation"


# gateway vocabulary -> local TransactionStatus
ESCROW_STATUS_MAP = {
    "funded": TransactionStatus.completed,
    "completed": TransactionStatus.completed,
    "cancelled": TransactionStatus.cancelled,
    "canceled": TransactionStatus.cancelled,
    "failed": TransactionStatus.failed,
}
