from typing import Any, Dict, Optional
from pydantic import EmailStr, Field, RootModel, TypeAdapter, ValidationError, field_validator

from shared.wrappers.empty_string_model_wrapper import EmptyStringModel

email_adapter = TypeAdapter(EmailStr)


class EscrowPayload(RootModel[Dict[str, Any]]):
    """Free-form gateway body; must carry at least one field."""

    @field_validator("root")
    @classmethod
    def not_empty(cls, value: Dict[str, Any]):
        if not value:
            raise ValueError("At least one field is required")
        customer = value.get("asCustomer")
        if customer is not None:
            try:
                email_adapter.validate_python(customer)
            except ValidationError:
                raise ValueError("asCustomer must be a valid email address")
        return value

    def split(self):
        """Return (as_customer, body) with ``asCustomer`` lifted out of the body."""
        body = dict(self.root)
        as_customer = body.pop("asCustomer", None)
        return as_customer, body


class AsCustomerQuery(EmptyStringModel):
    asCustomer: Optional[EmailStr] = None


class EscrowListQuery(AsCustomerQuery):
    limit: Optional[int] = Field(None, ge=1)
    offset: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, max_length=50)
