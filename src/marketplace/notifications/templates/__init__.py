"""Template registry.

Each template renders a subject and body from a context dict.
"""

from enum import Enum

from marketplace.notifications.templates.accounts import (
    AccountActivatedTemplate,
    AccountDeactivatedTemplate,
    UserRegisteredTemplate,
)
from marketplace.notifications.templates.customers import NewCustomerTemplate
from marketplace.notifications.templates.low_stock import LowStockTemplate


class MailTemplate(Enum):
    USER_REGISTERED = "UserRegistered"
    ACCOUNT_ACTIVATED = "AccountActivated"
    ACCOUNT_DEACTIVATED = "AccountDeactivated"
    NEW_CUSTOMER = "NewCustomer"
    LOW_STOCK = "LowStock"


TEMPLATE_REGISTRY: dict[str, type] = {
    MailTemplate.USER_REGISTERED.value: UserRegisteredTemplate,
    MailTemplate.ACCOUNT_ACTIVATED.value: AccountActivatedTemplate,
    MailTemplate.ACCOUNT_DEACTIVATED.value: AccountDeactivatedTemplate,
    MailTemplate.NEW_CUSTOMER.value: NewCustomerTemplate,
    MailTemplate.LOW_STOCK.value: LowStockTemplate,
}


def get_template(template: MailTemplate | str):
    """Look up a template class by name."""
    key = template.value if isinstance(template, MailTemplate) else template
    template_cls = TEMPLATE_REGISTRY.get(key)
    if template_cls is None:
        raise ValueError(f"No template registered for: {key}")
    return template_cls
