"""Mail reactions to Identity events.

Customers and staff hear about their own account changes. CSRs are told
about every new customer so someone activates the account.
"""

import structlog
from protean.utils.globals import current_domain
from protean.utils.mixins import handle

from marketplace.domain import marketplace
from marketplace.identity.customer.customer import Customer
from marketplace.identity.customer.events import CustomerActivated, CustomerDeactivated, CustomerRegistered
from marketplace.identity.user.events import UserActivated, UserDeactivated, UserRegistered
from marketplace.identity.user.user import User, UserRole
from marketplace.notifications.notifier import notify, notify_many
from marketplace.notifications.templates import MailTemplate

logger = structlog.get_logger(__name__)


def active_csr_emails() -> list[str]:
    csrs = current_domain.repository_for(User).with_role(UserRole.CSR.value)
    return [csr.email for csr in csrs if csr.is_active]


@marketplace.event_handler(part_of=Customer)
class CustomerEventsHandler:
    """Reacts to customer sign-ups and account status changes."""

    @handle(CustomerRegistered)
    def on_customer_registered(self, event: CustomerRegistered) -> None:
        """Ask the active CSRs to review and activate the new account."""
        delivered = notify_many(
            active_csr_emails(),
            MailTemplate.NEW_CUSTOMER,
            customer_email=event.email,
            full_name=event.full_name,
        )
        logger.info("CSRs notified of new customer", customer_id=str(event.customer_id), delivered=delivered)

    @handle(CustomerActivated)
    def on_customer_activated(self, event: CustomerActivated) -> None:
        notify(event.email, MailTemplate.ACCOUNT_ACTIVATED, name=event.full_name or event.email)

    @handle(CustomerDeactivated)
    def on_customer_deactivated(self, event: CustomerDeactivated) -> None:
        notify(event.email, MailTemplate.ACCOUNT_DEACTIVATED, name=event.full_name or event.email)


@marketplace.event_handler(part_of=User)
class StaffEventsHandler:
    """Reacts to staff account creation and status changes."""

    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        notify(event.email, MailTemplate.USER_REGISTERED, username=event.username, role=event.role)

    @handle(UserActivated)
    def on_user_activated(self, event: UserActivated) -> None:
        notify(event.email, MailTemplate.ACCOUNT_ACTIVATED, name=event.username)

    @handle(UserDeactivated)
    def on_user_deactivated(self, event: UserDeactivated) -> None:
        notify(event.email, MailTemplate.ACCOUNT_DEACTIVATED, name=event.username)
