"""Repository for the Customer aggregate."""

from protean.exceptions import ObjectNotFoundError

from marketplace.domain import marketplace
from marketplace.identity.customer.customer import Customer


@marketplace.repository(part_of=Customer)
class CustomerRepository:
    def find_by_email(self, email: str) -> Customer | None:
        customers = self._dao.query.filter(email=email.strip().lower()).all().items
        return customers[0] if customers else None

    def get_by_email(self, email: str) -> Customer:
        customer = self.find_by_email(email)
        if customer is None:
            raise ObjectNotFoundError({"_entity": f"Customer with email {email} does not exist"})
        return customer
