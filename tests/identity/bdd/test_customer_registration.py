"""BDD tests for customer registration."""

from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when

from marketplace.identity.customer.customer import Customer
from marketplace.identity.customer.registration import RegisterCustomer
from marketplace.identity.user.registration import RegisterUser
from marketplace.shared.errors import ConflictError

scenarios("features/customer_registration.feature")


def _register_customer(email, full_name="Bob Buyer"):
    return current_domain.process(
        RegisterCustomer(email=email, password="pw-123456", full_name=full_name),
        asynchronous=False,
    )


@given(parsers.cfparse('a CSR with email "{email}"'))
def a_csr(mailer, email):
    current_domain.process(
        RegisterUser(
            username="csr",
            email=email,
            password="pw-123456",
            mobile_number="0700000000",
            address="1 Market Street",
            role="CSR",
        ),
        asynchronous=False,
    )
    mailer.reset()


@given(parsers.cfparse('a customer registered with email "{email}" and name "{name}"'))
def existing_customer(email, name):
    _register_customer(email, full_name=name)


@given("the mail relay is down")
def mail_relay_down(mailer):
    mailer.configure(raise_on_send=ConnectionError("relay down"))


@when(parsers.cfparse('a customer registers with email "{email}"'))
def customer_registers(error, email):
    try:
        _register_customer(email, full_name="Someone Else")
    except ConflictError as exc:
        error["exc"] = exc


@then(parsers.cfparse('the customer "{email}" is inactive'))
def customer_inactive(email):
    assert current_domain.repository_for(Customer).get_by_email(email).is_active is False


@then(parsers.cfparse('"{email}" is told about the new customer'))
def csr_told(mailer, email):
    messages = mailer.messages_to(email)
    assert len(messages) == 1
    assert "New customer" in messages[0]["subject"]


@then("the registration conflicts")
def registration_conflicts(error):
    assert isinstance(error["exc"], ConflictError)


@then(parsers.cfparse('the customer "{email}" is still named "{name}"'))
def still_named(email, name):
    assert current_domain.repository_for(Customer).get_by_email(email).full_name == name
