"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then

from marketplace.config import DispatchPolicy, FulfillmentSettings, Settings, set_settings
from marketplace.ordering.order.order import Order


@pytest.fixture()
def error():
    """Container for errors raised in When steps."""
    return {"exc": None}


@pytest.fixture()
def world():
    """Scenario state shared between steps."""
    return {}


@given(parsers.cfparse('the dispatch policy is "{policy}"'))
def dispatch_policy(policy):
    set_settings(Settings(fulfillment=FulfillmentSettings(dispatch_policy=DispatchPolicy(policy))))


@then("the request is rejected")
@then("the acceptance is rejected")
def request_rejected(error):
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(world, status):
    order = current_domain.repository_for(Order).get(world["order_id"])
    assert order.status == status
