"""BDD tests for vendor acceptance of order lines."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from support.builders import make_category, make_product, new_user_id, place_order

from marketplace.ordering.order.cancellation import CancelOrder
from marketplace.ordering.order.fulfillment import accept_vendor_line_items
from marketplace.ordering.order.queries import get_vendor_line_items

scenarios("features/vendor_acceptance.feature")


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('vendor "{vendor}" sells "{first}" and "{second}"'))
def vendor_sells_two(world, vendor, first, second):
    category_id = world.setdefault("category_id", make_category())
    products = world.setdefault("products", {})
    for name in (first, second):
        products[name] = make_product(vendor=vendor, name=name, category_id=category_id)


@given(parsers.cfparse('vendor "{vendor}" sells only "{name}"'))
def vendor_sells_one(world, vendor, name):
    category_id = world.setdefault("category_id", make_category())
    world.setdefault("products", {})[name] = make_product(vendor=vendor, name=name, category_id=category_id)


@given(
    parsers.cfparse(
        'a customer ordered {q1:d} "{first}", {q2:d} "{second}" and {q3:d} "{third}"'
    )
)
def customer_ordered(world, q1, first, q2, second, q3, third):
    products = world["products"]
    lines = [(products[first], q1), (products[second], q2), (products[third], q3)]
    world["order_id"], world["cart_id"] = place_order(new_user_id(), lines)


@given("the order was cancelled")
def order_cancelled(world):
    current_domain.process(CancelOrder(order_id=world["order_id"]), asynchronous=False)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('vendor "{vendor}" accepts the order'))
def vendor_accepts(world, error, vendor):
    try:
        world["result"] = accept_vendor_line_items(vendor, world["order_id"])
    except ValidationError as exc:
        error["exc"] = exc


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then("the acceptance result is true")
def result_true(world):
    assert world["result"] is True


@then("the acceptance result is false")
def result_false(world):
    assert world["result"] is False


@then(parsers.cfparse('the lines of vendor "{vendor}" are "{status}"'))
def vendor_lines_status(world, vendor, status):
    lines = get_vendor_line_items(vendor, world["order_id"])
    assert lines
    assert {line.status for line in lines} == {status}
