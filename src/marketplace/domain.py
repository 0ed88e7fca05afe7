"""The marketplace domain.

Every aggregate, command and handler in the bounded-context packages
registers itself on ``marketplace``; ``marketplace.init()`` discovers them.
"""

from protean.domain import Domain

from marketplace.utils.logging import configure_logging

configure_logging(log_file_prefix="marketplace")

marketplace = Domain(name="marketplace")
