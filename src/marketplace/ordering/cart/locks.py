"""Per-user serialization of active cart creation.

Everything that may open a user's first active cart runs under
``user_cart_lock(user_id)``, so two concurrent adds for a brand-new user
end up in the same cart. The lock is in-process; multiple worker processes
need a unique (user_id, is_active) constraint in the store as well.

The HTTP routes are ``async def`` and process commands synchronously on the
event loop, so one served process never has two cart commands in flight and
the lock does not contend there. It matters for callers on several threads,
such as a threadpool-backed route or the threaded cart tests.
"""

import threading
from contextlib import contextmanager
from weakref import WeakValueDictionary

_registry_guard = threading.Lock()
_user_locks: WeakValueDictionary = WeakValueDictionary()


def _lock_for(user_id) -> threading.Lock:
    with _registry_guard:
        lock = _user_locks.get(str(user_id))
        if lock is None:
            lock = threading.Lock()
            _user_locks[str(user_id)] = lock
        return lock


@contextmanager
def user_cart_lock(user_id):
    lock = _lock_for(user_id)
    with lock:
        yield
