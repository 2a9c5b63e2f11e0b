"""Order domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.  Payment-signature errors live in
``modules.payments.exceptions``.
"""

from __future__ import annotations


class OrderNotFound(Exception):
    """No order matches the internal id or the gateway order id."""
