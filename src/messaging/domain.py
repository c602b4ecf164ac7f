"""Messaging bounded context — customer support, peer chat and notifications.

Support conversations pair one customer with the admin team and track
read state separately for each side. Chat sessions connect two users and
keep an unread counter per participant. Notifications reach one user each,
sent by staff or raised from Ordering events.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

messaging = Domain(name="messaging")

logger = get_logger(__name__)
