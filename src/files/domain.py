"""Files bounded context — ownership transfer notifications.

Renders the notifications sent to both parties of an ownership transfer
(request, failure, completion) and cleans up the pending transfer when a
request notification is dismissed.
"""

from protean.domain import Domain

from files.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

files = Domain(name="files")
