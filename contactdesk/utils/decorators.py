"""View decorators."""

import logging
from functools import wraps

from contactdesk.errors import ContactDeskError, ValidationError

logger = logging.getLogger(__name__)

FAILURE_MESSAGE = 'Something went wrong'


def failure_response(status=200):
    """Plain-text body shared by every handler failure."""
    return FAILURE_MESSAGE, status, {'Content-Type': 'text/plain; charset=utf-8'}


def contact_errors_handled(f):
    """Turn ContactDeskError raised by a view into the generic failure response."""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except ValidationError as exc:
            logger.info('Rejected submission in %s: %s', f.__name__, exc)
            return failure_response()
        except ContactDeskError:
            logger.exception('Request failed in %s', f.__name__)
            return failure_response()
    return decorated_function
