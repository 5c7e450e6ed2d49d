"""
Australian states and territories.

Route parameters are matched exactly against ``State.code``. The
normalisation helpers are for turning free-form data (e.g. an address
field holding "QLD" or "Queensland") into a code when building links.
"""
from dataclasses import dataclass

from django.urls import reverse


@dataclass(frozen=True)
class State:
    """A state or territory the directory publishes pages for."""
    code: str
    name: str
    short_name: str


AUSTRALIAN_STATES = (
    State(code='nsw', name='New South Wales', short_name='NSW'),
    State(code='vic', name='Victoria', short_name='VIC'),
    State(code='qld', name='Queensland', short_name='QLD'),
    State(code='wa', name='Western Australia', short_name='WA'),
    State(code='sa', name='South Australia', short_name='SA'),
    State(code='tas', name='Tasmania', short_name='TAS'),
    State(code='act', name='Australian Capital Territory', short_name='ACT'),
    State(code='nt', name='Northern Territory', short_name='NT'),
)

STATE_CODES = tuple(state.code for state in AUSTRALIAN_STATES)

_STATES_BY_CODE = {state.code: state for state in AUSTRALIAN_STATES}


def is_valid_state_code(code):
    """True if code is exactly one of the state codes (case-sensitive)."""
    return isinstance(code, str) and code in _STATES_BY_CODE


def get_state_by_code(code):
    """Return the State for a valid code, otherwise None."""
    if not is_valid_state_code(code):
        return None
    return _STATES_BY_CODE[code]


def normalize_state_code(value):
    """
    Resolve a code, short name or full name to a state code.

    Matching is case-insensitive and ignores surrounding whitespace,
    so 'QLD', 'qld' and 'Queensland' all give 'qld'.
    Returns None when nothing matches.
    """
    if not isinstance(value, str):
        return None

    normalized = value.strip().lower()
    for state in AUSTRALIAN_STATES:
        if normalized in (state.code, state.short_name.lower(), state.name.lower()):
            return state.code
    return None


def get_state_url(value):
    """Return the landing page path for a state, e.g. '/qld/'."""
    code = normalize_state_code(value)
    if not code:
        return None
    return reverse('directory:state', kwargs={'state': code})
