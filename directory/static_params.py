"""
Route parameters for every page the directory publishes.

Used by the XML sitemap and by ``manage.py build_static_pages``.
"""
from .constants.practice_areas import PRACTICE_AREA_CATEGORIES
from .constants.states import AUSTRALIAN_STATES


def generate_state_params():
    """One {'state': code} dict per state landing page."""
    return [{'state': state.code} for state in AUSTRALIAN_STATES]


def generate_static_params():
    """Every state x practice area combination, states in display order."""
    return [
        {'state': state.code, 'practice_area': area.slug}
        for state in AUSTRALIAN_STATES
        for area in PRACTICE_AREA_CATEGORIES
    ]
