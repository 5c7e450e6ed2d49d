"""
Page titles, descriptions and breadcrumbs for directory pages.
"""
from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.urls import reverse

from .constants.practice_areas import get_practice_area_by_slug
from .constants.states import get_state_by_code

NOT_FOUND_TITLE = 'Page Not Found'


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    url: Optional[str] = None


def _not_found_metadata():
    return {
        'title': NOT_FOUND_TITLE,
        'description': '',
        'og_title': NOT_FOUND_TITLE,
        'og_description': '',
    }


def build_practice_area_metadata(state_code, slug):
    """
    SEO metadata for a state/practice area page.

    Falls back to the not-found title when either parameter is invalid.
    """
    state = get_state_by_code(state_code)
    area = get_practice_area_by_slug(slug)
    if not state or not area:
        return _not_found_metadata()

    area_lower = area.name.lower()
    return {
        'title': f'{area.name} Lawyers in {state.name} | {settings.SITE_NAME}',
        'description': (
            f'Find experienced {area_lower} lawyers in {state.name}. '
            f'Learn how {area_lower} works in {state.short_name}, compare verified '
            f'legal professionals and read client reviews.'
        ),
        'og_title': f'{area.name} Lawyers in {state.name}',
        'og_description': f'Find verified {area_lower} lawyers in {state.short_name}',
    }


def build_state_metadata(state_code):
    """SEO metadata for a state landing page."""
    state = get_state_by_code(state_code)
    if not state:
        return _not_found_metadata()

    return {
        'title': f'Lawyers and Law Firms in {state.name} | {settings.SITE_NAME}',
        'description': (
            f'Find verified lawyers and law firms in {state.name}. Read reviews, '
            f'compare expertise, and connect with legal professionals across {state.short_name}.'
        ),
        'og_title': f'Lawyers and Law Firms in {state.name}',
        'og_description': f'Find verified legal professionals in {state.short_name}',
    }


def build_breadcrumbs(state, practice_area=None):
    """
    Home > State > Practice area.

    The last crumb is the current page and has no link.
    """
    crumbs = [Breadcrumb('Home', reverse('public_pages:home'))]

    if practice_area is None:
        crumbs.append(Breadcrumb(state.name))
        return crumbs

    crumbs.append(Breadcrumb(state.name, reverse('directory:state', kwargs={'state': state.code})))
    crumbs.append(Breadcrumb(practice_area.name))
    return crumbs
