import logging

from django.http import Http404
from django.shortcuts import render

from .constants.practice_areas import (
    PRACTICE_AREA_CATEGORIES,
    get_practice_area_by_slug,
    is_valid_practice_area_slug,
)
from .constants.states import get_state_by_code, is_valid_state_code
from .search import StateSearchConfig
from .seo import build_breadcrumbs, build_practice_area_metadata, build_state_metadata
from .services.content_resolver import get_practice_area_content

logger = logging.getLogger(__name__)


def state_page(request, state):
    """
    Landing page for one state or territory.
    Shows the search widget and links to every practice area page.
    """
    if not is_valid_state_code(state):
        logger.debug(f'State page requested for unknown state: {state!r}')
        raise Http404('Unknown state')

    state_info = get_state_by_code(state)

    context = {
        'state': state_info,
        'practice_areas': PRACTICE_AREA_CATEGORIES,
        'meta': build_state_metadata(state),
        'breadcrumbs': build_breadcrumbs(state_info),
        'search': StateSearchConfig(state_info.code, state_info.name),
    }
    return render(request, 'directory/state.html', context)


def practice_area_page(request, state, practice_area):
    """
    Guide to one practice area in one state, with a filtered lawyer search.

    Either parameter being invalid is a 404. A valid pair with no authored
    guide still renders; the content region is just left empty.
    """
    if not is_valid_state_code(state) or not is_valid_practice_area_slug(practice_area):
        logger.debug(f'Practice area page requested for unknown pair: {state!r}/{practice_area!r}')
        raise Http404('Unknown state or practice area')

    state_info = get_state_by_code(state)
    area = get_practice_area_by_slug(practice_area)
    content = get_practice_area_content(state, practice_area)

    context = {
        'state': state_info,
        'practice_area': area,
        'content': content,
        'meta': build_practice_area_metadata(state, practice_area),
        'breadcrumbs': build_breadcrumbs(state_info, area),
        'search': StateSearchConfig(state_info.code, state_info.name, area.category),
        'related_practice_areas': [
            other for other in PRACTICE_AREA_CATEGORIES if other.slug != area.slug
        ],
    }
    return render(request, 'directory/practice_area.html', context)
