"""
Configuration for the lawyer search widget shown on state pages.

The widget itself is a plain GET form rendered by the ``state_search``
inclusion tag; results are served by the lawyer search backend at
LAWYER_SEARCH_URL.
"""
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

from django.conf import settings

from .constants.practice_areas import get_practice_areas_by_category

SEARCH_TYPES = ('lawyer', 'firm')


@dataclass(frozen=True)
class StateSearchConfig:
    """
    Search widget settings for one page.

    When practice_area_category is set the widget filters by that
    category and hides its practice area selector.
    """
    state_code: str
    state_name: str
    practice_area_category: Optional[str] = None

    @property
    def action_url(self):
        return settings.LAWYER_SEARCH_URL

    @property
    def show_practice_area_selector(self):
        return not self.practice_area_category

    @property
    def practice_area_choices(self):
        """Category -> specialisations, only needed when the selector is shown."""
        if not self.show_practice_area_selector:
            return {}
        return get_practice_areas_by_category()

    def browse_url(self, search_type='lawyer'):
        """Link to the full result list, e.g. /search?state=qld&type=lawyer."""
        if search_type not in SEARCH_TYPES:
            raise ValueError(f'Unknown search type: {search_type}')

        params = {'state': self.state_code, 'type': search_type}
        if self.practice_area_category:
            params['category'] = self.practice_area_category
        return f'{self.action_url}?{urlencode(params)}'

    @property
    def lawyers_url(self):
        return self.browse_url('lawyer')

    @property
    def firms_url(self):
        return self.browse_url('firm')
