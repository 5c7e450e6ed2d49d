"""
XML Sitemap configuration for SEO.

Includes the home page, every state landing page and every
state/practice area page. Lawyer search results are excluded.
"""

from django.contrib.sitemaps import Sitemap
from django.urls import reverse

from directory.static_params import generate_state_params, generate_static_params


class StaticViewSitemap(Sitemap):
    """Sitemap for static pages that don't change frequently."""

    priority = 1.0
    changefreq = 'monthly'

    def items(self):
        """Return list of static page URL names."""
        return [
            'public_pages:home',
        ]

    def location(self, item):
        """Return the URL for each item."""
        return reverse(item)


class StatePageSitemap(Sitemap):
    """Sitemap for the state and territory landing pages."""

    priority = 0.8
    changefreq = 'weekly'

    def items(self):
        return generate_state_params()

    def location(self, item):
        return reverse('directory:state', kwargs=item)


class PracticeAreaPageSitemap(Sitemap):
    """Sitemap for every state/practice area combination."""

    priority = 0.7
    changefreq = 'monthly'

    def items(self):
        """Return the full state x practice area cross-product."""
        return generate_static_params()

    def location(self, item):
        """Return the URL for each page."""
        return reverse('directory:practice_area', kwargs=item)


# Dictionary of all sitemaps for URL configuration
sitemaps = {
    'static': StaticViewSitemap,
    'states': StatePageSitemap,
    'practice_areas': PracticeAreaPageSitemap,
}
