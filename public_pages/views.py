from django.conf import settings
from django.http import HttpResponse
from django.shortcuts import render

from directory.constants.practice_areas import PRACTICE_AREA_CATEGORIES
from directory.constants.states import AUSTRALIAN_STATES


def robots_txt(request):
    """
    Serve robots.txt for search engine crawlers.
    Points to sitemap.xml and keeps crawlers out of search result pages.
    """
    # Build the sitemap URL dynamically
    protocol = 'https' if request.is_secure() else 'http'
    host = request.get_host()
    sitemap_url = f"{protocol}://{host}/sitemap.xml"

    lines = [
        "User-agent: *",
        "Allow: /",
        "",
        "# Search results are generated per query",
        f"Disallow: {settings.LAWYER_SEARCH_URL}",
        "",
        "# Sitemap location",
        f"Sitemap: {sitemap_url}",
    ]
    return HttpResponse("\n".join(lines), content_type="text/plain")


def landing_page(request):
    """
    Main public landing page.
    Lists every state and territory and the practice areas covered in each.
    """
    # Quick reasons to use the directory, shown under the hero
    highlights = [
        {
            'title': 'Verified Lawyers',
            'summary': 'Lawyer and firm profiles are reviewed by our team before they are published.',
            'icon': 'bi-patch-check',
        },
        {
            'title': 'Local Legal Guides',
            'summary': 'Plain-English guides to how each area of law works in your state or territory.',
            'icon': 'bi-journal-text',
        },
        {
            'title': 'Genuine Reviews',
            'summary': 'Read reviews from clients before you make contact.',
            'icon': 'bi-star',
        },
    ]

    context = {
        'states': AUSTRALIAN_STATES,
        'practice_areas': PRACTICE_AREA_CATEGORIES,
        'highlights': highlights,
    }

    return render(request, 'public_pages/landing.html', context)
