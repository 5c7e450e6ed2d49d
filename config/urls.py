from django.contrib.sitemaps.views import sitemap
from django.urls import path, include

from .sitemaps import sitemaps

urlpatterns = [
    path('sitemap.xml', sitemap, {'sitemaps': sitemaps}, name='django.contrib.sitemaps.views.sitemap'),
    path('', include('public_pages.urls')),  # Home page and robots.txt
    # State and practice area pages match any path segment, so they go last
    path('', include('directory.urls')),
]
