"""Tests for the static page parameters and the XML sitemap."""
from directory.constants.practice_areas import PRACTICE_AREA_SLUGS
from directory.constants.states import STATE_CODES
from directory.static_params import generate_state_params, generate_static_params


def test_static_params_cover_cross_product():
    params = generate_static_params()

    assert len(params) == len(STATE_CODES) * len(PRACTICE_AREA_SLUGS) == 112
    pairs = {(p['state'], p['practice_area']) for p in params}
    assert len(pairs) == 112
    assert ('qld', 'family-law') in pairs


def test_state_params():
    assert generate_state_params() == [{'state': code} for code in STATE_CODES]


def test_sitemap_lists_every_page(client):
    response = client.get('/sitemap.xml')
    body = response.content.decode()

    assert response.status_code == 200
    assert body.count('<loc>') == 1 + 8 + 112
    assert '/qld/family-law/</loc>' in body
    assert '/act/</loc>' in body


def test_robots_txt_points_to_sitemap(client):
    response = client.get('/robots.txt')
    body = response.content.decode()

    assert response['Content-Type'].startswith('text/plain')
    assert 'Sitemap: http://testserver/sitemap.xml' in body
    assert 'Disallow: /search' in body
