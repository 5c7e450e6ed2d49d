import json

import pytest

from directory.services import content_resolver


@pytest.fixture(autouse=True)
def site_settings(settings):
    """Serve plain HTTP and unhashed static files under the test client."""
    settings.SECURE_SSL_REDIRECT = False
    settings.STORAGES = {
        'default': {'BACKEND': 'django.core.files.storage.FileSystemStorage'},
        'staticfiles': {'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage'},
    }
    settings.SITE_NAME = 'AusVerity'
    settings.LAWYER_SEARCH_URL = '/search'
    return settings


@pytest.fixture
def content_table(monkeypatch):
    """Swap in a content table for one test; pass a dict of state -> slug -> block."""
    def install(table):
        monkeypatch.setattr(content_resolver, '_content_table', table)
        return table
    return install


@pytest.fixture
def write_content(tmp_path):
    """Write a state content file into a temporary content directory."""
    def write(state_code, data):
        path = tmp_path / f'{state_code}.json'
        path.write_text(json.dumps(data), encoding='utf-8')
        return path
    return write


@pytest.fixture
def sample_block_data():
    return {
        'title': 'Family Law in Queensland',
        'summary': 'How family law works in <strong>Queensland</strong>.',
        'sections': [
            {'heading': 'Divorce', 'paragraphs': ['Twelve months separation.'], 'points': ['Apply online']},
        ],
        'key_legislation': ['Family Law Act 1975 (Cth)'],
        'resources': [{'name': 'FCFCOA', 'url': 'https://www.fcfcoa.gov.au/'}],
    }
