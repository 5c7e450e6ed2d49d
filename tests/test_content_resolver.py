"""Tests for loading and resolving practice area content."""
import logging

import pytest
from django.core.exceptions import ImproperlyConfigured

from directory.constants.practice_areas import PRACTICE_AREA_SLUGS
from directory.constants.states import STATE_CODES
from directory.services import content_resolver
from directory.services.content_resolver import (
    ContentBlock,
    ContentSection,
    get_content_table,
    get_practice_area_content,
    load_content_table,
    load_state_content,
    missing_content_pairs,
    parse_content_block,
)


# ---------------------------------------------------------------------------
# Shipped content
# ---------------------------------------------------------------------------

def test_queensland_family_law_has_content():
    block = get_practice_area_content('qld', 'family-law')

    assert isinstance(block, ContentBlock)
    assert block.title == 'Family Law in Queensland'
    assert block.sections


def test_act_litigation_has_content():
    block = get_practice_area_content('act', 'litigation')

    assert block is not None
    assert 'Australian Capital Territory' in block.title


def test_every_state_has_a_content_file():
    table = get_content_table()
    assert set(table) == set(STATE_CODES)


def test_resolution_is_deterministic():
    first = get_practice_area_content('nsw', 'criminal-law')
    second = get_practice_area_content('nsw', 'criminal-law')

    assert first == second
    assert first is second


def test_content_table_is_read_only():
    table = get_content_table()

    with pytest.raises(TypeError):
        table['qld'] = {}
    with pytest.raises(TypeError):
        table['qld']['family-law'] = None


def test_content_blocks_are_frozen():
    block = get_practice_area_content('qld', 'family-law')

    with pytest.raises(AttributeError):
        block.title = 'Changed'


# ---------------------------------------------------------------------------
# Partial coverage
# ---------------------------------------------------------------------------

def test_missing_slug_for_valid_state_is_none():
    # Tasmania has no tax law guide
    assert get_practice_area_content('tas', 'tax-law') is None


def test_state_without_table_is_none(content_table):
    block = ContentBlock(title='Family Law in Queensland', summary='...')
    content_table({'qld': {'family-law': block}})

    assert get_practice_area_content('qld', 'family-law') == block
    assert get_practice_area_content('nsw', 'family-law') is None


def test_unknown_state_is_none_not_an_error():
    assert get_practice_area_content('xx', 'family-law') is None
    assert get_practice_area_content('', '') is None


@pytest.mark.parametrize('state_code, slug', [
    (['qld'], 'family-law'),
    ('qld', ['family-law']),
    ({'qld': 1}, {}),
    (None, None),
    (7, 'family-law'),
])
def test_non_string_arguments_are_none(state_code, slug):
    assert get_practice_area_content(state_code, slug) is None


def test_missing_content_pairs_covers_cross_product(content_table):
    table = content_table({})

    missing = missing_content_pairs(table)

    assert len(missing) == len(STATE_CODES) * len(PRACTICE_AREA_SLUGS)
    assert ('qld', 'family-law') in missing


def test_missing_content_pairs_excludes_authored_pairs():
    missing = missing_content_pairs()

    assert ('qld', 'family-law') not in missing
    assert ('act', 'litigation') not in missing
    assert ('tas', 'tax-law') in missing


# ---------------------------------------------------------------------------
# Parsing and loading
# ---------------------------------------------------------------------------

def test_parse_content_block(sample_block_data):
    block = parse_content_block(sample_block_data)

    assert block.title == 'Family Law in Queensland'
    assert block.sections == (
        ContentSection(heading='Divorce', paragraphs=('Twelve months separation.',), points=('Apply online',)),
    )
    assert block.key_legislation == ('Family Law Act 1975 (Cth)',)
    assert block.resources[0].description == ''


def test_parsed_blocks_compare_structurally(sample_block_data):
    assert parse_content_block(sample_block_data) == parse_content_block(sample_block_data)


@pytest.mark.parametrize('field', ['title', 'summary', 'sections'])
def test_parse_requires_fields(sample_block_data, field):
    del sample_block_data[field]

    with pytest.raises(ValueError, match=field):
        parse_content_block(sample_block_data)


def test_parse_requires_section_heading(sample_block_data):
    sample_block_data['sections'] = [{'paragraphs': ['No heading']}]

    with pytest.raises(ValueError, match='heading'):
        parse_content_block(sample_block_data)


def test_parse_rejects_resource_without_url(sample_block_data):
    sample_block_data['resources'] = [{'name': 'Somewhere'}]

    with pytest.raises(ValueError, match='url'):
        parse_content_block(sample_block_data)


def test_load_table_from_directory(tmp_path, write_content, sample_block_data):
    write_content('qld', {'family-law': sample_block_data})

    table = load_content_table(tmp_path)

    assert list(table) == ['qld']
    assert table['qld']['family-law'].title == 'Family Law in Queensland'


def test_load_skips_unknown_state_file(tmp_path, write_content, sample_block_data, caplog):
    write_content('texas', {'family-law': sample_block_data})

    with caplog.at_level(logging.WARNING, logger='directory'):
        table = load_content_table(tmp_path)

    assert dict(table) == {}
    assert 'texas.json' in caplog.text


def test_load_skips_unknown_slug(write_content, sample_block_data, caplog):
    path = write_content('qld', {'family-law': sample_block_data, 'famly-law': sample_block_data})

    with caplog.at_level(logging.WARNING, logger='directory'):
        blocks = load_state_content(path)

    assert list(blocks) == ['family-law']
    assert 'famly-law' in caplog.text


def test_load_rejects_invalid_json(tmp_path):
    (tmp_path / 'qld.json').write_text('{"family-law": ', encoding='utf-8')

    with pytest.raises(ImproperlyConfigured, match='Invalid JSON'):
        load_content_table(tmp_path)


def test_load_rejects_non_object(write_content, tmp_path):
    write_content('qld', ['family-law'])

    with pytest.raises(ImproperlyConfigured):
        load_content_table(tmp_path)


def test_load_rejects_bad_block(write_content, tmp_path):
    write_content('qld', {'family-law': {'title': 'Missing summary'}})

    with pytest.raises(ImproperlyConfigured, match="'family-law'"):
        load_content_table(tmp_path)


def test_load_requires_existing_directory(tmp_path):
    with pytest.raises(ImproperlyConfigured):
        load_content_table(tmp_path / 'missing')


def test_get_content_table_loads_from_settings(settings, tmp_path, write_content, sample_block_data, monkeypatch):
    write_content('nt', {'criminal-law': sample_block_data})
    settings.PRACTICE_AREA_CONTENT_DIR = tmp_path
    monkeypatch.setattr(content_resolver, '_content_table', None)

    assert get_practice_area_content('nt', 'criminal-law').title == 'Family Law in Queensland'
    assert get_practice_area_content('qld', 'family-law') is None
