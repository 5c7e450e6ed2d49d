"""
Practice area content for each state.

Content lives in one JSON file per state under PRACTICE_AREA_CONTENT_DIR
(``qld.json``, ``nsw.json``, ...), each an object keyed by practice area
slug:

    {
        "family-law": {
            "title": "Family Law in Queensland",
            "summary": "...",
            "sections": [
                {"heading": "...", "paragraphs": ["..."], "points": ["..."]}
            ],
            "key_legislation": ["Family Law Act 1975 (Cth)"],
            "resources": [{"name": "...", "url": "...", "description": "..."}]
        }
    }

The files are read once into a read-only two-level mapping
(state code -> slug -> ContentBlock). Coverage is allowed to be partial:
a valid state/practice area pair with no entry simply has no guide.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from ..constants.practice_areas import PRACTICE_AREA_SLUGS, is_valid_practice_area_slug
from ..constants.states import STATE_CODES, is_valid_state_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resource:
    name: str
    url: str
    description: str = ''


@dataclass(frozen=True)
class ContentSection:
    heading: str
    paragraphs: tuple = ()
    points: tuple = ()


@dataclass(frozen=True)
class ContentBlock:
    """An authored guide to one practice area in one state."""
    title: str
    summary: str
    sections: tuple = ()
    key_legislation: tuple = ()
    resources: tuple = ()


REQUIRED_FIELDS = ('title', 'summary', 'sections')


def parse_content_block(data):
    """
    Build a ContentBlock from one decoded JSON entry.

    Raises ValueError describing the first problem found.
    """
    if not isinstance(data, dict):
        raise ValueError('entry must be an object')

    for field in REQUIRED_FIELDS:
        if not data.get(field):
            raise ValueError(f"missing required field '{field}'")

    sections = []
    for index, section in enumerate(data['sections']):
        if not isinstance(section, dict) or not section.get('heading'):
            raise ValueError(f'section {index} needs a heading')
        sections.append(ContentSection(
            heading=section['heading'],
            paragraphs=tuple(section.get('paragraphs', [])),
            points=tuple(section.get('points', [])),
        ))

    resources = []
    for resource in data.get('resources', []):
        if not isinstance(resource, dict) or not resource.get('name') or not resource.get('url'):
            raise ValueError('resources need a name and url')
        resources.append(Resource(
            name=resource['name'],
            url=resource['url'],
            description=resource.get('description', ''),
        ))

    return ContentBlock(
        title=data['title'],
        summary=data['summary'],
        sections=tuple(sections),
        key_legislation=tuple(data.get('key_legislation', [])),
        resources=tuple(resources),
    )


def load_state_content(path):
    """
    Load one state's file into a read-only slug -> ContentBlock mapping.

    Entries keyed by an unknown slug are skipped with a warning so a typo
    in one key doesn't take the whole state offline.
    """
    path = Path(path)
    try:
        with path.open(encoding='utf-8') as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ImproperlyConfigured(f'Invalid JSON in practice area content file {path}: {e}')

    if not isinstance(raw, dict):
        raise ImproperlyConfigured(f'Practice area content file {path} must contain an object keyed by slug')

    blocks = {}
    for slug, entry in raw.items():
        if not is_valid_practice_area_slug(slug):
            logger.warning(f"Skipping unknown practice area '{slug}' in {path.name}")
            continue
        try:
            blocks[slug] = parse_content_block(entry)
        except ValueError as e:
            raise ImproperlyConfigured(f"Bad content for '{slug}' in {path}: {e}")

    return MappingProxyType(blocks)


def load_content_table(content_dir):
    """
    Load every ``<state_code>.json`` file in content_dir.

    Returns a read-only mapping of state code -> (slug -> ContentBlock).
    """
    content_dir = Path(content_dir)
    if not content_dir.is_dir():
        raise ImproperlyConfigured(f'PRACTICE_AREA_CONTENT_DIR does not exist: {content_dir}')

    table = {}
    for path in sorted(content_dir.glob('*.json')):
        state_code = path.stem
        if not is_valid_state_code(state_code):
            logger.warning(f'Skipping content file for unknown state: {path.name}')
            continue
        table[state_code] = load_state_content(path)

    block_count = sum(len(blocks) for blocks in table.values())
    logger.info(f'Loaded {block_count} practice area guides for {len(table)} states from {content_dir}')
    return MappingProxyType(table)


_content_table = None


def get_content_table():
    """Return the content table, loading it on first use."""
    global _content_table
    if _content_table is None:
        _content_table = load_content_table(settings.PRACTICE_AREA_CONTENT_DIR)
    return _content_table


def get_practice_area_content(state_code, slug):
    """
    Return the ContentBlock for a state/practice area pair, or None.

    Expects parameters that have already been validated. A state with no
    content file, or a practice area missing from that state's file,
    both give None. So does any non-string argument.
    """
    if not isinstance(state_code, str) or not isinstance(slug, str):
        return None

    state_content = get_content_table().get(state_code)
    if state_content is None:
        return None
    return state_content.get(slug)


def missing_content_pairs(table=None):
    """List every valid (state_code, slug) pair that has no ContentBlock."""
    if table is None:
        table = get_content_table()

    missing = []
    for state_code in STATE_CODES:
        state_content = table.get(state_code, {})
        for slug in PRACTICE_AREA_SLUGS:
            if slug not in state_content:
                missing.append((state_code, slug))
    return missing
