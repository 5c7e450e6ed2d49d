"""
Practice area categories offered in the directory.

Each category gets one page per state. The subcategories are the
specialisations lawyers can list on their profiles and feed the
search widget's practice area selector.
"""
from dataclasses import dataclass

from django.urls import reverse

from .states import normalize_state_code


@dataclass(frozen=True)
class PracticeArea:
    """A top-level practice area with its specialisations."""
    slug: str
    name: str
    category: str
    description: str
    subcategories: tuple = ()


PRACTICE_AREA_CATEGORIES = (
    PracticeArea(
        slug='family-law',
        name='Family Law',
        category='Family Law',
        description='Legal matters relating to family relationships, divorce, children, and domestic arrangements',
        subcategories=(
            'Family Law',
            'Divorce & Separation',
            'Child Custody & Parenting',
            'Property Settlement',
            'Spousal Maintenance',
            'De Facto Relationships',
            'Adoption',
            'Domestic Violence & AVO',
        ),
    ),
    PracticeArea(
        slug='criminal-law',
        name='Criminal Law',
        category='Criminal Law',
        description='Legal representation for criminal charges and offences',
        subcategories=(
            'Criminal Law',
            'Drink Driving & Traffic Offences',
            'Assault & Violence',
            'Drug Offences',
            'Fraud & White Collar Crime',
            'Sexual Offences',
            'Theft & Property Crimes',
            'Appeals',
        ),
    ),
    PracticeArea(
        slug='property-law',
        name='Property Law',
        category='Property Law',
        description='Property transactions, conveyancing, and property-related disputes',
        subcategories=(
            'Property Law',
            'Conveyancing',
            'Residential Property',
            'Commercial Property',
            'Property Development',
            'Leasing & Tenancy',
            'Strata & Body Corporate',
            'Property Disputes',
        ),
    ),
    PracticeArea(
        slug='wills-estates',
        name='Wills & Estates',
        category='Wills & Estates',
        description='Estate planning, wills, probate, and succession matters',
        subcategories=(
            'Wills & Estates',
            'Will Drafting',
            'Estate Planning',
            'Probate & Administration',
            'Contested Wills',
            'Powers of Attorney',
            'Guardianship',
            'Trust Law',
        ),
    ),
    PracticeArea(
        slug='employment-law',
        name='Employment Law',
        category='Employment Law',
        description='Workplace disputes, employment contracts, and employee rights',
        subcategories=(
            'Employment Law',
            'Unfair Dismissal',
            'Workplace Discrimination',
            'Workplace Bullying',
            'Employment Contracts',
            'Workers Compensation',
            'Redundancy',
            'Workplace Safety',
        ),
    ),
    PracticeArea(
        slug='personal-injury',
        name='Personal Injury',
        category='Personal Injury',
        description='Compensation claims for injuries and accidents',
        subcategories=(
            'Personal Injury Law',
            'Motor Vehicle Accidents',
            'Medical Negligence',
            'Public Liability Claims',
            'Work Injury Compensation',
            'Total & Permanent Disability (TPD)',
            'Dust Diseases',
        ),
    ),
    PracticeArea(
        slug='business-law',
        name='Business Law',
        category='Business Law',
        description='Commercial and corporate legal services for businesses',
        subcategories=(
            'Business Law',
            'Commercial Law',
            'Company Law',
            'Contract Law',
            'Business Formation & Structure',
            'Mergers & Acquisitions',
            'Commercial Disputes',
            'Business Sales & Purchases',
            'Franchising',
            'Partnership Agreements',
        ),
    ),
    PracticeArea(
        slug='immigration-law',
        name='Immigration Law',
        category='Immigration Law',
        description='Visa applications, citizenship, and immigration matters',
        subcategories=(
            'Immigration Law',
            'Visa Applications',
            'Skilled Migration',
            'Family Migration',
            'Business Migration',
            'Citizenship',
            'Visa Refusals & Appeals',
            'Deportation & Removal',
        ),
    ),
    PracticeArea(
        slug='litigation',
        name='Litigation',
        category='Litigation',
        description='Court proceedings and dispute resolution',
        subcategories=(
            'Civil Litigation',
            'Commercial Litigation',
            'Mediation & Alternative Dispute Resolution',
            'Debt Recovery',
            'Building & Construction Disputes',
            'Defamation',
        ),
    ),
    PracticeArea(
        slug='bankruptcy-insolvency',
        name='Bankruptcy & Insolvency',
        category='Bankruptcy & Insolvency',
        description='Bankruptcy, insolvency, and debt relief matters',
        subcategories=(
            'Bankruptcy',
            'Insolvency',
            'Liquidation',
            'Voluntary Administration',
            'Debt Agreements',
        ),
    ),
    PracticeArea(
        slug='intellectual-property',
        name='Intellectual Property',
        category='Intellectual Property',
        description='Protection and enforcement of intellectual property rights',
        subcategories=(
            'Intellectual Property Law',
            'Trademark Law',
            'Copyright Law',
            'Patent Law',
            'Trade Secrets',
        ),
    ),
    PracticeArea(
        slug='tax-law',
        name='Tax Law',
        category='Tax Law',
        description='Tax planning, disputes, and compliance',
        subcategories=(
            'Tax Law',
            'Income Tax',
            'GST',
            'Tax Disputes',
            'Tax Planning',
        ),
    ),
    PracticeArea(
        slug='environmental-law',
        name='Environmental Law',
        category='Environmental Law',
        description='Environmental regulation, planning, and resource management',
        subcategories=(
            'Environmental Law',
            'Planning & Development',
            'Native Title',
            'Mining & Resources',
        ),
    ),
    PracticeArea(
        slug='administrative-law',
        name='Administrative Law',
        category='Administrative Law',
        description='Government decisions, tribunals, and administrative matters',
        subcategories=(
            'Administrative Law',
            'Government Law',
            'Constitutional Law',
            'Freedom of Information',
        ),
    ),
)

PRACTICE_AREA_SLUGS = tuple(area.slug for area in PRACTICE_AREA_CATEGORIES)

# Specialisations that don't belong to one of the categories above.
# Only offered in the search widget.
OTHER_SPECIALISATIONS = (
    'Aviation Law',
    'Banking & Finance Law',
    'Competition & Consumer Law',
    'Entertainment & Media Law',
    'Health & Medical Law',
    'Insurance Law',
    'Privacy Law',
    'Sports Law',
    'Superannuation Law',
    'Technology & IT Law',
    'Telecommunications Law',
)

_PRACTICE_AREAS_BY_SLUG = {area.slug: area for area in PRACTICE_AREA_CATEGORIES}


def is_valid_practice_area_slug(slug):
    """True if slug is exactly one of the practice area slugs."""
    return isinstance(slug, str) and slug in _PRACTICE_AREAS_BY_SLUG


def get_practice_area_by_slug(slug):
    """Return the PracticeArea for a valid slug, otherwise None."""
    if not is_valid_practice_area_slug(slug):
        return None
    return _PRACTICE_AREAS_BY_SLUG[slug]


def get_practice_areas_by_category():
    """
    Map each category to its specialisations for the search widget.

    The category's own entry (e.g. 'Family Law', 'Personal Injury Law') is
    dropped from its list since selecting the category already covers it.
    An 'Other' group is appended last.
    """
    grouped = {}
    for area in PRACTICE_AREA_CATEGORIES:
        grouped[area.category] = [
            sub for sub in area.subcategories
            if sub not in (area.category, f'{area.category} Law')
        ]
    grouped['Other'] = list(OTHER_SPECIALISATIONS)
    return grouped


def get_practice_area_url(state, slug):
    """Return the page path for a state/practice area pair, or None."""
    code = normalize_state_code(state)
    if not code or not is_valid_practice_area_slug(slug):
        return None
    return reverse('directory:practice_area', kwargs={'state': code, 'practice_area': slug})
