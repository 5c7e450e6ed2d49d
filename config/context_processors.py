from django.conf import settings


def app_branding(request):
    """Make site branding and the jurisdiction list available to all templates."""
    from directory.constants.states import AUSTRALIAN_STATES

    return {
        'site_name': settings.SITE_NAME,
        'site_tagline': settings.SITE_TAGLINE,
        'nav_states': AUSTRALIAN_STATES,
    }
