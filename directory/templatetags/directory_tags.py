from django import template

register = template.Library()


@register.inclusion_tag('directory/_state_search.html')
def state_search(config):
    """Render the lawyer search widget for a StateSearchConfig."""
    return {'search': config}


@register.inclusion_tag('directory/_breadcrumbs.html')
def breadcrumbs(crumbs):
    """Render a breadcrumb trail; the last crumb is the current page."""
    return {'crumbs': crumbs}
