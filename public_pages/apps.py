from django.apps import AppConfig


class PublicPagesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'public_pages'
