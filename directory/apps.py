from django.apps import AppConfig


class DirectoryConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'directory'
    verbose_name = 'Lawyer Directory'

    def ready(self):
        # Load the practice area content table before the first request is served
        from .services.content_resolver import get_content_table
        get_content_table()
