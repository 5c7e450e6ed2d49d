"""
Management command to render every state and practice area page to HTML.

Produces:
    <output>/
      index.html                      - home page
      <state>/index.html              - state landing pages
      <state>/<practice-area>/index.html
"""
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.test import Client
from django.urls import reverse

from directory.static_params import generate_state_params, generate_static_params


class Command(BaseCommand):
    help = 'Render the home, state and practice area pages to static HTML files'

    def add_arguments(self, parser):
        parser.add_argument(
            '--output',
            default=None,
            help='Directory to write pages to (defaults to STATIC_PAGES_OUTPUT_DIR)',
        )

    def handle(self, *args, **options):
        output_dir = Path(options['output'] or settings.STATIC_PAGES_OUTPUT_DIR)
        client = Client(HTTP_HOST=settings.ALLOWED_HOSTS[0])

        paths = [reverse('public_pages:home')]
        paths += [reverse('directory:state', kwargs=params) for params in generate_state_params()]
        paths += [reverse('directory:practice_area', kwargs=params) for params in generate_static_params()]

        self.stdout.write(f'Rendering {len(paths)} pages to {output_dir}...')

        for url_path in paths:
            try:
                response = client.get(url_path, secure=True)
            except ValueError as e:
                # Manifest static storage raises for files missing from staticfiles.json
                raise CommandError(
                    f'Could not render {url_path}: {e}. '
                    'Run `manage.py collectstatic` before building pages.'
                )
            if response.status_code != 200:
                raise CommandError(f'{url_path} returned HTTP {response.status_code}')

            target = output_dir / url_path.strip('/') / 'index.html'
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(response.content)

        self.stdout.write(self.style.SUCCESS(f'Wrote {len(paths)} pages to {output_dir}'))
