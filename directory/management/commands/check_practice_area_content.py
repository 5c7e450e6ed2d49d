"""
Management command to report state/practice area pages without a guide.

Pages with no guide still render (with an empty content region), so gaps
are never an error at request time. Run with --strict in a build pipeline
to fail when coverage is incomplete.
"""
from django.core.management.base import BaseCommand, CommandError

from directory.constants.states import STATE_CODES
from directory.services.content_resolver import get_content_table, missing_content_pairs


class Command(BaseCommand):
    help = 'List state/practice area pairs that have no practice area guide'

    def add_arguments(self, parser):
        parser.add_argument(
            '--strict',
            action='store_true',
            help='Exit with an error if any pair is missing a guide',
        )

    def handle(self, *args, **options):
        table = get_content_table()

        for state_code in STATE_CODES:
            if state_code not in table:
                self.stdout.write(self.style.WARNING(f'No content file for state: {state_code}'))

        missing = missing_content_pairs(table)
        if not missing:
            self.stdout.write(self.style.SUCCESS('Every state/practice area pair has a guide.'))
            return

        for state_code, slug in missing:
            self.stdout.write(f'  missing: /{state_code}/{slug}/')

        summary = f'{len(missing)} state/practice area pairs have no guide.'
        if options['strict']:
            raise CommandError(summary)
        self.stdout.write(self.style.WARNING(summary))
