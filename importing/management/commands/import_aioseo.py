"""
Management command to import a site's AIOSEO settings.
Usage: python manage.py import_aioseo --site 1 [--type general_settings] [--limit 50] [--reset]
"""
from django.core.management.base import BaseCommand, CommandError

from sites.models import Site
from importing.actions import IMPORTING_ACTIONS, get_importing_actions


class Command(BaseCommand):
    help = "Import AIOSEO settings into a site's search appearance options"

    def add_arguments(self, parser):
        parser.add_argument('--site', type=int, required=True, help='Site id')
        parser.add_argument(
            '--type',
            action='append',
            dest='types',
            choices=[action_class.importer_type for action_class in IMPORTING_ACTIONS],
            help='Importer type; repeat for several (default: all)',
        )
        parser.add_argument('--limit', type=int, help='Settings per chunk')
        parser.add_argument('--reset', action='store_true', help='Start over from the first setting')

    def handle(self, *args, **options):
        try:
            site = Site.objects.get(id=options['site'])
        except Site.DoesNotExist:
            raise CommandError(f"Site {options['site']} does not exist")

        if options['limit'] is not None and options['limit'] < 1:
            raise CommandError('--limit must be at least 1')

        types = options['types'] or [None]
        actions = []
        for importer_type in types:
            actions.extend(get_importing_actions(site, 'aioseo', importer_type))

        total = 0
        for action in actions:
            if options['reset']:
                action.reset()
            if options['limit'] is not None:
                action.set_limit(options['limit'])

            imported = 0
            while True:
                objects = action.index()
                if not objects:
                    break
                imported += len(objects)

            total += imported
            self.stdout.write(f'{action.get_type()}: {imported} settings processed')

        self.stdout.write(self.style.SUCCESS(f'Imported AIOSEO settings for {site} ({total} settings processed).'))
