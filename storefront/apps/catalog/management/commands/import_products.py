from django.core.management.base import BaseCommand, CommandError

from apps.catalog.services.importer import CatalogImportError, ProductImporter


class Command(BaseCommand):
    help = 'Import products from the DummyJSON catalog API'

    def add_arguments(self, parser):
        parser.add_argument('--count', type=int, default=30, help='Number of products to fetch')
        parser.add_argument('--url', default=None, help='Override the catalog API endpoint')

    def handle(self, *args, **options):
        if options['count'] < 1:
            raise CommandError('--count must be at least 1')

        importer = ProductImporter(url=options['url'])
        try:
            result = importer.run(count=options['count'])
        except CatalogImportError as e:
            raise CommandError(str(e)) from e

        if result.skipped:
            self.stdout.write(self.style.WARNING(f'Skipped {result.skipped} already imported products.'))
        self.stdout.write(self.style.SUCCESS(f'Successfully imported {result.imported} products'))
