from django.core.management.base import BaseCommand, CommandError

from seo_meta import conf
from seo_meta.checks import compare_routes
from seo_meta.routes import static_get_paths


class Command(BaseCommand):
    help = 'Audit page metadata against the URLconf: missing paths, orphaned entries and empty titles.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--strict',
            action='store_true',
            help='Exit with an error when the audit finds issues',
        )
        parser.add_argument(
            '--urlconf',
            default=None,
            help='Dotted path of the URLconf to audit (defaults to ROOT_URLCONF)',
        )

    def handle(self, *args, **options):
        registry = conf.get_registry()
        report = compare_routes(
            static_get_paths(options['urlconf']),
            registry.paths(),
            conf.ignored_paths(),
        )
        warnings = []
        for path in report.missing:
            warnings.append(f"{path}: no metadata registered")
        for path in report.orphaned:
            warnings.append(f"{path}: metadata registered but no route serves it")
        for path in registry.paths():
            page = registry.lookup(path)
            if not page.title:
                warnings.append(f"{path}: missing title")
            if not page.description:
                warnings.append(f"{path}: missing description")
        if warnings:
            self.stdout.write(self.style.WARNING('SEO audit found issues:'))
            for warning in warnings:
                self.stdout.write(f'  - {warning}')
            if options['strict']:
                raise CommandError(f'SEO audit failed with {len(warnings)} issue(s).')
        else:
            self.stdout.write(self.style.SUCCESS(
                f'SEO audit passed with no issues ({len(registry)} paths registered).'
            ))
