"""
Geography — Management Command: seed_geography

Loads the Indonesian administrative hierarchy from the CSV files of the
public idn-area dataset:

    provinces.csv   code,name
    regencies.csv   code,province_code,name
    districts.csv   code,regency_code,name
    villages.csv    code,district_code,name
    islands.csv     code,regency_code,coordinate,is_populated,is_outermost_small,name

Usage::

    python manage.py seed_geography --dir data/

Every row is validated against the model (code width, parent prefix,
name and coordinate format) and rejected rows are reported and skipped.

Idempotent: safe to re-run (existing codes are left untouched). Dotted
codes such as ``11.01`` are normalized to ``1101``.

@file geography/management/commands/seed_geography.py
"""

import csv
import logging
from pathlib import Path

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from geography.models import District, Island, Province, Regency, Village

logger = logging.getLogger('wilayah')

BATCH_SIZE = 1000
TRUTHY = {'1', 'true', 't', 'yes', 'y'}


def normalize_code(value):
    return (value or '').replace('.', '').strip()


def parse_bool(value):
    return (value or '').strip().lower() in TRUTHY


def province_row(row):
    return Province(code=normalize_code(row['code']), name=row['name'].strip())


def regency_row(row):
    return Regency(
        code=normalize_code(row['code']),
        name=row['name'].strip(),
        province_id=normalize_code(row['province_code']),
    )


def district_row(row):
    return District(
        code=normalize_code(row['code']),
        name=row['name'].strip(),
        regency_id=normalize_code(row['regency_code']),
    )


def village_row(row):
    return Village(
        code=normalize_code(row['code']),
        name=row['name'].strip(),
        district_id=normalize_code(row['district_code']),
    )


def island_row(row):
    return Island(
        code=normalize_code(row['code']),
        name=row['name'].strip(),
        regency_id=normalize_code(row.get('regency_code')) or None,
        coordinate=row['coordinate'].strip(),
        is_populated=parse_bool(row.get('is_populated')),
        is_outermost_small=parse_bool(row.get('is_outermost_small')),
    )


# Parents first, so foreign keys resolve.
SOURCES = (
    ('provinces.csv', Province, province_row),
    ('regencies.csv', Regency, regency_row),
    ('districts.csv', District, district_row),
    ('villages.csv', Village, village_row),
    ('islands.csv', Island, island_row),
)


class Command(BaseCommand):
    help = 'Seed the Indonesian administrative hierarchy from idn-area CSV files.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dir',
            type=str,
            required=True,
            help='Directory containing provinces.csv, regencies.csv, districts.csv, villages.csv and islands.csv.',
        )

    def handle(self, *args, **options):
        directory = Path(options['dir'])
        if not directory.is_dir():
            raise CommandError(f'{directory} is not a directory.')

        self.stdout.write(f'Loading administrative hierarchy from {directory}…')
        counts = {}

        with transaction.atomic():
            for filename, model, build in SOURCES:
                path = directory / filename
                if not path.exists():
                    self.stderr.write(f'  {filename} not found, skipping.')
                    continue
                counts[str(model._meta.verbose_name_plural)] = self._load(path, model, build)

        summary = ', '.join(f'{name.capitalize()}: {count}' for name, count in counts.items())
        logger.info('seed_geography loaded %s', summary)
        self.stdout.write(self.style.SUCCESS(f'Done. {summary}'))

    def _load(self, path, model, build):
        parent_keys = self._parent_keys(model)
        objects, rejected = [], 0

        with open(path, 'r', encoding='utf-8', newline='') as f:
            for line, row in enumerate(csv.DictReader(f), start=2):
                obj = build(row)
                try:
                    self._validate(obj, parent_keys)
                except ValidationError as exc:
                    rejected += 1
                    logger.warning('seed_geography rejected %s:%d %s', path.name, line, exc.message_dict)
                    self.stderr.write(f'  {path.name}:{line} rejected: {exc.message_dict}')
                    continue
                objects.append(obj)

        model.objects.bulk_create(objects, batch_size=BATCH_SIZE, ignore_conflicts=True)
        self.stdout.write(f'  {path.name}: {len(objects)} rows, {rejected} rejected')
        return len(objects)

    @staticmethod
    def _parent_keys(model):
        """Codes of the already-loaded parent units, or None for the top level."""
        if model.parent_field is None:
            return None
        parent_model = model._meta.get_field(model.parent_field).related_model
        return set(parent_model.objects.values_list('pk', flat=True))

    @staticmethod
    def _validate(obj, parent_keys):
        # The foreign key is checked against the preloaded codes instead of
        # one query per row.
        exclude = [obj.parent_field] if obj.parent_field else None
        obj.full_clean(exclude=exclude, validate_unique=False)

        parent_code = obj.parent_code
        if parent_keys is not None and parent_code is not None and parent_code not in parent_keys:
            raise ValidationError({obj.parent_field: [f'Unknown {obj.parent_field} {parent_code}.']})
