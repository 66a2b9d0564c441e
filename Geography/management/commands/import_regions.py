"""
Import the region hierarchy from CSV files.

Usage:
    python manage.py import_regions path/to/csv --clear
    python manage.py import_regions path/to/csv --user admin

Expected files (header row required, UTF-8 with or without BOM):
    country.csv   kode, nama, iso_code, phone_code
    province.csv  kode, nama, country_code
    city.csv      kode, nama, country_code, province_code
    district.csv  kode, nama[, city_code]
    village.csv   kode, nama[, district_code]   (villages.csv is accepted too)

Districts and villages without an explicit parent column are matched by
code prefix: '11.01.02' belongs to city '11.01', '11.01.02.2001' to
district '11.01.02'. A parent code shared by several parents is left
unresolved and its rows are skipped.
"""
import csv
import logging
from pathlib import Path

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from Geography.models import Country, Province, City, District, Village

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1000
CITY_CODE_LENGTH = 5
DISTRICT_CODE_LENGTH = 8


def read_csv_rows(path: Path):
    """Yield rows as dicts with BOM/whitespace-stripped headers and values."""
    with open(path, newline='', encoding='utf-8-sig') as handle:
        reader = csv.reader(handle)
        try:
            headers = [h.strip() for h in next(reader)]
        except StopIteration:
            return
        for row in reader:
            if len(row) != len(headers):
                continue
            yield {key: value.strip() for key, value in zip(headers, row)}


def index_by_code(pairs):
    """
    Map code -> id. Codes are only unique within a parent, so a code seen
    under several parents maps to None and its children stay unresolved.
    """
    index = {}
    for code, pk in pairs:
        index[code] = None if code in index else pk
    return index


class Command(BaseCommand):
    help = 'Import countries, provinces, cities, districts and villages from CSV files'

    def add_arguments(self, parser):
        parser.add_argument('directory', help='Directory holding the region CSV files')
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all existing region data before importing',
        )
        parser.add_argument(
            '--user',
            default=None,
            help='Username recorded as creator (defaults to the first superuser)',
        )

    def handle(self, *args, **options):
        directory = Path(options['directory'])
        if not directory.is_dir():
            raise CommandError(f'Directory not found: {directory}')

        self.user = self.resolve_user(options['user'])
        self.now = timezone.now()

        self.stdout.write('Starting region data import...')
        with transaction.atomic():
            if options['clear']:
                self.clear_existing_data()
            self.import_countries(directory)
            self.import_provinces(directory)
            self.import_cities(directory)
            self.import_districts(directory)
            self.import_villages(directory)
        self.stdout.write(self.style.SUCCESS('Region data import completed successfully!'))

    def resolve_user(self, username):
        User = get_user_model()
        if username:
            try:
                return User.objects.get(username=username)
            except User.DoesNotExist:
                raise CommandError(f"User '{username}' not found")
        return User.objects.filter(is_superuser=True).order_by('pk').first()

    def clear_existing_data(self):
        self.stdout.write('Clearing existing region data...')
        # Children first: parents are PROTECTed
        for model in (Village, District, City, Province, Country):
            model.objects.all().delete()

    def find_file(self, directory, *names):
        for name in names:
            path = directory / name
            if path.exists():
                return path
        self.stdout.write(self.style.ERROR(f'{names[0]} not found, skipping'))
        logger.warning(f"Region import: {names[0]} not found in {directory}")
        return None

    def audit(self):
        return {
            'created_at': self.now,
            'updated_at': self.now,
            'created_by': self.user,
            'updated_by': self.user,
        }

    def bulk_insert(self, model, rows):
        """Insert model instances in chunks; returns the number inserted."""
        batch = []
        count = 0
        for instance in rows:
            batch.append(instance)
            if len(batch) >= CHUNK_SIZE:
                model.objects.bulk_create(batch)
                count += len(batch)
                batch = []
        if batch:
            model.objects.bulk_create(batch)
            count += len(batch)
        return count

    def report(self, label, count, skipped):
        message = f'Imported {count} {label}'
        if skipped:
            message += f' ({skipped} skipped: unknown parent)'
        self.stdout.write(message)
        logger.info(f"Region import: {message}")

    def import_countries(self, directory):
        self.stdout.write('Importing countries...')
        path = self.find_file(directory, 'country.csv')
        if path is None:
            return
        rows = (
            Country(
                code=row['kode'],
                name=row['nama'],
                iso_code=row.get('iso_code') or None,
                phone_code=row.get('phone_code') or None,
                **self.audit(),
            )
            for row in read_csv_rows(path)
            if row.get('kode') and row.get('nama')
        )
        self.report('countries', self.bulk_insert(Country, rows), 0)

    def import_provinces(self, directory):
        self.stdout.write('Importing provinces...')
        path = self.find_file(directory, 'province.csv')
        if path is None:
            return
        countries = dict(Country.objects.values_list('code', 'id'))
        skipped = 0

        def rows():
            nonlocal skipped
            for row in read_csv_rows(path):
                if not (row.get('kode') and row.get('nama')):
                    continue
                country_id = countries.get(row.get('country_code'))
                if country_id is None:
                    skipped += 1
                    continue
                yield Province(country_id=country_id, code=row['kode'], name=row['nama'], **self.audit())

        self.report('provinces', self.bulk_insert(Province, rows()), skipped)

    def import_cities(self, directory):
        self.stdout.write('Importing cities...')
        path = self.find_file(directory, 'city.csv')
        if path is None:
            return
        # Province codes are only unique within a country in the source data
        provinces = {
            (country_code, code): pk
            for pk, code, country_code in Province.objects.values_list('id', 'code', 'country__code')
        }
        skipped = 0

        def rows():
            nonlocal skipped
            for row in read_csv_rows(path):
                if not (row.get('kode') and row.get('nama')):
                    continue
                province_id = provinces.get((row.get('country_code'), row.get('province_code')))
                if province_id is None:
                    skipped += 1
                    continue
                yield City(province_id=province_id, code=row['kode'], name=row['nama'], **self.audit())

        self.report('cities', self.bulk_insert(City, rows()), skipped)

    def import_districts(self, directory):
        self.stdout.write('Importing districts...')
        path = self.find_file(directory, 'district.csv')
        if path is None:
            return
        cities = index_by_code(City.objects.values_list('code', 'id'))
        skipped = 0

        def rows():
            nonlocal skipped
            for row in read_csv_rows(path):
                if not (row.get('kode') and row.get('nama')):
                    continue
                city_code = row.get('city_code') or row['kode'][:CITY_CODE_LENGTH]
                city_id = cities.get(city_code)
                if city_id is None:
                    skipped += 1
                    continue
                yield District(city_id=city_id, code=row['kode'], name=row['nama'], **self.audit())

        self.report('districts', self.bulk_insert(District, rows()), skipped)

    def import_villages(self, directory):
        self.stdout.write('Importing villages...')
        path = self.find_file(directory, 'village.csv', 'villages.csv')
        if path is None:
            return
        districts = index_by_code(District.objects.values_list('code', 'id'))
        skipped = 0

        def rows():
            nonlocal skipped
            for row in read_csv_rows(path):
                if not (row.get('kode') and row.get('nama')):
                    continue
                district_code = row.get('district_code') or row['kode'][:DISTRICT_CODE_LENGTH]
                district_id = districts.get(district_code)
                if district_id is None:
                    skipped += 1
                    continue
                yield Village(district_id=district_id, code=row['kode'], name=row['nama'], **self.audit())

        self.report('villages', self.bulk_insert(Village, rows()), skipped)
