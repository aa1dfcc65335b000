import django.core.validators
import django.db.models.deletion
from django.db import migrations, models

import core.validators


DMS_COORDINATE_REGEX = (
    r'^\d{1,3}°\d{1,2}\'\d{1,2}(?:\.\d+)?" [NS] '
    r'\d{1,3}°\d{1,2}\'\d{1,2}(?:\.\d+)?" [EW]$'
)


def code_validator(width):
    return django.core.validators.RegexValidator(
        code='invalid_code',
        message=f'Code must be exactly {width} digits.',
        regex=rf'^\d{{{width}}}$',
    )


def timestamps():
    return [
        ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
        ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
    ]


def name_field():
    return models.CharField(
        db_index=True, max_length=255,
        validators=[core.validators.validate_name], verbose_name='name',
    )


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Province',
            fields=timestamps() + [
                ('code', models.CharField(max_length=2, primary_key=True, serialize=False, validators=[code_validator(2)], verbose_name='code')),
                ('name', name_field()),
            ],
            options={
                'verbose_name': 'province',
                'verbose_name_plural': 'provinces',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Regency',
            fields=timestamps() + [
                ('code', models.CharField(max_length=4, primary_key=True, serialize=False, validators=[code_validator(4)], verbose_name='code')),
                ('name', name_field()),
                ('province', models.ForeignKey(db_column='province_code', on_delete=django.db.models.deletion.CASCADE, related_name='regencies', to='geography.province', verbose_name='province')),
            ],
            options={
                'verbose_name': 'regency',
                'verbose_name_plural': 'regencies',
                'ordering': ['code'],
                'indexes': [models.Index(fields=['province', 'code'], name='regency_province_code_idx')],
            },
        ),
        migrations.CreateModel(
            name='District',
            fields=timestamps() + [
                ('code', models.CharField(max_length=6, primary_key=True, serialize=False, validators=[code_validator(6)], verbose_name='code')),
                ('name', name_field()),
                ('regency', models.ForeignKey(db_column='regency_code', on_delete=django.db.models.deletion.CASCADE, related_name='districts', to='geography.regency', verbose_name='regency')),
            ],
            options={
                'verbose_name': 'district',
                'verbose_name_plural': 'districts',
                'ordering': ['code'],
                'indexes': [models.Index(fields=['regency', 'code'], name='district_regency_code_idx')],
            },
        ),
        migrations.CreateModel(
            name='Village',
            fields=timestamps() + [
                ('code', models.CharField(max_length=10, primary_key=True, serialize=False, validators=[code_validator(10)], verbose_name='code')),
                ('name', name_field()),
                ('district', models.ForeignKey(db_column='district_code', on_delete=django.db.models.deletion.CASCADE, related_name='villages', to='geography.district', verbose_name='district')),
            ],
            options={
                'verbose_name': 'village',
                'verbose_name_plural': 'villages',
                'ordering': ['code'],
                'indexes': [models.Index(fields=['district', 'code'], name='village_district_code_idx')],
            },
        ),
        migrations.CreateModel(
            name='Island',
            fields=timestamps() + [
                ('code', models.CharField(max_length=20, primary_key=True, serialize=False, validators=[django.core.validators.RegexValidator('^\\d+$', 'Code must contain only digits.', 'invalid_code')], verbose_name='code')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='name')),
                ('coordinate', models.CharField(max_length=50, validators=[django.core.validators.RegexValidator(DMS_COORDINATE_REGEX, 'Invalid DMS coordinate.', 'invalid_coordinate')], verbose_name='coordinate')),
                ('is_populated', models.BooleanField(default=False, verbose_name='populated')),
                ('is_outermost_small', models.BooleanField(default=False, verbose_name='outermost small island')),
                ('regency', models.ForeignKey(blank=True, db_column='regency_code', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='islands', to='geography.regency', verbose_name='regency')),
            ],
            options={
                'verbose_name': 'island',
                'verbose_name_plural': 'islands',
                'ordering': ['code'],
                'indexes': [models.Index(fields=['regency', 'code'], name='island_regency_code_idx')],
            },
        ),
    ]
