# Initial schema for applications and document configuration

import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='DocumentConfiguration',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('support_email', models.EmailField(blank=True, help_text='Shown on every generated document', max_length=254)),
                ('signature', models.TextField(blank=True, help_text='Closing signature for generated documents')),
                ('tax_rate', models.FloatField(
                    default=1.0,
                    help_text="Multiplier applied to each fund's net amount",
                    validators=[django.core.validators.MinValueValidator(0.0)],
                )),
            ],
            options={
                'verbose_name': 'Document Configuration',
                'verbose_name_plural': 'Document Configuration',
            },
        ),
        migrations.CreateModel(
            name='LegalEntity',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('registration_number', models.CharField(blank=True, max_length=100)),
            ],
            options={
                'verbose_name': 'Legal Entity',
                'verbose_name_plural': 'Legal Entities',
            },
        ),
        migrations.CreateModel(
            name='Person',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('first_name', models.CharField(blank=True, max_length=150)),
                ('surname', models.CharField(blank=True, max_length=150)),
            ],
            options={
                'verbose_name': 'Person',
                'verbose_name_plural': 'People',
            },
        ),
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reason', models.TextField(blank=True, default='')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
        ),
        migrations.CreateModel(
            name='Application',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('state', models.CharField(
                    choices=[
                        ('Pending', 'Pending'),
                        ('Activated', 'Activated'),
                        ('InReview', 'In Review'),
                        ('Closed', 'Closed'),
                        ('Declined', 'Declined'),
                    ],
                    default='Pending',
                    max_length=20,
                )),
                ('reference_number', models.CharField(max_length=50, unique=True)),
                ('date', models.DateField(help_text='Date the application was submitted')),
                ('is_legal_entity', models.BooleanField(default=False)),
                ('person', models.ForeignKey(
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='applications',
                    to='applications.person',
                )),
                ('legal_entity', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='applications',
                    to='applications.legalentity',
                )),
                ('current_review', models.ForeignKey(
                    blank=True,
                    help_text='Only set while the application is in review',
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='applications',
                    to='applications.review',
                )),
            ],
            options={
                'ordering': ['-date', 'reference_number'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('position', models.PositiveIntegerField(default=0)),
                ('application', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='products',
                    to='applications.application',
                )),
            ],
            options={
                'ordering': ['position', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Fund',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255)),
                ('amount', models.FloatField(default=0.0)),
                ('fees', models.FloatField(default=0.0)),
                ('position', models.PositiveIntegerField(default=0)),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='funds',
                    to='applications.product',
                )),
            ],
            options={
                'ordering': ['position', 'id'],
            },
        ),
    ]
