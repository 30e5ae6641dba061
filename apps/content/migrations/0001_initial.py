import apps.content.models
import django.core.validators
import django.db.models.deletion
import uuid
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Tag',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Tag Name')),
                ('slug', models.SlugField(blank=True, max_length=120, unique=True, verbose_name='Slug')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
            ],
            options={
                'verbose_name': 'Tag',
                'verbose_name_plural': 'Tags',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Content',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Last Updated At')),
                ('title', models.CharField(max_length=200, verbose_name='Title')),
                ('type', models.CharField(choices=[('linkedin', 'LinkedIn'), ('twitter', 'Twitter'), ('instagram', 'Instagram'), ('youtube', 'YouTube'), ('pinterest', 'Pinterest'), ('documents', 'Documents'), ('other', 'Other')], db_index=True, max_length=20, verbose_name='Content Type')),
                ('link', models.CharField(blank=True, default='', max_length=2048, verbose_name='Link')),
                ('description', models.TextField(blank=True, default='', max_length=1000, verbose_name='Description')),
                ('file', models.FileField(blank=True, max_length=500, upload_to=apps.content.models.document_upload_path, verbose_name='File')),
                ('file_name', models.CharField(blank=True, default='', max_length=255, verbose_name='Original File Name')),
                ('file_size', models.PositiveIntegerField(blank=True, null=True, validators=[django.core.validators.MaxValueValidator(10485760)], verbose_name='File Size (bytes)')),
                ('owner', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='contents', to=settings.AUTH_USER_MODEL)),
                ('tags', models.ManyToManyField(blank=True, related_name='contents', to='content.tag')),
            ],
            options={
                'verbose_name': 'Content',
                'verbose_name_plural': 'Contents',
                'ordering': ['-created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['owner', '-created_at'], name='content_owner_created_idx')],
            },
        ),
    ]
