# Generated migration for ImportCursor model

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('sites', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ImportCursor',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('cursor_id', models.CharField(help_text='<plugin>_<type>, e.g. aioseo_general_settings', max_length=100)),
                ('last_imported', models.TextField(blank=True, default='')),
                ('completed', models.BooleanField(default=False)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('site', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='import_cursors', to='sites.site')),
            ],
            options={
                'db_table': 'import_cursors',
                'ordering': ['cursor_id'],
                'unique_together': {('site', 'cursor_id')},
            },
        ),
    ]
