from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ActivityLogAccess',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
            ],
            options={
                'verbose_name': 'Activity log access',
                'permissions': [('audit_log:read', 'Can view activity logs')],
                'managed': False,
                'default_permissions': (),
            },
        ),
    ]
