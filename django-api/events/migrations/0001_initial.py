from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="StorageSlot",
            fields=[
                ("key", models.CharField(max_length=100, primary_key=True, serialize=False)),
                ("payload", models.TextField()),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
