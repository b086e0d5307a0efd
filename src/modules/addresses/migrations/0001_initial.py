import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Address",
            fields=[
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("street", models.CharField(max_length=255)),
                ("postal_code", models.CharField(max_length=10)),
                ("city", models.CharField(max_length=255)),
                ("country", models.CharField(default="DE", max_length=2)),
            ],
            options={
                "db_table": "addresses",
                "ordering": ["city", "street"],
            },
        ),
    ]
