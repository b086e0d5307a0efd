from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Agent",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "lifecycle",
                    models.CharField(
                        choices=[("active", "Active"), ("deleted", "Deleted")],
                        db_index=True,
                        default="active",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("given_name", models.CharField(max_length=255)),
                (
                    "family_name",
                    models.CharField(blank=True, max_length=255, null=True),
                ),
                ("company", models.CharField(blank=True, max_length=255, null=True)),
                ("reference_number", models.CharField(max_length=36, unique=True)),
            ],
            options={
                "db_table": "agents",
                "ordering": ["id"],
            },
        ),
    ]
