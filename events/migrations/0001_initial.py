import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("event_type", models.CharField(max_length=100)),
                ("thumbnail", models.URLField(max_length=500)),
                ("location", models.CharField(max_length=255)),
                ("event_date", models.DateTimeField()),
                ("creator_email", models.EmailField(max_length=254)),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "db_table": "events",
                "ordering": ["event_date"],
                "indexes": [
                    models.Index(fields=["event_date"], name="idx_event_date"),
                    models.Index(
                        fields=["creator_email", "event_date"],
                        name="idx_event_creator_date",
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Participation",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("event_id", models.UUIDField()),
                ("user_email", models.EmailField(max_length=254)),
                ("joined_at", models.DateTimeField()),
                ("event_title", models.CharField(max_length=255)),
                ("event_type", models.CharField(max_length=100)),
                ("thumbnail", models.URLField(max_length=500)),
                ("location", models.CharField(max_length=255)),
                ("event_date", models.DateTimeField()),
                ("creator_email", models.EmailField(max_length=254)),
            ],
            options={
                "db_table": "joined_events",
                "ordering": ["event_date"],
                "indexes": [
                    models.Index(
                        fields=["user_email", "event_date"],
                        name="idx_joined_user_date",
                    ),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("event_id", "user_email"),
                        name="uq_joined_event_user",
                    ),
                ],
            },
        ),
    ]
