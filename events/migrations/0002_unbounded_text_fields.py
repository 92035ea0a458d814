from django.db import migrations, models


def _unbounded(model_name, *field_names):
    return [
        migrations.AlterField(
            model_name=model_name,
            name=name,
            field=models.TextField(),
        )
        for name in field_names
    ]


class Migration(migrations.Migration):

    dependencies = [
        ("events", "0001_initial"),
    ]

    operations = [
        *_unbounded(
            "event",
            "title",
            "event_type",
            "thumbnail",
            "location",
            "creator_email",
        ),
        *_unbounded(
            "participation",
            "user_email",
            "event_title",
            "event_type",
            "thumbnail",
            "location",
            "creator_email",
        ),
    ]
