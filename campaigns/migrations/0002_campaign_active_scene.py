import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("campaigns", "0001_initial"),
        ("scenes", "0001_initial"),
    ]

    operations = [
        migrations.AddField(
            model_name="campaign",
            name="active_scene",
            field=models.ForeignKey(
                blank=True,
                help_text="Scene currently shown to players",
                null=True,
                on_delete=django.db.models.deletion.SET_NULL,
                related_name="+",
                to="scenes.scene",
            ),
        ),
    ]
