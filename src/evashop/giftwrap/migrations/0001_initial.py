from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Option",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=191, unique=True)),
                ("value", models.TextField(blank=True, default="")),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "option",
                "verbose_name_plural": "options",
                "ordering": ["key"],
            },
        ),
        migrations.CreateModel(
            name="OrderMeta",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("order_type", models.CharField(max_length=100)),
                ("order_id", models.CharField(max_length=64)),
                ("key", models.CharField(max_length=191)),
                ("value", models.TextField(blank=True, default="")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "order metadata",
                "verbose_name_plural": "order metadata",
                "indexes": [
                    models.Index(fields=["order_type", "order_id"], name="giftwrap_ordermeta_order_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("order_type", "order_id", "key"),
                        name="giftwrap_ordermeta_unique_key",
                    ),
                ],
            },
        ),
    ]
