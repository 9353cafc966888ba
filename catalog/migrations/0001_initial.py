import catalog.models
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Category",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=catalog.models.generate_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("name", models.CharField(max_length=100, verbose_name="Category Name")),
            ],
            options={
                "verbose_name": "Category",
                "verbose_name_plural": "Categories",
                "db_table": "catalog_category",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="Course",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=catalog.models.generate_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=100, verbose_name="Title")),
                (
                    "description",
                    models.TextField(
                        blank=True, default="", max_length=1000, verbose_name="Description"
                    ),
                ),
                (
                    "image_url",
                    models.CharField(
                        blank=True, default="", max_length=500, verbose_name="Thumbnail URL"
                    ),
                ),
                (
                    "price",
                    models.PositiveIntegerField(
                        blank=True,
                        help_text="Price in the smallest currency unit",
                        null=True,
                        verbose_name="Price",
                    ),
                ),
                ("user_id", models.CharField(max_length=255, verbose_name="Owner")),
                ("publish_flag", models.BooleanField(default=False, verbose_name="Published")),
                ("delete_flag", models.BooleanField(default=False, verbose_name="Deleted")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="courses",
                        to="catalog.category",
                        verbose_name="Category",
                    ),
                ),
            ],
            options={
                "verbose_name": "Course",
                "verbose_name_plural": "Courses",
                "db_table": "catalog_course",
                "ordering": ["-updated_at"],
            },
        ),
        migrations.CreateModel(
            name="Chapter",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=catalog.models.generate_id,
                        editable=False,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("title", models.CharField(max_length=100, verbose_name="Title")),
                (
                    "description",
                    models.TextField(
                        blank=True, default="", max_length=1000, verbose_name="Description"
                    ),
                ),
                (
                    "video_url",
                    models.CharField(
                        blank=True, default="", max_length=500, verbose_name="Video URL"
                    ),
                ),
                ("position", models.PositiveIntegerField(verbose_name="Position")),
                ("free_flag", models.BooleanField(default=False, verbose_name="Free Preview")),
                ("publish_flag", models.BooleanField(default=False, verbose_name="Published")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "course",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="chapters",
                        to="catalog.course",
                        verbose_name="Course",
                    ),
                ),
            ],
            options={
                "verbose_name": "Chapter",
                "verbose_name_plural": "Chapters",
                "db_table": "catalog_chapter",
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="VideoAsset",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("asset_id", models.CharField(max_length=255, verbose_name="Mux Asset ID")),
                (
                    "playback_id",
                    models.CharField(
                        blank=True, default="", max_length=255, verbose_name="Mux Playback ID"
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "chapter",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="video_asset",
                        to="catalog.chapter",
                        verbose_name="Chapter",
                    ),
                ),
            ],
            options={
                "verbose_name": "Video Asset",
                "verbose_name_plural": "Video Assets",
                "db_table": "catalog_video_asset",
            },
        ),
    ]
