from __future__ import annotations

import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Uploader",
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
                    "company_name",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                ("name", models.CharField(blank=True, default="", max_length=255)),
                (
                    "number",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="연락처 (예: 821012345678)",
                        max_length=32,
                    ),
                ),
            ],
            options={
                "db_table": "users",
            },
        ),
        migrations.CreateModel(
            name="JobPosting",
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
                ("title", models.CharField(max_length=255)),
                ("contents", models.TextField(blank=True, default="")),
                (
                    "updated_time",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now
                    ),
                ),
                (
                    "region1",
                    models.CharField(
                        blank=True,
                        db_column="1depth_region",
                        default="",
                        max_length=50,
                    ),
                ),
                (
                    "region2",
                    models.CharField(
                        blank=True,
                        db_column="2depth_region",
                        default="",
                        max_length=50,
                    ),
                ),
                (
                    "category1",
                    models.CharField(
                        blank=True,
                        db_column="1depth_category",
                        default="",
                        max_length=50,
                    ),
                ),
                (
                    "category2",
                    models.CharField(
                        blank=True,
                        db_column="2depth_category",
                        default="",
                        max_length=50,
                    ),
                ),
                (
                    "board_type",
                    models.CharField(
                        choices=[
                            ("0", "구인정보"),
                            ("1", "구직정보"),
                            ("2", "중고장터"),
                            ("3", "부동산"),
                        ],
                        db_index=True,
                        default="0",
                        max_length=1,
                    ),
                ),
                (
                    "ad",
                    models.BooleanField(
                        default=False, help_text="1페이지 상단 노출 광고 여부"
                    ),
                ),
                (
                    "uploader",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="postings",
                        to="board.uploader",
                    ),
                ),
            ],
            options={
                "db_table": "jd",
                "indexes": [
                    models.Index(
                        fields=["board_type", "ad", "-updated_time"],
                        name="jd_board_ad_updated_idx",
                    )
                ],
            },
        ),
    ]
