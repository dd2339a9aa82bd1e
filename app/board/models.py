from board.domain.catalog import BoardType
from django.db import models
from django.utils import timezone

BOARD_TYPE_CHOICES = [(board_type.value, board_type.label) for board_type in BoardType]


class Uploader(models.Model):
    """공고 작성자(업체) 정보"""

    company_name = models.CharField(max_length=255, blank=True, default="")
    name = models.CharField(max_length=255, blank=True, default="")
    number = models.CharField(
        max_length=32, blank=True, default="", help_text="연락처 (예: 821012345678)"
    )

    class Meta:
        db_table = "users"

    def __str__(self):
        return f"{self.company_name or '-'} / {self.name or '-'}"


class JobPosting(models.Model):
    title = models.CharField(max_length=255)
    contents = models.TextField(blank=True, default="")
    updated_time = models.DateTimeField(default=timezone.now, db_index=True)
    region1 = models.CharField(
        max_length=50, blank=True, default="", db_column="1depth_region"
    )
    region2 = models.CharField(
        max_length=50, blank=True, default="", db_column="2depth_region"
    )
    category1 = models.CharField(
        max_length=50, blank=True, default="", db_column="1depth_category"
    )
    category2 = models.CharField(
        max_length=50, blank=True, default="", db_column="2depth_category"
    )
    board_type = models.CharField(
        max_length=1,
        choices=BOARD_TYPE_CHOICES,
        default=BoardType.JOB_OFFER.value,
        db_index=True,
    )
    ad = models.BooleanField(default=False, help_text="1페이지 상단 노출 광고 여부")
    uploader = models.ForeignKey(
        Uploader,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="postings",
    )

    class Meta:
        db_table = "jd"
        indexes = [
            models.Index(
                fields=["board_type", "ad", "-updated_time"],
                name="jd_board_ad_updated_idx",
            ),
        ]

    def __str__(self):
        return f"[{self.get_board_type_display()}] {self.title}"
