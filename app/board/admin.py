from board.models import JobPosting, Uploader
from django.contrib import admin


@admin.register(JobPosting)
class JobPostingAdmin(admin.ModelAdmin):
    list_display = ["id", "board_type", "title", "region1", "category1", "ad", "updated_time"]
    search_fields = ["title"]
    list_filter = ["board_type", "ad", "region1", "category1"]
    ordering = ["-updated_time", "-id"]
    list_per_page = 50
    raw_id_fields = ["uploader"]


@admin.register(Uploader)
class UploaderAdmin(admin.ModelAdmin):
    list_display = ["id", "company_name", "name", "number"]
    search_fields = ["company_name", "name"]
