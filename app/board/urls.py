from board.views import FilterOptionsView, JobListingView, JobPostingDetailView
from django.urls import path

urlpatterns = [
    path("listings/", JobListingView.as_view(), name="board-listing"),
    path(
        "listings/<int:posting_id>/",
        JobPostingDetailView.as_view(),
        name="board-posting-detail",
    ),
    path("filters/", FilterOptionsView.as_view(), name="board-filter-options"),
]
