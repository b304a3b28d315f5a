"""URL configuration for dashboard views."""

from __future__ import annotations

from django.urls import path

from dashboard import views

app_name = "dashboard"

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("api/charts/<slug:chart_id>/", views.chart_geometry_api, name="chart_geometry_api"),
]
