"""Gift wrap URL patterns."""

from django.urls import path

from . import views

app_name = "giftwrap"

urlpatterns = [
    # Storefront API
    path("status", views.StatusView.as_view(), name="status"),
    path("toggle", views.ToggleView.as_view(), name="toggle"),
    path("settings", views.FrontendSettingsView.as_view(), name="settings"),

    # Staff settings page
    path("admin/settings/", views.SettingsView.as_view(), name="settings-edit"),
]
