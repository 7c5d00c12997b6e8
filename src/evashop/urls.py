"""URL configuration for the EVA shop project."""

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    # Django admin
    path("admin/", admin.site.urls),

    # Gift wrap storefront API and settings page
    path("gift-wrap/", include("evashop.giftwrap.urls", namespace="giftwrap")),
]
