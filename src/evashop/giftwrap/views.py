"""Gift wrap storefront API and settings page.

GET  /gift-wrap/status    {"enabled": bool}
POST /gift-wrap/toggle    {"enabled": bool} -> {"success": true, "gift_wrap": bool}
GET  /gift-wrap/settings  values the checkout script renders with
"""

import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.urls import reverse_lazy
from django.views.generic import FormView
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from .apps import get_service
from .forms import GiftWrapSettingsForm
from .serializers import ToggleSerializer

logger = logging.getLogger(__name__)

UNAVAILABLE = {"error": "Gift wrap is unavailable"}


class GiftWrapAPIView(APIView):
    """Storefront endpoints: anonymous, JSON, answer 503 when disabled."""

    authentication_classes = []
    permission_classes = []

    def initial(self, request, *args, **kwargs):
        super().initial(request, *args, **kwargs)
        self.service = get_service()

    def unavailable(self):
        return Response(UNAVAILABLE, status=status.HTTP_503_SERVICE_UNAVAILABLE)


class StatusView(GiftWrapAPIView):
    """Current preference, for restoring the checkbox on page load."""

    def get(self, request):
        if self.service is None:
            return self.unavailable()
        session = self.service.sessions.load(request._request)
        return Response({"enabled": self.service.engine.current(session)})


class ToggleView(GiftWrapAPIView):
    """Explicit toggle from the checkout UI."""

    def post(self, request):
        if self.service is None:
            return self.unavailable()

        serializer = ToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        session = self.service.sessions.load(request._request)
        cart = self.service.load_cart(request._request, session)
        value = self.service.engine.toggle(session, serializer.validated_data["enabled"], cart=cart)

        return Response({"success": True, "gift_wrap": value})


class FrontendSettingsView(GiftWrapAPIView):
    """Section title, label and formatted fee for the checkout script."""

    def get(self, request):
        if self.service is None:
            return self.unavailable()
        return Response(self.service.frontend_settings())


class SettingsView(LoginRequiredMixin, UserPassesTestMixin, FormView):
    """Staff page editing the gift wrap options."""

    template_name = "giftwrap/settings.html"
    form_class = GiftWrapSettingsForm
    success_url = reverse_lazy("giftwrap:settings-edit")

    def test_func(self):
        return self.request.user.is_staff

    def handle_no_permission(self):
        if self.request.user.is_authenticated:
            raise PermissionDenied("Staff access required.")
        # Redirect unauthenticated users to login
        return redirect_to_login(
            self.request.get_full_path(),
            self.get_login_url(),
            self.redirect_field_name
        )

    def get_initial(self):
        service = get_service()
        if service is None:
            return super().get_initial()
        return GiftWrapSettingsForm.initial_from(service.settings.get())

    def form_valid(self, form):
        service = get_service()
        if service is None:
            messages.error(self.request, UNAVAILABLE["error"])
            return self.form_invalid(form)
        service.settings.set(form.cleaned_data)
        logger.info(f"Gift wrap settings updated by {self.request.user}")
        messages.success(self.request, "Gift wrap settings saved.")
        return super().form_valid(form)
