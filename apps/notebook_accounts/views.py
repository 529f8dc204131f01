# apps/notebook_accounts/views.py
import logging
from urllib.parse import urlencode

from django.contrib.auth import get_user_model
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST
from rest_framework import generics, permissions, status
from rest_framework.response import Response

from apps.notebook_common.exceptions import NotebookError

from .gateway import AuthGateway
from .serializers import RegisterSerializer, UserSerializer

log = logging.getLogger(__name__)

User = get_user_model()


def _login_redirect(**params):
    url = "/login/"
    if params:
        url = f"{url}?{urlencode(params)}"
    return redirect(url)


# 페이지 (폼)

@require_GET
def login_page(request):
    if AuthGateway(request).get_current_user() is not None:
        return redirect("/dashboard/")
    context = {
        "error": request.GET.get("error", ""),
        "message": request.GET.get("message", ""),
    }
    return render(request, "notebook_accounts/login.html", context)


@require_POST
def login_action(request):
    gateway = AuthGateway(request)
    try:
        gateway.sign_in(request.POST.get("email", ""), request.POST.get("password", ""))
    except NotebookError as e:
        return _login_redirect(error=e.message)
    return redirect("/dashboard/")


@require_POST
def signup_action(request):
    gateway = AuthGateway(request)
    try:
        gateway.sign_up(request.POST.get("email", ""), request.POST.get("password", ""))
    except NotebookError as e:
        return _login_redirect(error=e.message)
    return redirect("/dashboard/")


@require_POST
def logout_action(request):
    AuthGateway(request).sign_out()
    return redirect("/login/")


# API

class RegisterView(generics.CreateAPIView):
    queryset = User.objects.all()
    serializer_class = RegisterSerializer
    permission_classes = [permissions.AllowAny]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        if not serializer.is_valid():
            log.info("[RegisterView] rejected: %s", serializer.errors)
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.save()
        headers = self.get_success_headers({})
        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED, headers=headers)


class MeView(generics.RetrieveAPIView):
    serializer_class = UserSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_object(self):
        return self.request.user
