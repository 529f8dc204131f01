# apps/notebook_accounts/gateway.py
import logging

from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError
from django.core.validators import validate_email
from django.db import IntegrityError, transaction

from apps.notebook_common.exceptions import AuthorizationError, InputError

log = logging.getLogger(__name__)

User = get_user_model()


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthGateway:
    """
    요청 하나에 묶인 인증 창구.

    뷰/오케스트레이터는 django.contrib.auth 를 직접 부르지 않고 이 객체만 쓴다.
    사용자는 username = email 로 저장한다.
    """

    def __init__(self, request):
        self.request = request

    def get_current_user(self):
        user = getattr(self.request, "user", None)
        if user is None or not user.is_authenticated:
            return None
        return user

    def require_user(self):
        user = self.get_current_user()
        if user is None:
            raise AuthorizationError("Unauthorized.")
        return user

    def sign_in(self, email: str, password: str):
        email = normalize_email(email)
        if not email or not password:
            raise InputError("Email and password are required.")

        user = authenticate(self.request, username=email, password=password)
        if user is None:
            log.info("[auth] sign-in rejected for %s", email)
            raise AuthorizationError("Invalid login credentials")

        login(self.request, user)
        return user

    def sign_up(self, email: str, password: str):
        email = normalize_email(email)
        if not email or not password:
            raise InputError("Email and password are required.")

        try:
            validate_email(email)
        except ValidationError:
            raise InputError("Unable to validate email address: invalid format")

        if User.objects.filter(username__iexact=email).exists():
            raise InputError("User already registered")

        candidate = User(username=email, email=email)
        try:
            validate_password(password, user=candidate)
        except ValidationError as e:
            raise InputError(" ".join(e.messages))

        try:
            with transaction.atomic():
                user = User.objects.create_user(username=email, email=email, password=password)
        except IntegrityError:
            # 동시에 같은 이메일로 가입한 경우
            raise InputError("User already registered")

        log.info("[auth] user registered: id=%s", user.pk)
        login(self.request, user, backend="django.contrib.auth.backends.ModelBackend")
        return user

    def sign_out(self) -> None:
        logout(self.request)
