import logging

from django.contrib.auth import authenticate
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import AccessToken

from backend.responses import error_response, success_response
from permissions.api_key import HasValidAPIKey
from users.serializers import LoginSerializer, TokenUserSerializer

logger = logging.getLogger(__name__)


def issue_access_token(user) -> str:
    token = AccessToken.for_user(user)
    token["email"] = user.email
    token["roles"] = user.roles
    return str(token)


class LoginView(APIView):
    # API key still applies; the JWT does not exist yet.
    permission_classes = [HasValidAPIKey, AllowAny]
    authentication_classes = []
    serializer_class = LoginSerializer

    @extend_schema(
        request=LoginSerializer,
        responses={200: dict, 401: dict},
        description="Authenticate a staff user with email and password and issue a JWT",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        email = serializer.validated_data["email"]
        user = authenticate(
            request=request,
            email=email,
            password=serializer.validated_data["password"],
        )

        if not user:
            logger.warning("Login rejected", extra={"email": email})
            return error_response(
                message="login failed",
                detail="invalid email or password",
                http_status=status.HTTP_401_UNAUTHORIZED,
            )

        return success_response(
            message="login success",
            data={
                "token": issue_access_token(user),
                "user": TokenUserSerializer(user).data,
            },
        )
