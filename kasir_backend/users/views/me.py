from drf_spectacular.utils import extend_schema
from rest_framework.views import APIView

from backend.responses import success_response
from users.serializers import UserSerializer


class MeView(APIView):
    serializer_class = UserSerializer

    @extend_schema(
        responses={200: UserSerializer},
        description="Get current authenticated user profile",
    )
    def get(self, request):
        return success_response(
            message="get profile success",
            data=UserSerializer(request.user).data,
        )
