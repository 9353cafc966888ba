from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAuthenticatedUser, IsPlatformAdmin

from ..serializers import CategoryNameSerializer, CategorySerializer
from ..services import CategoryService


class CategoryListView(APIView):
    permission_classes = [IsAuthenticatedUser]

    def get(self, request):
        categories = CategoryService().list_categories()
        return Response(CategorySerializer(categories, many=True).data)


class AdminCategoryCreateView(APIView):
    permission_classes = [IsPlatformAdmin]

    def post(self, request):
        serializer = CategoryNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category = CategoryService().register_category(serializer.validated_data["name"])
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)


class AdminCategoryDetailView(APIView):
    permission_classes = [IsPlatformAdmin]

    def put(self, request, category_id):
        serializer = CategoryNameSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category = CategoryService().rename_category(
            category_id, serializer.validated_data["name"]
        )
        return Response(CategorySerializer(category).data)

    def delete(self, request, category_id):
        category = CategoryService().delete_category(category_id)
        return Response(CategorySerializer(category).data)
