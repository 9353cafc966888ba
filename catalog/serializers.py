from rest_framework import serializers

from .models import Category, Chapter, Course, VideoAsset


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]


class VideoAssetSerializer(serializers.ModelSerializer):
    class Meta:
        model = VideoAsset
        fields = ["asset_id", "playback_id", "created_at"]


class ChapterSerializer(serializers.ModelSerializer):
    """Full chapter representation for administrators."""

    course_id = serializers.CharField(read_only=True)
    video_asset = serializers.SerializerMethodField()

    class Meta:
        model = Chapter
        fields = [
            "id",
            "course_id",
            "title",
            "description",
            "video_url",
            "position",
            "free_flag",
            "publish_flag",
            "video_asset",
            "created_at",
            "updated_at",
        ]

    def get_video_asset(self, obj):
        asset = VideoAsset.objects.filter(chapter_id=obj.pk).first()
        return VideoAssetSerializer(asset).data if asset else None


class PublicChapterSerializer(serializers.ModelSerializer):
    class Meta:
        model = Chapter
        fields = ["id", "title", "description", "position", "free_flag"]


class CourseSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)

    class Meta:
        model = Course
        fields = [
            "id",
            "title",
            "description",
            "image_url",
            "price",
            "user_id",
            "category",
            "publish_flag",
            "delete_flag",
            "created_at",
            "updated_at",
        ]


class CourseDetailSerializer(CourseSerializer):
    chapters = serializers.SerializerMethodField()

    class Meta(CourseSerializer.Meta):
        fields = CourseSerializer.Meta.fields + ["chapters"]

    def get_chapters(self, obj):
        if obj.pk is None:
            return []
        return ChapterSerializer(obj.chapters.order_by("position"), many=True).data


class PublicCourseSerializer(serializers.ModelSerializer):
    category = CategorySerializer(read_only=True)

    class Meta:
        model = Course
        fields = ["id", "title", "description", "image_url", "price", "category"]


class PublicCourseDetailSerializer(PublicCourseSerializer):
    chapters = serializers.SerializerMethodField()

    class Meta(PublicCourseSerializer.Meta):
        fields = PublicCourseSerializer.Meta.fields + ["chapters"]

    def get_chapters(self, obj):
        chapters = obj.chapters.published().order_by("position")
        return PublicChapterSerializer(chapters, many=True).data


# --- Request bodies ---


class TitleSerializer(serializers.Serializer):
    title = serializers.CharField(max_length=100)


class DescriptionSerializer(serializers.Serializer):
    description = serializers.CharField(max_length=1000, allow_blank=True)


class ThumbnailSerializer(serializers.Serializer):
    image_url = serializers.CharField(max_length=500)


class CourseCategorySerializer(serializers.Serializer):
    category_id = serializers.CharField(max_length=64)


class PriceSerializer(serializers.Serializer):
    price = serializers.IntegerField(min_value=0)


class ChapterAccessSerializer(serializers.Serializer):
    free_flag = serializers.BooleanField()


class ChapterVideoSerializer(serializers.Serializer):
    video_url = serializers.URLField(max_length=500)


class ChapterPositionSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64)
    position = serializers.IntegerField(min_value=0)


class ChapterReorderSerializer(serializers.Serializer):
    list = ChapterPositionSerializer(many=True)


class CategoryNameSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=100)
