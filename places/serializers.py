from rest_framework import serializers


# 쿼리 파라미터 검증용
class TextSearchQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    lat = serializers.FloatField(required=False, min_value=-90, max_value=90)
    lng = serializers.FloatField(required=False, min_value=-180, max_value=180)
    radius_m = serializers.FloatField(required=False, min_value=1, max_value=50000)
    locale = serializers.CharField(required=False, max_length=16)


class PlaceCardQuerySerializer(serializers.Serializer):
    locale = serializers.CharField(required=False, max_length=16)


# 응답 스키마 (Swagger 표시용)
class TextPlaceRowSerializer(serializers.Serializer):
    place_id = serializers.CharField()
    name = serializers.CharField()
    address = serializers.CharField(allow_null=True)
    rating = serializers.CharField(allow_null=True)
    user_rating_count = serializers.IntegerField(allow_null=True)
    price = serializers.CharField(allow_null=True)  # 가격대 미지정(UNSPECIFIED)이면 검색 행에서는 숨김 -> null


class OpeningStatusSerializer(serializers.Serializer):
    is_open = serializers.BooleanField(allow_null=True)
    status_text = serializers.CharField(allow_null=True)
    today_hours = serializers.CharField(allow_null=True)
    closes_at = serializers.CharField(allow_null=True)
    display_text = serializers.CharField(allow_null=True)


class PlaceCardSerializer(serializers.Serializer):
    place_id = serializers.CharField()
    name = serializers.CharField()
    rating = serializers.CharField(allow_null=True)
    rating_stars = serializers.ListField(child=serializers.CharField())
    user_rating_count = serializers.IntegerField()
    type = serializers.CharField(allow_null=True)
    price = serializers.CharField(allow_blank=True)  # 카드는 항상 표시, 미지정/무료면 빈 문자열
    address = serializers.CharField(allow_null=True)
    opening = OpeningStatusSerializer()


class SamplePlaceSerializer(serializers.Serializer):
    place_id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
