from rest_framework import serializers


class YoutubeSummaryRequestSerializer(serializers.Serializer):
    # 빈 값 검사는 서비스에서 ("URL is required.")
    url = serializers.CharField(required=False, allow_blank=True, default="")
