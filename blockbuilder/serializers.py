# blockbuilder/serializers.py
from rest_framework import serializers

from .registry import field_groups


class BlockTypeSerializer(serializers.Serializer):
    """Read-only view of a registered block type (the render callback stays server-side)."""
    name = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    category = serializers.CharField(allow_blank=True)
    icon = serializers.CharField(allow_blank=True)
    keywords = serializers.ListField(child=serializers.CharField())
    post_types = serializers.ListField(child=serializers.CharField())
    mode = serializers.CharField()
    align = serializers.CharField(allow_blank=True)
    align_text = serializers.CharField(allow_blank=True)
    align_content = serializers.CharField(allow_blank=True)
    enqueue_script = serializers.CharField(allow_null=True)
    enqueue_style = serializers.CharField(allow_null=True)
    supports = serializers.DictField()
    example = serializers.DictField()
    field_names = serializers.SerializerMethodField()

    def get_field_names(self, block_type):
        return [
            name
            for group in field_groups.for_block(block_type['name'])
            for name, _field in group['fields']
        ]
