# blockbuilder/views.py
from django.http import Http404, HttpResponse
from django.shortcuts import render
from rest_framework import viewsets
from rest_framework.response import Response

from .registry import block_types
from .serializers import BlockTypeSerializer


def builder_home(request):
    """The block builder overview: every registered block type, by category."""
    registered = sorted(block_types.all(), key=lambda b: (b['category'], b['title']))
    context = {
        'page_title': 'Block Builder',
        'intro_message': f"{len(registered)} block types registered.",
        'block_types': registered,
    }
    return render(request, 'blockbuilder/builder_home.html', context)


def block_preview(request, name):
    """
    Renders one block the way the inserter preview would, using the
    data from its example payload.
    """
    block_type = block_types.get(name)
    if block_type is None:
        raise Http404(f"No block type named {name!r}")

    attributes = (block_type.get('example') or {}).get('attributes') or {}
    html = block_types.render(
        block_type['name'],
        data=attributes.get('data'),
        is_preview=True,
        mode=attributes.get('mode', block_type['mode']),
    )
    return HttpResponse(html)


# -------------------------
# DRF ViewSets
# -------------------------
class BlockTypeViewSet(viewsets.ViewSet):
    """Read-only catalogue of registered block types."""
    lookup_value_regex = '[^/]+(?:/[^/]+)?'

    def list(self, request):
        serializer = BlockTypeSerializer(block_types.all(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        block_type = block_types.get(pk)
        if block_type is None:
            raise Http404(f"No block type named {pk!r}")
        return Response(BlockTypeSerializer(block_type).data)
