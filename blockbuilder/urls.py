# blockbuilder/urls.py

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
router.register(r'block-types', views.BlockTypeViewSet, basename='block-types')

app_name = 'blockbuilder'

urlpatterns = [
    path('', views.builder_home, name='builder_home'),
    path('preview/<path:name>/', views.block_preview, name='block_preview'),
    path('api/', include(router.urls)),
]
