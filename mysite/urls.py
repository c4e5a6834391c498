# mysite/urls.py

from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path('', RedirectView.as_view(url='/blocks/'), name='landing'),

    # Block builder overview, previews and the block type API
    path('blocks/', include('blockbuilder.urls')),
]
