"""
URL configuration for the Panda callbacks.

Include in the project URLconf:

    path('panda/', include('panda_cloud.urls')),
"""

from django.urls import path

from panda_cloud.views import authorize_upload_view, notify_view

app_name = 'panda'

urlpatterns = [
    path('notify/', notify_view, name='notify'),
    path('authorize_upload/', authorize_upload_view, name='authorize_upload'),
]
