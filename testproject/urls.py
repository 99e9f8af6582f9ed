"""
URL configuration for the test project.

Mounts the Panda notification and upload callbacks under /panda/.
"""

from django.urls import include, path

urlpatterns = [
    path('panda/', include('panda_cloud.urls')),
]
