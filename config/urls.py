from django.conf import settings
from django.contrib import admin
from django.urls import path
from drf_spectacular.views import SpectacularAPIView
from drf_spectacular.views import SpectacularSwaggerView

from contact_relay.contacts.api.views import ContactMessageView
from contact_relay.core.views import ProjectsView
from contact_relay.core.views import home

from .health import health as health_view

urlpatterns = [
    path("", home, name="home"),
    path("health/", health_view, name="health"),
    # Django Admin, use {% url 'admin:index' %}
    path(settings.ADMIN_URL, admin.site.urls),
]

# API URLS (paths kept without trailing slash to match the frontend)
urlpatterns += [
    path("api/contact", ContactMessageView.as_view(), name="contact"),
    path("api/projects", ProjectsView.as_view(), name="projects"),
    path("api/schema/", SpectacularAPIView.as_view(), name="api-schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="api-schema"),
        name="api-docs",
    ),
]
