from django.contrib import admin
from django.urls import path, include
from core.views import HealthCheckView
from users.views import CurrentUserView

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/auth/user/', CurrentUserView.as_view(), name='auth-user'),
    path('api/user/', include('users.urls')),
    path('api/projects/', include('projects.urls')),
    path('api/notifications/', include('notifications.urls')),
    path("api/health/", HealthCheckView.as_view(), name="health-check"),
]
