from django.contrib import admin
from .models import UserBadge


@admin.register(UserBadge)
class UserBadgeAdmin(admin.ModelAdmin):
    list_display = ('badge_name', 'badge_type', 'user', 'earned_at')
    list_filter = ('badge_type',)
    search_fields = ('badge_name', 'user__email')
