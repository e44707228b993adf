from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from .models import User

@admin.register(User)
class CustomUserAdmin(UserAdmin):
    list_display = ('id', 'username', 'email', 'first_name', 'last_name', 'location', 'is_staff')
    list_filter = ('is_staff', 'is_superuser', 'is_active')
    search_fields = ('id', 'username', 'email', 'first_name', 'last_name')
    fieldsets = UserAdmin.fieldsets + (
        ('Volunteer Profile', {'fields': ('bio', 'location', 'profile_image_url')}),
    )
    add_fieldsets = UserAdmin.add_fieldsets + (
        ('Volunteer Profile', {'fields': ('email', 'first_name', 'last_name')}),
    )
