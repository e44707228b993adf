from django.contrib import admin
from .models import Project, Rsvp, Message


class RsvpInline(admin.TabularInline):
    model = Rsvp
    extra = 0
    readonly_fields = ('user', 'status', 'created_at')


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('title', 'category', 'organizer', 'date_time', 'max_volunteers', 'is_active', 'created_at')
    list_filter = ('category', 'is_active', 'date_time')
    search_fields = ('title', 'description', 'location', 'organizer__email')
    inlines = [RsvpInline]


@admin.register(Rsvp)
class RsvpAdmin(admin.ModelAdmin):
    list_display = ('project', 'user', 'status', 'created_at')
    list_filter = ('status',)
    search_fields = ('project__title', 'user__email')


@admin.register(Message)
class MessageAdmin(admin.ModelAdmin):
    list_display = ('project', 'sender', 'created_at')
    search_fields = ('content', 'project__title')
    readonly_fields = ('project', 'sender', 'content', 'created_at')
