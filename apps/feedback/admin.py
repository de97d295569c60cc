from django.contrib import admin
from .models import Feedback

@admin.register(Feedback)
class FeedbackAdmin(admin.ModelAdmin):
    list_display = ('id', 'user', 'created_at', 'short_text')
    search_fields = ('feedback_text', 'user__username')
    readonly_fields = ('user', 'feedback_text', 'created_at')

    @admin.display(description='Feedback')
    def short_text(self, obj):
        return obj.feedback_text[:80]

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
