from django.contrib import admin

from services.core.utils.text_utils import limit_chars

from .models import Chirp


@admin.register(Chirp)
class ChirpAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "short_message", "created_at", "updated_at")
    list_filter = ("created_at",)
    search_fields = ("message", "user__email", "user__first_name", "user__last_name")
    list_select_related = ("user",)
    readonly_fields = ("created_at", "updated_at")
    raw_id_fields = ("user",)

    @admin.display(description="Message")
    def short_message(self, obj):
        return limit_chars(obj.message, 50)
