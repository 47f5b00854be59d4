from django.contrib import admin
from registrations.models import Registration


@admin.register(Registration)
class RegistrationAdmin(admin.ModelAdmin):
    list_display = ("email", "first_name", "last_name", "country", "status", "created_at")
    list_filter = ("status", "created_at", "country")
    search_fields = ("email", "first_name", "last_name", "phone")
    readonly_fields = ("id_file_url", "created_at", "updated_at")
    fieldsets = (
        ("Applicant", {"fields": ("first_name", "last_name", "email", "gender", "phone")}),
        ("Location", {"fields": ("country", "state", "city", "address")}),
        ("Identity Document", {"fields": ("id_type", "id_file_url")}),
        ("Status", {"fields": ("status", "created_at", "updated_at")}),
    )
