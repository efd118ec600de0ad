from django.contrib import admin

from rentals.models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    list_display = ["artwork", "user", "status", "start_date", "end_date", "created_at"]
    list_filter = ["status", "start_date"]
    search_fields = ["artwork__title", "user__email", "address"]
    raw_id_fields = ["artwork", "user", "approved_by", "finalized_by"]
    readonly_fields = ["uuid", "approved_at", "finalized_at", "created_at", "updated_at"]
