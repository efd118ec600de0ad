from django.contrib import admin

from artworks.models import Artwork, ArtworkImage, Medium


class ArtworkImageInline(admin.TabularInline):
    model = ArtworkImage
    extra = 0


@admin.register(Artwork)
class ArtworkAdmin(admin.ModelAdmin):
    list_display = ["title", "status", "created_by", "created_at"]
    list_filter = ["status", "mediums"]
    search_fields = ["title", "artists__first_name", "artists__last_name"]
    filter_horizontal = ["artists", "mediums"]
    inlines = [ArtworkImageInline]


@admin.register(Medium)
class MediumAdmin(admin.ModelAdmin):
    list_display = ["name", "created_at"]
    search_fields = ["name"]
