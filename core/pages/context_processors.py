from django.conf import settings


def page_settings(request):
    """Expose list-page tuning values to every template."""
    return {
        'filter_debounce_ms': settings.REFDATA_FILTER_DEBOUNCE_MS,
        'per_page_options': settings.REFDATA_PER_PAGE_OPTIONS,
    }
