"""
Query-string helpers for list-page links.
"""
from urllib.parse import urlencode

from django.conf import settings


def build_query(params, updates=None, drop=()):
    """
    Copy ``params`` (a QueryDict), apply ``updates`` and return ``?a=b...``.

    Keys whose update value is None or '' are removed, as are keys in ``drop``.
    Returns '' when nothing remains.
    """
    query = params.copy()
    for key in drop:
        query.pop(key, None)
    for key, value in (updates or {}).items():
        if value in (None, ''):
            query.pop(key, None)
        else:
            query[key] = str(value)
    encoded = query.urlencode()
    return f'?{encoded}' if encoded else ''


def activity_log_url(subject_type, subject_id):
    """
    Link to the external activity log filtered to one record, newest first.

    >>> activity_log_url('geography.city', 7)
    '/api/activity-logs?filter%5Bsubject_type%5D=geography.city&filter%5Bsubject_id%5D=7&sort=-created_at'
    """
    params = urlencode({
        'filter[subject_type]': subject_type,
        'filter[subject_id]': subject_id,
        'sort': '-created_at',
    })
    return f'{settings.ACTIVITY_LOG_URL}?{params}'
