from django.db import models


class ActivityLogAccess(models.Model):
    """
    Permission holder for the external activity log.

    Activity-log storage lives outside this project; the model only anchors
    the ``audit_log:read`` permission so it can be granted like any other.
    """

    class Meta:
        managed = False
        default_permissions = ()
        permissions = [
            ('audit_log:read', 'Can view activity logs'),
        ]
        verbose_name = 'Activity log access'
