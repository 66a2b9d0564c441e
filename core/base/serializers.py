"""
Serializer fields shared by the reference-data read serializers.
"""
from rest_framework import serializers


def user_summary(user):
    """``{id, name}`` for an audit user, or None."""
    if user is None:
        return None
    return {
        'id': user.pk,
        'name': user.get_full_name() or user.get_username(),
    }


class UserSummaryField(serializers.ReadOnlyField):
    """Renders an audit user FK (created_by / updated_by) as ``{id, name}``."""

    def to_representation(self, value):
        return user_summary(value)


class RelatedCountField(serializers.ReadOnlyField):
    """
    Number of related rows (e.g. ``districts_count``).

    Uses the ``<relation>_count`` annotation when the queryset provides it,
    otherwise counts the relation.
    """

    def __init__(self, relation, **kwargs):
        self.relation = relation
        kwargs['source'] = '*'
        super().__init__(**kwargs)

    def to_representation(self, instance):
        annotated = f'{self.relation}_count'
        if hasattr(instance, annotated):
            return getattr(instance, annotated)
        return getattr(instance, self.relation).count()
