"""Signal handlers keeping the slug lookup cache fresh."""

from typing import Any

from django.db.models.signals import post_delete, post_save, pre_save
from django.dispatch import receiver

from apps.web.restaurant.models import Restaurant
from apps.web.restaurant.services import invalidate_restaurant


@receiver(pre_save, sender=Restaurant)
def remember_stored_slug(
    sender: type[Restaurant],
    instance: Restaurant,
    **_kwargs: Any,
) -> None:
    """Note the slug currently in the database so a rename drops it too."""
    instance._stored_slug = (  # type: ignore[attr-defined]
        sender.objects.filter(pk=instance.pk).values_list("slug", flat=True).first()
        if instance.pk
        else None
    )


@receiver(post_save, sender=Restaurant)
@receiver(post_delete, sender=Restaurant)
def drop_cached_lookup(
    sender: type[Restaurant],  # noqa: ARG001
    instance: Restaurant,
    **_kwargs: Any,
) -> None:
    invalidate_restaurant(instance.slug)
    stored_slug = getattr(instance, "_stored_slug", None)
    if stored_slug and stored_slug != instance.slug:
        invalidate_restaurant(stored_slug)
