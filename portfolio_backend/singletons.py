"""
Single-row settings tables.

Every singleton lives at a fixed primary key, so concurrent first writes
collapse onto the same row instead of creating duplicates. Reads never 404:
when nothing has been stored yet, an unsaved instance carrying the model
defaults is returned.
"""
import logging

from django.db import models, transaction

logger = logging.getLogger(__name__)


class SingletonModel(models.Model):
    SINGLETON_PK = 1

    id = models.PositiveSmallIntegerField(primary_key=True, default=1, editable=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Stored row, or an unsaved instance holding the defaults."""
        return cls.objects.filter(pk=cls.SINGLETON_PK).first() or cls(pk=cls.SINGLETON_PK)

    @classmethod
    def upsert(cls, values):
        """Merge `values` into the row, creating it from defaults first if needed."""
        with transaction.atomic():
            instance, created = cls.objects.update_or_create(pk=cls.SINGLETON_PK, defaults=values)
        if created:
            logger.info(f"Created {cls.__name__} row")
        return instance
