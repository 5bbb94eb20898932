"""
Import progress bookkeeping.
"""
from django.db import models

from sites.models import Site


class ImportCursor(models.Model):
    """
    Progress of one importer on one site.

    ``last_imported`` is the last flattened settings path processed, so the
    next chunk resumes after it. ``completed`` flips once a run finds
    nothing left to import.
    """
    site = models.ForeignKey(
        Site,
        on_delete=models.CASCADE,
        related_name='import_cursors'
    )
    cursor_id = models.CharField(max_length=100, help_text="<plugin>_<type>, e.g. aioseo_general_settings")
    last_imported = models.TextField(blank=True, default='')
    completed = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'import_cursors'
        ordering = ['cursor_id']
        unique_together = [['site', 'cursor_id']]

    def __str__(self):
        return f"{self.cursor_id} @ {self.last_imported or '-'} (site {self.site_id})"
