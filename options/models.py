"""
Key-value options store, one row per site and option name.
"""
from django.db import models

from sites.models import Site


class Option(models.Model):
    """
    A named option row for a site.

    Competitor plugin rows (e.g. ``aioseo_options``) hold the raw value as
    pushed by WordPress. The plugin's own groups (``wpseo_titles``) hold a
    JSON object of option key -> value.
    """
    site = models.ForeignKey(
        Site,
        on_delete=models.CASCADE,
        related_name='options'
    )
    name = models.CharField(max_length=191, help_text="Option name, as in wp_options.option_name")
    value = models.TextField(blank=True, default='')
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'options'
        ordering = ['name']
        unique_together = [['site', 'name']]

    def __str__(self):
        return f"{self.name} (site {self.site_id})"
