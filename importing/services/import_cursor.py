"""
Per-site cursors that let importers run in chunks.
"""
from importing.models import ImportCursor


class ImportCursorHelper:

    def __init__(self, site):
        self.site = site

    def _get(self, cursor_id):
        return ImportCursor.objects.filter(site=self.site, cursor_id=cursor_id).first()

    def get_cursor(self, cursor_id, default=''):
        cursor = self._get(cursor_id)
        if cursor is None or not cursor.last_imported:
            return default
        return cursor.last_imported

    def set_cursor(self, cursor_id, last_imported):
        ImportCursor.objects.update_or_create(
            site=self.site,
            cursor_id=cursor_id,
            defaults={'last_imported': last_imported},
        )

    def get_completed(self, cursor_id):
        cursor = self._get(cursor_id)
        return bool(cursor and cursor.completed)

    def set_completed(self, cursor_id, completed):
        ImportCursor.objects.update_or_create(
            site=self.site,
            cursor_id=cursor_id,
            defaults={'completed': completed},
        )

    def reset(self, cursor_id):
        ImportCursor.objects.filter(site=self.site, cursor_id=cursor_id).delete()
