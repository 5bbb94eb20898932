"""
Translation of AIOSEO smart tags (``#post_title``) into replacement
variables (``%%title%%``).
"""
import re

AIOSEO_TAG_PATTERN = re.compile(r"#[A-Za-z0-9_]+")

AIOSEO_REPLACE_VARS = {
    '#archive_title': 'archive_title',
    '#attachment_caption': 'caption',
    '#author_bio': 'user_description',
    '#author_first_name': 'author_first_name',
    '#author_last_name': 'author_last_name',
    '#author_name': 'name',
    '#blog_title': 'sitename',
    '#categories': 'category',
    '#current_date': 'currentdate',
    '#current_day': 'currentday',
    '#current_month': 'currentmonth',
    '#current_year': 'currentyear',
    '#parent_title': 'parent_title',
    '#page_number': 'pagenumber',
    '#permalink': 'permalink',
    '#post_content': 'post_content',
    '#post_date': 'date',
    '#post_day': 'post_day',
    '#post_month': 'post_month',
    '#post_title': 'title',
    '#post_year': 'post_year',
    '#post_excerpt_only': 'excerpt_only',
    '#post_excerpt': 'excerpt',
    '#search_term': 'searchphrase',
    '#separator_sa': 'sep',
    '#site_title': 'sitename',
    '#tagline': 'sitedesc',
    '#taxonomy_title': 'category_title',
    '#taxonomy_description': 'category_description',
}


class AioseoReplacevarHandler:
    """Replaces AIOSEO tags in titles and descriptions."""

    def __init__(self, replace_vars=None):
        self.replace_vars = dict(AIOSEO_REPLACE_VARS if replace_vars is None else replace_vars)

    def compose_map(self, aioseo_var, yoast_var):
        """Add or override a single tag translation for this handler."""
        self.replace_vars[aioseo_var] = yoast_var

    def transform(self, text):
        if not isinstance(text, str):
            return text
        return AIOSEO_TAG_PATTERN.sub(self._replace_tag, text)

    def _replace_tag(self, match):
        # Whole tags only: '#post_title_plural' is not '#post_title'.
        yoast_var = self.replace_vars.get(match.group(0))
        if yoast_var is None:
            return match.group(0)
        return f'%%{yoast_var}%%'
