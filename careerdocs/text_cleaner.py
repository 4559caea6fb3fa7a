# careerdocs/text_cleaner.py
import re
import logging
import ftfy
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class TextCleaner:
    """Clean extracted document and job description text before scoring"""

    HORIZONTAL_SPACES = re.compile(r'[ \t\f\v]+')
    SPACE_AROUND_NEWLINE = re.compile(r' *\n *')
    MULTIPLE_NEWLINES = re.compile(r'\n{3,}')
    URL_PATTERN = re.compile(r'https?://\S+')

    def __init__(self, unicode_norm: str = "NFC"):
        """
        Args:
            unicode_norm: Unicode normalization form (NFC, NFKC, NFD, NFKD)
        """
        self.unicode_norm = unicode_norm

    def clean_text(self, text: str) -> str:
        """
        Repair unicode and normalize whitespace

        Paragraph breaks (blank lines) survive so cover letter
        paragraph checks still see them.
        """
        if not text:
            return ""

        text = ftfy.fix_text(text, normalization=self.unicode_norm)

        text = text.replace('\u200b', '')  # Zero-width space
        text = text.replace('\ufeff', '')  # BOM
        text = text.replace('\r\n', '\n').replace('\r', '\n')

        text = self.HORIZONTAL_SPACES.sub(' ', text)
        text = self.SPACE_AROUND_NEWLINE.sub('\n', text)
        text = self.MULTIPLE_NEWLINES.sub('\n\n', text)

        return text.strip()

    def html_to_text(self, html: str, preserve_links: bool = False) -> str:
        """
        Convert a saved job posting page to plain text

        Args:
            html: HTML content
            preserve_links: Keep URLs in text

        Returns:
            Plain text
        """
        if not html:
            return ""

        soup = BeautifulSoup(html, 'html.parser')

        for script in soup(['script', 'style', 'noscript']):
            script.decompose()

        for hidden in soup.find_all(style=re.compile(r'display:\s*none')):
            hidden.decompose()

        text = soup.get_text(separator='\n', strip=True)

        if not preserve_links:
            text = self.URL_PATTERN.sub('', text)

        return self.clean_text(text)
