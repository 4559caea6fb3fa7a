# careerdocs/ats/keyword_extractor.py
import re
import logging
from typing import Callable, Iterable, List, Optional, Set, Tuple
import nltk
from nltk.tokenize import word_tokenize

from careerdocs.config import ATSConfig

logger = logging.getLogger(__name__)

# Download required NLTK data (run once)
def _ensure_nltk_data():
    """Ensure tokenizer and POS tagger data is downloaded"""
    required_data = [
        ('tokenizers/punkt', 'punkt'),
        ('tokenizers/punkt_tab', 'punkt_tab'),
        ('taggers/averaged_perceptron_tagger', 'averaged_perceptron_tagger'),
        ('taggers/averaged_perceptron_tagger_eng', 'averaged_perceptron_tagger_eng'),
    ]

    for path, package in required_data:
        try:
            nltk.data.find(path)
        except LookupError:
            logger.info(f"Downloading NLTK data: {package}")
            nltk.download(package, quiet=True)

# Call on module import
_ensure_nltk_data()

Tagger = Callable[[List[str]], List[Tuple[str, str]]]


class KeywordExtractor:
    """
    Extract the set of content words (nouns, verbs, adjectives) from text
    """

    KEYWORD_PATTERN = re.compile(r'^[a-z\s]+$')

    def __init__(self, config: Optional[ATSConfig] = None, tagger: Optional[Tagger] = None):
        """
        Args:
            config: Scoring configuration (stop words)
            tagger: Callable mapping tokens to (token, Penn tag) pairs;
                    defaults to nltk.pos_tag
        """
        self.config = config or ATSConfig()
        self._tag = tagger or nltk.pos_tag

    def extract(self, text: str) -> Set[str]:
        """
        Extract keywords from text

        Args:
            text: Raw document or job description text

        Returns:
            Set of lowercase keywords; empty for blank text
        """
        if not text or not text.strip():
            return set()

        tagged = self._tag(word_tokenize(text.lower()))

        nouns = self._nouns(tagged)
        verbs = [token for token, tag in tagged if tag.startswith('VB')]
        adjectives = [token for token, tag in tagged if tag.startswith('JJ')]

        keywords = {
            kw for kw in (k.strip() for k in nouns + verbs + adjectives)
            if self._is_keyword(kw)
        }

        logger.debug(f"Extracted {len(keywords)} keywords from {len(tagged)} tokens")
        return keywords

    def _nouns(self, tagged: Iterable[Tuple[str, str]]) -> List[str]:
        """
        Collect nouns: every single noun plus each run of consecutive
        nouns as a compound ("customer service")
        """
        nouns = []
        run = []

        for token, tag in tagged:
            if tag.startswith('NN'):
                nouns.append(token)
                run.append(token)
                continue
            if len(run) > 1:
                nouns.append(' '.join(run))
            run = []

        if len(run) > 1:
            nouns.append(' '.join(run))

        return nouns

    def _is_keyword(self, token: str) -> bool:
        return (
            len(token) > 2 and
            token not in self.config.stop_words and
            bool(self.KEYWORD_PATTERN.match(token))
        )
