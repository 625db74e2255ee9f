"""
Text normalization for bag-of-words clustering.

raw text -> strip markup -> words (letter runs joined by apostrophes)
-> lowercase -> remove English stop words and contractions
-> drop apostrophes -> Porter stem.
"""

import re
from typing import Union

from nltk.stem.porter import PorterStemmer
from sklearn.feature_extraction.text import ENGLISH_STOP_WORDS


# scikit-learn's list has no contractions; matched before apostrophes are dropped
CONTRACTIONS = frozenset({
    "ain't", "aren't", "can't", "couldn't", "didn't", "doesn't", "don't",
    "hadn't", "hasn't", "haven't", "isn't", "mightn't", "mustn't", "needn't",
    "shan't", "shouldn't", "wasn't", "weren't", "won't", "wouldn't",
    "i'd", "i'll", "i'm", "i've", "you'd", "you'll", "you're", "you've",
    "he'd", "he'll", "he's", "she'd", "she'll", "she's", "it'd", "it'll",
    "it's", "we'd", "we'll", "we're", "we've", "they'd", "they'll",
    "they're", "they've", "that's", "there's", "here's", "what's", "where's",
    "when's", "who's", "why's", "how's", "let's",
})

_TAG_RE = re.compile(r"<[^>]*>")
_APOSTROPHE_RE = re.compile(r"['’]")
# Runs of Unicode letters (word chars minus digits and underscore), with
# apostrophes allowed between letters
_WORD_RE = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


class Tokenizer:
    """Turns raw document text into a sequence of normalized terms."""

    def __init__(self, stopwords: frozenset = ENGLISH_STOP_WORDS | CONTRACTIONS):
        self.stopwords = stopwords
        self._stemmer = PorterStemmer()

    def normalize(self, raw: Union[bytes, str]) -> list[str]:
        """
        Normalize raw file contents into stemmed terms.

        Args:
            raw: File bytes (decoded as UTF-8, invalid bytes replaced) or text

        Returns:
            Terms in document order; duplicates are kept
        """
        if isinstance(raw, bytes):
            raw = raw.decode("utf-8", errors="replace")

        text = _TAG_RE.sub(" ", raw)

        terms = []
        for word in _WORD_RE.findall(text):
            word = word.lower().replace("’", "'")
            if word in self.stopwords:
                continue
            word = _APOSTROPHE_RE.sub("", word)
            if word in self.stopwords:
                continue
            terms.append(self._stemmer.stem(word))
        return terms


_default_tokenizer = Tokenizer()


def tokenize(raw: Union[bytes, str]) -> list[str]:
    """Normalize text using the default tokenizer."""
    return _default_tokenizer.normalize(raw)
