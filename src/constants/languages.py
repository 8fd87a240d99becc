"""
Language catalog for the dictionary.

The codes mirror the text maps published by the data source
(TextMapCHT.json, TextMapCHS.json, ...). The lower-case value is what gets
stored in the database and used in URLs; the upper-case form names the
source file.
"""

from enum import Enum
from typing import Dict, Iterator, Optional, Sequence, Tuple

from src.dictionary.exceptions import UnsupportedLanguageException


class Language(str, Enum):
    """Languages supported by the dictionary, in catalog order"""
    CHT = "cht"
    CHS = "chs"
    DE = "de"
    EN = "en"
    ES = "es"
    FR = "fr"
    ID = "id"
    JP = "jp"
    KR = "kr"
    PT = "pt"
    RU = "ru"
    TH = "th"
    VI = "vi"

    @property
    def source_code(self) -> str:
        """Upper-case code used by the data source file names"""
        return self.value.upper()


class LanguageCatalog:
    """
    Closed, ordered set of languages and where to download each one from.

    Built once from settings and handed to whoever needs it; it never changes
    after construction.
    """

    def __init__(self, url_template: str, languages: Optional[Sequence[Language]] = None):
        self._languages: Tuple[Language, ...] = tuple(languages) if languages else tuple(Language)
        self._order: Dict[Language, int] = {lang: i for i, lang in enumerate(self._languages)}
        self._urls: Dict[Language, str] = {
            lang: url_template.format(code=lang.source_code) for lang in self._languages
        }

    @property
    def languages(self) -> Tuple[Language, ...]:
        return self._languages

    def source_url(self, language: Language) -> str:
        try:
            return self._urls[language]
        except KeyError:
            raise UnsupportedLanguageException(f"Ngôn ngữ không được hỗ trợ: {language}")

    def order(self, language: Language) -> int:
        """Position of a language in the catalog, used to sort translations"""
        try:
            return self._order[language]
        except KeyError:
            raise UnsupportedLanguageException(f"Ngôn ngữ không được hỗ trợ: {language}")

    def __iter__(self) -> Iterator[Language]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, language: object) -> bool:
        return language in self._order


def is_supported_language(code: str) -> bool:
    """Check if a string is a supported language code (case-insensitive)"""
    try:
        Language(code.lower())
        return True
    except ValueError:
        return False

def parse_language(code: str) -> Language:
    """Parse a language code such as "en" or "EN" """
    if not is_supported_language(code):
        raise UnsupportedLanguageException(f"Ngôn ngữ không được hỗ trợ: {code}")
    return Language(code.lower())
