"""
# Snippet-Generator: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class EntryPointSnippetException(Exception):
    pass


class InvalidKeywordNameException(Exception):
    pass


class KeywordCollisionException(Exception):
    _keyword: str

    def __init__(self, keyword: str):
        super().__init__(f'`{keyword}` is a built-in C++17 keyword')
        self._keyword = keyword

    @property
    def keyword(self) -> str:
        return self._keyword


class PromptCancelledException(Exception):
    pass


class UnrecognisedKeywordException(Exception):
    _keyword: str

    def __init__(self, keyword: str):
        super().__init__(f'no such custom keyword `{keyword}`')
        self._keyword = keyword

    @property
    def keyword(self) -> str:
        return self._keyword
