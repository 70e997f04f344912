"""
# Replace-Rules: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception and warning classes.
"""


class ValidationError(Exception):
    _pattern: str

    def __init__(self, pattern: str):
        super().__init__(f'error: pattern `{pattern}` must use global matching')
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern


class LookupMissWarning(UserWarning):
    pass
