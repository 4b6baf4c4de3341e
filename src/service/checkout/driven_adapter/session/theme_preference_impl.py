from src.service.checkout.app.interface.i_theme_accessor import IThemeAccessor


THEMES = ('dark', 'light')


class ThemePreference(IThemeAccessor):
    """Dark by default, like the cinema site"""

    def __init__(self, *, initial: str = 'dark') -> None:
        self._theme = initial if initial in THEMES else 'dark'

    @property
    def theme(self) -> str:
        return self._theme

    def toggle(self) -> str:
        self._theme = 'light' if self._theme == 'dark' else 'dark'
        return self._theme
