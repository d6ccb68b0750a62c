class ResourceLoaderError(Exception):
    """Базовая ошибка загрузчика ресурсов."""


class ConfigurationError(ResourceLoaderError):
    """URL страницы нельзя использовать как базовый."""

    def __init__(self, url):
        self.url = url
        super().__init__(f'Некорректный базовый URL: {url!r}')


class NoMatchingResourcesError(ResourceLoaderError):
    """На странице не найдено ни одного подходящего ресурса."""

    def __init__(self, extensions):
        self.extensions = frozenset(extensions)
        requested = ', '.join(sorted(self.extensions)) or 'none'
        super().__init__(
            f'Не найдено ресурсов с расширениями: {requested}')


class FetchError(ResourceLoaderError):
    """Ошибка сети или HTTP при загрузке URL."""

    def __init__(self, url, reason):
        self.url = url
        super().__init__(f'Ошибка загрузки {url}: {reason}')


class StorageError(ResourceLoaderError):
    """Ошибка при создании директории или записи файла."""

    def __init__(self, path, reason):
        self.path = path
        super().__init__(f'Ошибка записи {path}: {reason}')
