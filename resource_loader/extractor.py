from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from resource_loader.errors import ConfigurationError, NoMatchingResourcesError

# Элементы, ресурс которых указан в src
MEDIA_TAGS = ('img', 'video', 'audio', 'source', 'embed')


def _is_absolute(url: str) -> bool:
    """Проверяет, что у URL есть схема и хост."""
    try:
        parsed = urlparse(url)
        # Доступ к port бросает ValueError при некорректном порте
        parsed.port
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.hostname)


def validate_base_url(base_url: str) -> str:
    """Проверяет базовый URL страницы.

    Бросает ConfigurationError, если URL пустой, относительный
    или не разбирается.
    """
    if not isinstance(base_url, str) or not _is_absolute(base_url.strip()):
        raise ConfigurationError(base_url)
    return base_url.strip()


def resolve_reference(raw: str, base_url: str) -> str | None:
    """Приводит ссылку из href/src к абсолютному URL.

    Возвращает None, если ссылку нельзя разрешить в URL со схемой
    и хостом (mailto:, javascript:, битые адреса).
    """
    try:
        resolved = urljoin(base_url, raw.strip())
    except ValueError:
        return None
    if not _is_absolute(resolved):
        return None
    return resolved


def get_extension(url: str) -> str | None:
    """Возвращает расширение последнего сегмента пути без точки."""
    last_segment = urlparse(url).path.rsplit('/', 1)[-1]
    if '.' not in last_segment:
        return None
    extension = last_segment.rsplit('.', 1)[1]
    return extension or None


def _is_resource_tag(tag) -> bool:
    if tag.name == 'a':
        return tag.has_attr('href')
    return tag.name in MEDIA_TAGS and tag.has_attr('src')


def extract_resource_urls(html_content: str, base_url: str,
                          extensions=()) -> list[str]:
    """Находит абсолютные URL ресурсов страницы.

    Берет href у ссылок и src у изображений и медиа-элементов
    в порядке документа, без удаления дубликатов. Если extensions
    не пуст, оставляет только URL с расширением из этого набора
    (сравнение с учетом регистра).

    extensions ожидается набором строк; одиночная строка
    не принимается.

    Бросает ConfigurationError для некорректного base_url и
    NoMatchingResourcesError, если ничего не найдено или парсер
    не смог разобрать документ.
    """
    base_url = validate_base_url(base_url)
    if isinstance(extensions, str):
        raise TypeError(
            f'extensions должен быть набором строк, а не строкой: '
            f'{extensions!r}')
    allowed = frozenset(extensions)

    try:
        soup = BeautifulSoup(html_content, 'html.parser')
    except ParserRejectedMarkup as error:
        raise NoMatchingResourcesError(allowed) from error
    resource_urls = []

    for tag in soup.find_all(_is_resource_tag):
        # href приоритетнее src
        raw = tag.get('href') if tag.has_attr('href') else tag.get('src')
        if not raw or not raw.strip():
            continue

        resolved = resolve_reference(raw, base_url)
        if resolved is None:
            continue

        if allowed and get_extension(resolved) not in allowed:
            continue

        resource_urls.append(resolved)

    if not resource_urls:
        raise NoMatchingResourcesError(allowed)
    return resource_urls
