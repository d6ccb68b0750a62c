import logging
import os

from resource_loader.download import (ensure_directory, fetch_bytes,
                                      fetch_text, make_filename, write_file)
from resource_loader.extractor import extract_resource_urls, validate_base_url

logger = logging.getLogger(__name__)


def download(url: str, output_dir: str | None = None,
             extensions=()) -> list[str]:
    """Скачивает ресурсы страницы в output_dir.

    Ресурсы загружаются по одному в порядке документа. Первая же
    ошибка прерывает загрузку. Возвращает пути сохраненных файлов.
    """
    if output_dir is None:
        output_dir = os.getcwd()

    # Проверяем URL до обращения к сети
    url = validate_base_url(url)

    logger.info('Загружаем страницу %s', url)
    html_content = fetch_text(url)

    resource_urls = extract_resource_urls(html_content, url, extensions)
    logger.info('Найдено ресурсов: %d', len(resource_urls))
    logger.info('URL ресурсов: %s', resource_urls)

    ensure_directory(output_dir)

    saved_paths = []
    for index, resource_url in enumerate(resource_urls, start=1):
        logger.debug('[%d/%d] Скачиваем %s',
                     index, len(resource_urls), resource_url)
        content = fetch_bytes(resource_url)

        file_path = os.path.join(output_dir, make_filename(resource_url))
        write_file(file_path, content)
        logger.info('Сохранено: %s', file_path)
        saved_paths.append(file_path)

    return saved_paths
