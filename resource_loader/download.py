import os
from urllib.parse import urlparse

import requests

from resource_loader.errors import FetchError, StorageError

DEFAULT_FILENAME = 'default_filename'


def _get(url):
    try:
        response = requests.get(url)
        response.raise_for_status()
    except requests.RequestException as error:
        raise FetchError(url, error) from error
    return response


def fetch_text(url: str) -> str:
    """Скачивает страницу и возвращает ее HTML."""
    return _get(url).text


def fetch_bytes(url: str) -> bytes:
    """Скачивает ресурс и возвращает его содержимое."""
    return _get(url).content


def make_filename(url: str) -> str:
    """Создает имя файла из последнего непустого сегмента пути URL."""
    segments = [segment for segment in urlparse(url).path.split('/')
                if segment]
    if not segments:
        return DEFAULT_FILENAME
    return segments[-1]


def ensure_directory(path) -> None:
    """Создает директорию для ресурсов, если ее еще нет."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as error:
        raise StorageError(path, error) from error


def write_file(path, content: bytes) -> None:
    """Сохраняет ресурс в файл, перезаписывая существующий."""
    try:
        with open(path, 'wb') as file:
            file.write(content)
    except OSError as error:
        raise StorageError(path, error) from error
