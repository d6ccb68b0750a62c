import argparse
import logging
import os
import sys

from resource_loader.resource_loader import download, logger


def parse_extensions(values):
    """Приводит расширения к виду 'png': без точки, в нижнем регистре."""
    extensions = set()
    for value in values or []:
        for item in value.split(','):
            item = item.strip().lstrip('.').lower()
            if item:
                extensions.add(item)
    return extensions


def main():
    parser = argparse.ArgumentParser(
        description="Resource Loader: скачивает ресурсы веб-страницы")
    parser.add_argument("url", help="URL страницы")
    parser.add_argument("-o", "--output", help="Директория для сохранения",
                        default=os.getcwd())
    parser.add_argument("-e", "--ext", action="append", default=[],
                        help="Расширения файлов для загрузки "
                             "(например: -e jpg,png -e pdf)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Подробный вывод")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr)

    try:
        saved_paths = download(args.url, args.output,
                               parse_extensions(args.ext))
    except Exception as e:
        logger.error(f"Ошибка: {e}")
        sys.exit(1)

    logger.info(f"Скачано файлов: {len(saved_paths)}")
    for file_path in saved_paths:
        print(file_path)


if __name__ == "__main__":
    main()
