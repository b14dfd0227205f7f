import argparse
import json
import sys
from typing import Dict, List, Optional

from flickr_client.client import FlickrClient
from flickr_client.config import CONFIG_FILE, FlickrConfig
from flickr_client.exc import FlickrError
from flickr_client.internal.methods.table import iter_methods
from flickr_client.internal.transport.httpx_transport import HttpxTransport


def confirm_choice(message: str) -> bool:
    """Запрос подтверждения у пользователя"""
    while True:
        choice = input(f"{message} (y/n): ").lower().strip()
        if choice in ["y", "yes", "да", ""]:
            return True
        elif choice in ["n", "no", "нет"]:
            return False
        print("Введите y/n")


def parse_method_args(pairs: Optional[List[str]]) -> Dict[str, str]:
    """Разбор аргументов вида key=value"""
    result = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Аргумент должен быть в формате key=value: {pair}")
        result[key.strip()] = value
    return result


def list_methods(prefix: str) -> None:
    """Вывод таблицы методов"""
    count = 0
    for spec in iter_methods(prefix):
        required = ", ".join(spec.required)
        print(f"{spec.verb:<5} {spec.name}" + (f"  [{required}]" if required else ""))
        count += 1
    print(f"\n📋 Методов: {count}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Вызов методов Flickr REST API")
    parser.add_argument("--method", type=str, help="Имя метода, например flickr.test.echo")
    parser.add_argument(
        "--arg",
        action="append",
        metavar="KEY=VALUE",
        help="Аргумент метода, можно указать несколько раз",
    )
    parser.add_argument("--verb", type=str, help="HTTP метод для метода вне таблицы")
    parser.add_argument("--api-key", type=str, help="API ключ Flickr")
    parser.add_argument("--host", type=str, help="Хост API")
    parser.add_argument("--port", type=int, help="Порт API")
    parser.add_argument(
        "--list", nargs="?", const="flickr", metavar="PREFIX", help="Список методов"
    )
    parser.add_argument(
        "--init-config", action="store_true", help=f"Создать конфиг файл {CONFIG_FILE}"
    )
    parser.add_argument(
        "--force", action="store_true", help="Выполнять без подтверждения"
    )
    return parser


def main(argv: Optional[List[str]] = None):
    """Универсальная команда вызова метода Flickr"""
    args = build_parser().parse_args(argv)

    if args.list:
        list_methods(args.list)
        return

    # Инициализация конфига
    if args.init_config:
        config = FlickrConfig(api_key=args.api_key, host=args.host, port=args.port)
        config.save_to_file()
        print(f"✅ Создан конфиг файл {CONFIG_FILE}")
        return

    file_config = FlickrConfig.from_file()
    final_config = (file_config or FlickrConfig()).merge_with_args(args)

    if not final_config.api_key:
        print(f"❌ Ошибка: API ключ не указан ни в {CONFIG_FILE}, ни в аргументах")
        sys.exit(1)

    if not args.method:
        print("❌ Ошибка: Укажите --method или --list")
        sys.exit(1)

    try:
        method_args = parse_method_args(args.arg)
        client = FlickrClient.from_options(final_config.api_key, final_config.to_options())

        if args.verb:
            request = client.request(args.verb.upper(), args.method, method_args)
        else:
            request = client.call(args.method, method_args)

        print(f"🚀 {request.verb} {request.method_name}")

        with HttpxTransport() as transport:
            result = transport.send(request)

    except (FlickrError, ValueError) as e:
        print(f"❌ Ошибка: {e}")
        sys.exit(1)

    print(json.dumps(result, ensure_ascii=False, indent=2))

    if not file_config and (
        args.force or confirm_choice(f"Сохранить настройки в {CONFIG_FILE}?")
    ):
        final_config.save_to_file()
        print(f"💾 Конфиг сохранен в {CONFIG_FILE}")


if __name__ == "__main__":
    main()
