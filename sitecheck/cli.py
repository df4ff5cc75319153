# === FILE: sitecheck/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска проверок SiteCheck через командную строку.

Команды:
  check URLS_FILE  Проверить главные страницы и ссылки, записать лог
  config           Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --max-links INT     Сколько ссылок со страницы проверять (override max_links)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда check опции:
  --output PATH       Текстовый лог (default: test-log.txt)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблонами
  --engine NAME       http или playwright (override engine)
  --print             Вывести текстовый лог в stdout

Дополнительно:
  --version, -v       Показать версию SiteCheck

Пример:
  sitecheck check urls.txt --output test-log.txt --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click

from sitecheck import __version__
from sitecheck.config import load_config
from sitecheck.engine import run_checks
from sitecheck.logger import DEFAULT_FORMAT, init_logging
from sitecheck.report.html_report import render_html
from sitecheck.report.json_report import render_json
from sitecheck.report.text_report import DEFAULT_LOG_PATH, render_text, write_text
from sitecheck.utils import read_seed_urls

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCheck, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML или JSON.'
)
@click.option(
    '--max-links', '-l', 'max_links',
    type=click.IntRange(min=0),
    default=None,
    help='Сколько ссылок со страницы проверять (override max_links)'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, max_links, log_level, log_file, log_format):
    """Группа команд SiteCheck CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    if max_links is not None:
        cfg = cfg.model_copy(update={'max_links': max_links})
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument(
    'urls_file',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    '--output', '-o', 'text_output',
    default=DEFAULT_LOG_PATH,
    show_default=True,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Куда записать текстовый лог'
)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблонами (по умолчанию встроенные)'
)
@click.option(
    '--engine', 'engine',
    default=None,
    type=click.Choice(['http', 'playwright']),
    help='Движок загрузки страниц (override engine)'
)
@click.option(
    '--print', 'print_log', is_flag=True,
    help='Вывести текстовый лог в stdout'
)
@click.pass_context
def check(ctx, urls_file, text_output, json_output, html_output, template_dir, engine, print_log):
    """Проверить сайты из URLS_FILE и записать отчёты."""
    cfg = ctx.obj['config']
    if engine is not None:
        cfg = cfg.model_copy(update={'engine': engine})

    try:
        urls = read_seed_urls(urls_file)
    except OSError as e:
        print_error(f'Ошибка чтения списка URL: {e}')
    if not urls:
        print_error(f'Список URL пуст: {urls_file}')

    click.echo(f'Checking {len(urls)} site(s) with engine: {cfg.engine}')
    try:
        report = asyncio.run(run_checks(urls, cfg))
    except Exception as e:
        print_error(f'Ошибка при проверке: {e}')

    try:
        saved_text = write_text(report, text_output)
        click.echo(f'Text log: {saved_text}')
    except OSError as e:
        print_error(f'Ошибка при сохранении лога: {e}')

    if print_log:
        click.echo(render_text(report), nl=False)

    # JSON-отчёт
    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    # HTML-отчёт
    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')

    click.echo(f'Passed: {len(report.passed)}, failed: {len(report.failed)}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
