# === FILE: robocheck/cli.py ===
#!/usr/bin/env python3
"""
Командная строка robocheck.

Команды:
  check     Проверить доступ USER_AGENT к одному или нескольким URL
  validate  Проверить, что в robots.txt есть хотя бы одна распознанная директива
  report    Вывести/сохранить JSON-отчёт разбора
  config    Показать текущую конфигурацию парсера

Общие опции:
  --config PATH       YAML/JSON-конфиг парсера (по умолчанию configs/robocheck.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

ROBOTS_FILE может быть "-" для чтения из stdin.

Пример:
  robocheck check robots.txt "MyBot/1.0" https://example.com/admin /public
"""
import sys
from pathlib import Path

import click

from robocheck import __version__
from robocheck.api import is_valid
from robocheck.config import load_config
from robocheck.logger import init_logging
from robocheck.matcher.resolver import extract_path, resolve
from robocheck.parser.robots_parser import parse_robots_txt
from robocheck.report.json_report import dumps_report, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _load_report(ctx, robots_file):
    document = robots_file.read()
    return parse_robots_txt(document, ctx.obj['config'])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='robocheck, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """robots.txt parser and Robots Exclusion Protocol checker."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.File('rb'))
@click.argument('user_agent')
@click.argument('urls', nargs=-1, required=True)
@click.option('--explain', is_flag=True, help='Показать правило, принявшее решение')
@click.pass_context
def check(ctx, robots_file, user_agent, urls, explain):
    """Проверить доступ USER_AGENT к URLS. Код выхода 1, если хоть один URL запрещён."""
    report = _load_report(ctx, robots_file)
    denied = False
    for url in urls:
        decision = resolve(report, user_agent, extract_path(url))
        verdict = 'allowed' if decision.allowed else 'disallowed'
        line = f'{verdict}\t{url}'
        if explain:
            if decision.rule is None:
                line += '\t(no matching rule)'
            else:
                rule = decision.rule
                line += f'\t{rule.verdict.value}: {rule.pattern.raw} (line {rule.line_number})'
        click.echo(line)
        denied = denied or not decision.allowed
    if denied:
        sys.exit(1)


@cli.command('validate', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.File('rb'))
@click.pass_context
def validate(ctx, robots_file):
    """Проверить, что robots.txt пуст или содержит распознанные директивы."""
    valid = is_valid(robots_file.read(), ctx.obj['config'])
    click.echo('valid' if valid else 'invalid')
    if not valid:
        sys.exit(1)


@cli.command('report', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.File('rb'))
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.pass_context
def report(ctx, robots_file, json_output, pretty):
    """Вывести разбор robots.txt в JSON."""
    parsed = _load_report(ctx, robots_file)
    if not json_output:
        click.echo(dumps_report(parsed, pretty=pretty))
        return
    try:
        saved = render_json(parsed, json_output, pretty=pretty)
    except OSError as e:
        print_error(f'Ошибка при сохранении JSON: {e}')
    click.echo(f'JSON report: {saved}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
