'''snapopen CLI 진입점(KR). snapopen CLI entrypoint (EN).'''

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Sequence

import click

from charset import detect
from editorio import (
    EditorIOConfig,
    EditorIOError,
    RecentFiles,
    change_encoding,
    configure_logging,
    open_text_file,
    parse_filenames,
    save_text_file,
)
from editorio.logging import utc_now
from snapopen import snap_open

DEFAULT_LOG = Path('.cache/snapopen.log')


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=DEFAULT_LOG,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context, config_file: Path | None, verbose: bool, quiet: bool, log_file: Path
) -> None:
    '''편집기 파일 도우미 CLI · Editor file helper CLI.'''

    level = 'INFO'
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    configure_logging(log_file, level=level)
    config = EditorIOConfig.from_file(config_file) if config_file else EditorIOConfig()
    recent = RecentFiles(limit=config.file_io.recent_limit)
    ctx.obj = {'config': config, 'recent': recent, 'log_file': log_file}


@cli.command()
@click.argument('paths', nargs=-1, type=click.Path(path_type=Path))
@click.option(
    '--filter',
    '-f',
    'file_patterns',
    multiple=True,
    help='파일 제외 패턴(! 접두사는 반전) · File exclusion pattern (! negates)',
)
@click.option(
    '--folder',
    '-F',
    'folder_patterns',
    multiple=True,
    help='폴더 제외 패턴 · Folder exclusion pattern',
)
@click.option('--depth', type=click.IntRange(min=0), default=None, help='최대 깊이 · Max depth')
@click.option('--max', 'max_files', type=click.IntRange(min=1), default=None, help='최대 파일 수 · Max files')
@click.option('--exclusive', is_flag=True, help='설정 경로 제외 · Ignore configured paths')
@click.pass_context
def scan(
    ctx: click.Context,
    paths: Sequence[Path],
    file_patterns: Sequence[str],
    folder_patterns: Sequence[str],
    depth: int | None,
    max_files: int | None,
    exclusive: bool,
) -> None:
    '''열 수 있는 파일을 나열한다 · List files available to open.'''

    config: EditorIOConfig = ctx.obj['config']
    settings = config.snapopen
    if max_files is not None:
        settings = settings.model_copy(update={'max_files': max_files})
    try:
        result = snap_open(
            [str(path) for path in paths],
            {'files': list(file_patterns), 'folders': list(folder_patterns)},
            exclusive=exclusive,
            depth=depth,
            settings=settings,
        )
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    if result.truncated:
        click.echo(
            f'{settings.max_files} files or more were found. '
            f'Showing the first {settings.max_files}',
            err=True,
        )
    click.echo(json.dumps(result.to_payload(), ensure_ascii=False))


@cli.command('detect')
@click.argument('path', type=click.Path(path_type=Path, dir_okay=False))
def detect_command(path: Path) -> None:
    '''파일 인코딩을 감지한다 · Detect a file's encoding.'''

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise click.ClickException(f'cannot read {path}: {exc}') from exc
    result = detect(data)
    payload = {
        'path': str(path),
        'encoding': result.encoding.codec if result.encoding else None,
        'bom': result.bom.hex() if result.bom else None,
        'binary': result.is_binary,
    }
    click.echo(json.dumps(payload, ensure_ascii=False))


@cli.command('open')
@click.argument('paths', nargs=-1, required=True)
@click.pass_context
def open_command(ctx: click.Context, paths: Sequence[str]) -> None:
    '''파일을 열어 요약을 출력한다 · Open files and print a summary.'''

    config: EditorIOConfig = ctx.obj['config']
    recent: RecentFiles = ctx.obj['recent']
    summaries: list[dict[str, object]] = []
    for name in parse_filenames('\n'.join(paths)):
        try:
            document = open_text_file(
                name, try_encodings=config.file_io.try_encodings, recent=recent
            )
        except OSError as exc:
            raise click.ClickException(f'cannot open {name}: {exc}') from exc
        summaries.append(
            {
                'path': str(document.path),
                'encoding': document.encoding,
                'bom': document.bom.hex() if document.bom else None,
                'eol': document.eol_mode.value,
                'characters': len(document.text),
            }
        )
    click.echo(
        json.dumps(
            {'files': summaries, 'recent': recent.as_list(), 'timestamp': utc_now()},
            ensure_ascii=False,
        )
    )


@cli.command()
@click.argument('path', type=click.Path(path_type=Path, dir_okay=False, exists=True))
@click.option('--to', 'target', required=True, help='대상 인코딩 · Target encoding')
@click.pass_context
def convert(ctx: click.Context, path: Path, target: str) -> None:
    '''파일을 다른 인코딩으로 다시 저장한다 · Re-save a file in another encoding.'''

    config: EditorIOConfig = ctx.obj['config']
    document = open_text_file(path, try_encodings=config.file_io.try_encodings)
    previous = document.encoding
    saved = save_text_file(change_encoding(document, target))
    click.echo(
        json.dumps(
            {'path': str(saved.path), 'from': previous, 'to': saved.encoding},
            ensure_ascii=False,
        )
    )


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    args = sys.argv[1:] if argv is None else list(argv)
    try:
        rv = cli.main(args=args, prog_name='snapopen', standalone_mode=False)
    except EditorIOError as exc:
        click.echo(json.dumps({'error': str(exc)}), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo('Aborted!', err=True)
        return 1
    # --help exits early and hands back its exit code
    return rv if isinstance(rv, int) else 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
