import logging

import pytest

import cssbuild.utils.files
from cssbuild.utils.logging import resolve_level, setup_local_logging


@pytest.fixture
def restore_root_logger():
    root_logger = logging.getLogger()
    level = root_logger.level
    handlers = list(root_logger.handlers)
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
            root_logger.removeHandler(handler)
    root_logger.setLevel(level)


@pytest.mark.parametrize(
    'name, expected',
    [
        ('debug', logging.DEBUG),
        ('INFO', logging.INFO),
        ('warning', logging.WARNING),
        ('ALL', logging.NOTSET),
        ('nonsense', logging.DEBUG),
        ('basic_format', logging.DEBUG),
    ],
)
def test_resolve_level(name, expected):
    assert resolve_level(name) == expected


def test_setup_local_logging_writes_file(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setattr(cssbuild.utils.files, 'get_project_root', lambda: tmp_path)

    log_file = setup_local_logging('INFO')
    logging.getLogger('cssbuild.test').info('hello from the test')
    for handler in restore_root_logger.handlers:
        handler.flush()

    assert log_file.parent == tmp_path / '.cssbuild' / 'logs'
    assert log_file.name.startswith('run_')
    assert restore_root_logger.level == logging.INFO
    assert 'hello from the test' in log_file.read_text()


def test_setup_local_logging_initializes_workdir(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setattr(cssbuild.utils.files, 'get_project_root', lambda: tmp_path)
    assert not cssbuild.utils.files.is_initialized()

    setup_local_logging('DEBUG')

    assert cssbuild.utils.files.is_initialized()
    assert (tmp_path / '.cssbuild' / '.gitignore').read_text() == '# Automatically created by cssbuild\n*\n'


def test_setup_local_logging_keeps_existing_workdir(monkeypatch, tmp_path, restore_root_logger):
    monkeypatch.setattr(cssbuild.utils.files, 'get_project_root', lambda: tmp_path)
    workdir = tmp_path / '.cssbuild'
    workdir.mkdir()
    (workdir / '.gitignore').write_text('custom\n')

    log_file = setup_local_logging('INFO')

    assert log_file.parent == workdir / 'logs'
    assert (workdir / '.gitignore').read_text() == 'custom\n'
