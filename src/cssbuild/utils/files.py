from pathlib import Path

WORKDIR_NAME = '.cssbuild'


def get_project_root() -> Path:
    """
    Find the project root by searching upwards from the Current Working Directory.
    Stops at the first directory containing a marker file.
    """
    current_path = Path.cwd()

    markers = {'.git', 'pyproject.toml', WORKDIR_NAME, 'requirements.txt'}

    for parent in [current_path] + list(current_path.parents):
        if any((parent / marker).exists() for marker in markers):
            return parent

    # No markers (e.g. running in /tmp)
    return current_path


def get_logs_path() -> Path:
    """
    Returns the path to the log directory in .cssbuild.
    """
    return get_project_root() / WORKDIR_NAME / 'logs'


def is_initialized() -> bool:
    """
    Checks if the .cssbuild directory exists in the project root.
    """
    workdir = get_project_root() / WORKDIR_NAME
    return workdir.is_dir() and (workdir / '.gitignore').exists()


def init_cssbuild(dir_name: str = 'logs') -> Path:
    """
    Initializes the .cssbuild directory and returns the requested subdirectory.
    """
    workdir = get_project_root() / WORKDIR_NAME
    target_dir = workdir / dir_name

    target_dir.mkdir(parents=True, exist_ok=True)

    # Keep generated files out of source control
    gitignore = workdir / '.gitignore'
    if not gitignore.exists():
        gitignore.write_text('# Automatically created by cssbuild\n*\n')

    return target_dir
