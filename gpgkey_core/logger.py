import logging, json, sys, time, os

ROOT = "gpgkey"

_FORMATTER = logging.Formatter(
    fmt=json.dumps({
        "ts": "%(asctime)s",
        "level": "%(levelname)s",
        "name": "%(name)s",
        "msg": "%(message)s"
    }),
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
_FORMATTER.converter = time.gmtime  # UTC timestamps


def _has_file(logger, path):
    return any(getattr(h, "baseFilename", None) == path for h in logger.handlers)


def get_logger(name=ROOT, level=None, to_file=None):
    """
    Return a logger under the shared "gpgkey" parent.

    Handlers and level live on the parent only, so `level` and `to_file`
    apply to every gpgkey.* module logger, not just the one returned.
    """
    root = logging.getLogger(ROOT)

    if not root.handlers:
        # stderr: stdout belongs to the CLI's rendered records
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(_FORMATTER)
        root.addHandler(handler)
        if root.level == logging.NOTSET:
            root.setLevel(logging.INFO)

    if level is not None:
        root.setLevel(level)

    if to_file:
        path = os.path.abspath(to_file)
        if not _has_file(root, path):
            os.makedirs(os.path.dirname(path), exist_ok=True)
            file_handler = logging.FileHandler(path)
            file_handler.setFormatter(_FORMATTER)
            root.addHandler(file_handler)

    return logging.getLogger(name)
