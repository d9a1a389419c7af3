import logging
import sys
from logging import StreamHandler, Formatter

FORMAT = '[%(asctime)s: %(levelname)s] %(message)s'


def configure_logging(level='INFO', stream=None):
    """Attach one handler to the root logger; repeated calls only adjust the level."""
    root = logging.getLogger()
    root.setLevel(level)
    if not any(getattr(h, '_quadsolve', False) for h in root.handlers):
        handler = StreamHandler(stream=stream or sys.stderr)
        handler.setFormatter(Formatter(fmt=FORMAT))
        handler._quadsolve = True
        root.addHandler(handler)
    return root
