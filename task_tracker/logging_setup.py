# task_tracker/logging_setup.py
import logging
import sys


def configure_logging(app):
    """Send app and request logs to stderr at the configured level.

    Call once from create_app, before the first log line.
    """
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO

    fmt = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(fmt)

    # Replace Flask's default handler to avoid duplicate lines on reload.
    for h in list(app.logger.handlers):
        app.logger.removeHandler(h)
    app.logger.addHandler(handler)
    app.logger.setLevel(level)
    app.logger.propagate = False

    # waitress logs its own startup and queue warnings
    logging.getLogger('waitress').setLevel(level)
